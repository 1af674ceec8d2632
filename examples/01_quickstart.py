#!/usr/bin/env python3
"""Example: Quickstart — contrast-kit

Minimal working example: parse a few background colors, inspect their
luminance, and pick readable text and link colors for each.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install contrast-kit
"""
from __future__ import annotations

import contrastkit
from contrastkit import ContrastRole

BACKGROUNDS = ["#000000", "#FFFFFF", "orange", "0.2,0.4,0.6", "#0A84FF"]


def main() -> None:
    print(f"contrast-kit version: {contrastkit.__version__}")

    for text in BACKGROUNDS:
        background = contrastkit.parse_color(text)

        # Step 1: How bright is the background?
        luminance = contrastkit.relative_luminance(background)

        # Step 2: Pick the main text color
        primary = contrastkit.contrasting_color(background)
        ratio = contrastkit.contrast_ratio(primary, background)

        # Step 3: Pick a link color for the same background
        link = contrastkit.contrasting_color(background, ContrastRole.LINK)

        print(
            f"{background.to_hex():>9}  L={luminance:.4f}  "
            f"text={primary.to_hex()} (ratio {ratio:.2f})  link={link.to_hex()}"
        )


if __name__ == "__main__":
    main()
