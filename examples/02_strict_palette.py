#!/usr/bin/env python3
"""Example: Strict palettes and export — contrast-kit

Builds a full palette for one background twice, once leniently and once
in strict mode, then exports the strict palette as YAML.

Usage:
    python examples/02_strict_palette.py [BACKGROUND]
"""
from __future__ import annotations

import sys

from contrastkit import ContrastOptions, parse_color
from contrastkit.engine import ContrastEngine
from contrastkit.export import PaletteSerializer


def main(argv: list[str]) -> None:
    background = parse_color(argv[0] if argv else "#000000")

    lenient = ContrastEngine().palette(background)
    strict = ContrastEngine(ContrastOptions(strict=True, ratio="wcag")).palette(background)

    print(f"Background {background.to_hex()}")
    for role, result in lenient.items():
        checked = strict[role]
        note = " (fallback)" if checked.fell_back else ""
        print(
            f"  {role.value:<10} lenient={result.color.to_hex()} ratio {result.ratio:5.2f}  "
            f"strict={checked.color.to_hex()} ratio {checked.ratio:5.2f}{note}"
        )

    print()
    print(PaletteSerializer().to_yaml(background, strict))


if __name__ == "__main__":
    main(sys.argv[1:])
