"""Relative luminance and contrast ratios.

Luminance follows the WCAG 2.x definition: each sRGB channel is
linearized, then weighted with the Rec. 709 coefficients.

Two ratio functions are provided:

``contrast_ratio(fg, bg)``
    ``(L(fg) + 0.05) / (L(bg) + 0.05)``.  The foreground is always the
    numerator, so the result is below ``1.0`` whenever the foreground is
    darker than the background and ``contrast_ratio(a, b)`` differs from
    ``contrast_ratio(b, a)``.  Every policy in this package uses this form
    unless ``ratio="wcag"`` is requested.

``wcag_contrast_ratio(a, b)``
    The textbook ``(max + 0.05) / (min + 0.05)`` form, symmetric and
    always ``>= 1.0``.
"""
from __future__ import annotations

from collections.abc import Callable

from contrastkit.color.model import Color

LINEAR_THRESHOLD: float = 0.03928
LUMINANCE_OFFSET: float = 0.05

RED_WEIGHT: float = 0.2126
GREEN_WEIGHT: float = 0.7152
BLUE_WEIGHT: float = 0.0722

RatioFunction = Callable[[Color, Color], float]


def linearize_channel(component: float) -> float:
    """Convert one gamma-encoded sRGB component to linear light."""
    if component <= LINEAR_THRESHOLD:
        return component / 12.92
    return ((component + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    """Return the relative luminance of ``color``; alpha is ignored."""
    return (
        RED_WEIGHT * linearize_channel(color.red)
        + GREEN_WEIGHT * linearize_channel(color.green)
        + BLUE_WEIGHT * linearize_channel(color.blue)
    )


def contrast_ratio(foreground: Color, background: Color) -> float:
    """Return the foreground-over-background ratio (not symmetrized)."""
    return (relative_luminance(foreground) + LUMINANCE_OFFSET) / (
        relative_luminance(background) + LUMINANCE_OFFSET
    )


def wcag_contrast_ratio(first: Color, second: Color) -> float:
    """Return the symmetric WCAG contrast ratio, in ``[1, 21]``."""
    l1 = relative_luminance(first)
    l2 = relative_luminance(second)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + LUMINANCE_OFFSET) / (darker + LUMINANCE_OFFSET)


def ratio_function(name: str) -> RatioFunction:
    """Return the ratio function registered under ``name``.

    Raises
    ------
    ValueError
        If ``name`` is neither ``"asymmetric"`` nor ``"wcag"``.
    """
    if name == "asymmetric":
        return contrast_ratio
    if name == "wcag":
        return wcag_contrast_ratio
    raise ValueError(f"Unknown ratio formula {name!r}; expected 'asymmetric' or 'wcag'")


def has_good_contrast(
    foreground: Color,
    background: Color,
    threshold: float,
    *,
    ratio: str = "asymmetric",
) -> bool:
    """Return ``True`` if the ratio of ``foreground`` over ``background`` meets ``threshold``.

    Parameters
    ----------
    foreground:
        Candidate text or accent color.
    background:
        Color the candidate is drawn on.
    threshold:
        Minimum acceptable ratio, e.g. ``4.5`` for WCAG AA body text.
    ratio:
        ``"asymmetric"`` (default) or ``"wcag"``.
    """
    return ratio_function(ratio)(foreground, background) >= threshold


def is_dark(background: Color, threshold: float) -> bool:
    """Return ``True`` if ``background`` needs a light foreground.

    The background counts as dark when its own ratio over pure black
    stays below ``threshold``: ``(L(bg) + 0.05) / 0.05 < threshold``.
    """
    return (relative_luminance(background) + LUMINANCE_OFFSET) / LUMINANCE_OFFSET < threshold
