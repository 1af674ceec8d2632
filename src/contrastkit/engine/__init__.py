"""Contrast engine module.

Exports luminance and ratio functions, the role policies and their
registry, and the ``ContrastEngine``.
"""
from __future__ import annotations

from contrastkit.engine.engine import (
    ContrastEngine,
    ContrastResult,
    contrasting_color,
    contrasting_palette,
)
from contrastkit.engine.luminance import (
    contrast_ratio,
    has_good_contrast,
    is_dark,
    linearize_channel,
    relative_luminance,
    wcag_contrast_ratio,
)
from contrastkit.engine.policies import RolePolicy, policy_registry
from contrastkit.roles import ContrastRole

__all__ = [
    "ContrastEngine",
    "ContrastResult",
    "ContrastRole",
    "RolePolicy",
    "policy_registry",
    "contrasting_color",
    "contrasting_palette",
    "contrast_ratio",
    "wcag_contrast_ratio",
    "has_good_contrast",
    "is_dark",
    "linearize_channel",
    "relative_luminance",
]
