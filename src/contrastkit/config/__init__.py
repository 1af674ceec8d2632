"""Configuration for the contrast engine."""
from __future__ import annotations

from contrastkit.config.options import (
    AA_LARGE,
    AA_NORMAL,
    AAA_NORMAL,
    POLICY_FIELDS,
    RATIO_FORMULAS,
    ContrastOptions,
    load_options,
)

__all__ = [
    "ContrastOptions",
    "load_options",
    "AA_LARGE",
    "AA_NORMAL",
    "AAA_NORMAL",
    "RATIO_FORMULAS",
    "POLICY_FIELDS",
]
