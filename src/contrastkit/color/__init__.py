"""Color model: the ``Color`` value type, named colors and text parsing."""
from __future__ import annotations

from contrastkit.color.model import HSBA, RGBA, Color
from contrastkit.color.palette import BLACK, BLUE, NAMED_COLORS, WHITE, YELLOW
from contrastkit.color.parsing import parse_color, parse_hex

__all__ = [
    "Color",
    "RGBA",
    "HSBA",
    "BLACK",
    "WHITE",
    "BLUE",
    "YELLOW",
    "NAMED_COLORS",
    "parse_color",
    "parse_hex",
]
