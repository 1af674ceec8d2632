"""Named colors used as contrast candidates.

The chromatic entries follow the iOS system palette (light appearance),
which is what the link policies were tuned against.
"""
from __future__ import annotations

from contrastkit.color.model import Color

WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
CLEAR = Color(0.0, 0.0, 0.0, 0.0)

BLUE = Color(0.0, 122 / 255, 1.0)
YELLOW = Color(1.0, 204 / 255, 0.0)
ORANGE = Color(1.0, 149 / 255, 0.0)
RED = Color(1.0, 59 / 255, 48 / 255)
GREEN = Color(52 / 255, 199 / 255, 89 / 255)
PURPLE = Color(175 / 255, 82 / 255, 222 / 255)
GRAY = Color(142 / 255, 142 / 255, 147 / 255)

NAMED_COLORS: dict[str, Color] = {
    "white": WHITE,
    "black": BLACK,
    "clear": CLEAR,
    "blue": BLUE,
    "yellow": YELLOW,
    "orange": ORANGE,
    "red": RED,
    "green": GREEN,
    "purple": PURPLE,
    "gray": GRAY,
}
