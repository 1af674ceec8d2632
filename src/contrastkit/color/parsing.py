"""Text forms of colors.

``parse_color`` accepts:

* hex: ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` (the ``#`` is optional)
* comma separated floats in ``[0, 1]``: ``r,g,b`` or ``r,g,b,a``
* a palette name such as ``"orange"`` (case-insensitive)
"""
from __future__ import annotations

import re

from contrastkit.color.model import Color
from contrastkit.color.palette import NAMED_COLORS
from contrastkit.errors import InvalidColorError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def parse_hex(text: str) -> Color:
    """Parse a ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` string."""
    match = _HEX_RE.match(text.strip())
    if match is None:
        raise InvalidColorError(text, "expected #RGB, #RRGGBB or #RRGGBBAA")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    channels = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
    return Color(*channels)


def parse_components(text: str) -> Color:
    """Parse ``"r,g,b"`` or ``"r,g,b,a"`` with float components."""
    parts = [part.strip() for part in text.split(",")]
    if len(parts) not in (3, 4):
        raise InvalidColorError(text, "expected 3 or 4 comma separated components")
    try:
        values = [float(part) for part in parts]
    except ValueError:
        raise InvalidColorError(text, "components must be numbers") from None
    return Color(*values)


def parse_color(text: str) -> Color:
    """Parse any supported text form into a ``Color``.

    Raises
    ------
    InvalidColorError
        If ``text`` matches none of the supported forms.
    """
    candidate = text.strip()
    if not candidate:
        raise InvalidColorError(text, "empty color")
    named = NAMED_COLORS.get(candidate.lower())
    if named is not None:
        return named
    if "," in candidate:
        return parse_components(candidate)
    return parse_hex(candidate)
