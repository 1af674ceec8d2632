"""The ``Color`` value type.

A ``Color`` stores four normalized RGBA components and converts to and
from hue/saturation/brightness (HSBA) on demand.  Instances are frozen
and hashable; every engine operation builds a new one rather than
mutating its input.

Usage
-----
::

    from contrastkit.color import Color

    orange = Color.from_rgba(1.0, 0.5, 0.0)
    hue, saturation, brightness, alpha = orange.to_hsba()
    same = Color.from_hsba(hue, saturation, brightness, alpha)
"""
from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass

from contrastkit.errors import InvalidColorError

RGBA = tuple[float, float, float, float]
HSBA = tuple[float, float, float, float]


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _check_components(components: tuple[object, ...]) -> None:
    """Raise ``InvalidColorError`` unless every component is a finite real number."""
    for component in components:
        if isinstance(component, bool) or not isinstance(component, (int, float)):
            raise InvalidColorError(components, "components must be real numbers")
        if not math.isfinite(component):
            raise InvalidColorError(components, "components must be finite")


@dataclass(frozen=True)
class Color:
    """An immutable color with normalized RGBA components.

    Components are expected in ``[0, 1]`` but values outside that range
    are stored unchanged; callers that need strict validity use
    :meth:`clamped`.  Non-finite components are rejected.

    Parameters
    ----------
    red, green, blue:
        Channel intensities.
    alpha:
        Opacity, ``1.0`` for fully opaque.
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        components = (self.red, self.green, self.blue, self.alpha)
        _check_components(components)
        # Normalize ints so equality and hashing are stable
        for name, component in zip(("red", "green", "blue", "alpha"), components):
            object.__setattr__(self, name, float(component))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_rgba(
        cls, red: float, green: float, blue: float, alpha: float = 1.0
    ) -> "Color":
        """Build a color from RGBA components."""
        return cls(red, green, blue, alpha)

    @classmethod
    def from_hsba(
        cls, hue: float, saturation: float, brightness: float, alpha: float = 1.0
    ) -> "Color":
        """Build a color from hue/saturation/brightness components.

        Parameters
        ----------
        hue:
            Hue as a fraction of a full turn, ``[0, 1]``.
        saturation:
            Chroma relative to brightness, ``[0, 1]``.
        brightness:
            Value of the strongest channel, ``[0, 1]``.
        alpha:
            Opacity, carried through unchanged.
        """
        _check_components((hue, saturation, brightness, alpha))
        red, green, blue = colorsys.hsv_to_rgb(hue % 1.0, saturation, brightness)
        return cls(red, green, blue, alpha)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def to_rgba(self) -> RGBA:
        """Return ``(red, green, blue, alpha)``."""
        return (self.red, self.green, self.blue, self.alpha)

    def to_hsba(self) -> HSBA:
        """Return ``(hue, saturation, brightness, alpha)``.

        Hue and saturation are both ``0.0`` for achromatic colors (all
        channels equal), which includes pure black.
        """
        hue, saturation, brightness = colorsys.rgb_to_hsv(self.red, self.green, self.blue)
        return (hue, saturation, brightness, self.alpha)

    @property
    def rgb(self) -> tuple[float, float, float]:
        """The three color channels without alpha."""
        return (self.red, self.green, self.blue)

    # ------------------------------------------------------------------
    # Derived colors
    # ------------------------------------------------------------------

    def clamped(self) -> "Color":
        """Return a copy with every component clamped to ``[0, 1]``."""
        return Color(
            _clamp(self.red), _clamp(self.green), _clamp(self.blue), _clamp(self.alpha)
        )

    def shifted(self, delta: float) -> "Color":
        """Return an opaque copy with ``delta`` added to each RGB channel.

        Each channel is clamped to ``[0, 1]`` after the shift.
        """
        return Color(
            _clamp(self.red + delta),
            _clamp(self.green + delta),
            _clamp(self.blue + delta),
        )

    def with_alpha(self, alpha: float) -> "Color":
        """Return a copy with a different alpha component."""
        return Color(self.red, self.green, self.blue, alpha)

    def to_hex(self) -> str:
        """Return ``#RRGGBB`` (or ``#RRGGBBAA`` when not fully opaque)."""
        channels = [round(_clamp(c) * 255) for c in self.rgb]
        text = "#" + "".join(f"{c:02X}" for c in channels)
        if self.alpha < 1.0:
            text += f"{round(_clamp(self.alpha) * 255):02X}"
        return text

    def __str__(self) -> str:
        return self.to_hex()
