"""contrast-kit — pick readable foreground colors for any background.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import contrastkit
    from contrastkit import Color, ContrastRole

    background = Color.from_rgba(0.1, 0.2, 0.4)

    # Luminance and contrast
    contrastkit.relative_luminance(background)
    contrastkit.contrast_ratio(contrastkit.parse_color("white"), background)

    # Foreground for a role
    text = contrastkit.contrasting_color(background, ContrastRole.PRIMARY)
    link = contrastkit.contrasting_color(background, "link")

    # Every role at once
    palette = contrastkit.contrasting_palette(background)

    contrastkit.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from contrastkit.color.model import Color
from contrastkit.config.options import ContrastOptions
from contrastkit.roles import ContrastRole

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from pathlib import Path


def relative_luminance(color: Color) -> float:
    """Return the WCAG relative luminance of ``color`` in ``[0, 1]``.

    Alpha is ignored.
    """
    from contrastkit.engine.luminance import relative_luminance as _relative_luminance

    return _relative_luminance(color)


def contrast_ratio(foreground: Color, background: Color) -> float:
    """Return ``(L(fg) + 0.05) / (L(bg) + 0.05)``.

    The ratio is not symmetrized: it drops below ``1.0`` when the
    foreground is darker than the background.  Use
    ``contrastkit.engine.wcag_contrast_ratio`` for the symmetric form.
    """
    from contrastkit.engine.luminance import contrast_ratio as _contrast_ratio

    return _contrast_ratio(foreground, background)


def has_good_contrast(foreground: Color, background: Color, threshold: float) -> bool:
    """Return ``True`` if ``contrast_ratio(foreground, background) >= threshold``."""
    from contrastkit.engine.luminance import has_good_contrast as _has_good_contrast

    return _has_good_contrast(foreground, background, threshold)


def contrasting_color(
    background: Color,
    role: ContrastRole | str = ContrastRole.PRIMARY,
    options: ContrastOptions | None = None,
) -> Color:
    """Return the foreground color for ``role`` on ``background``.

    Parameters
    ----------
    background:
        The color the foreground will be drawn on.
    role:
        ``ContrastRole`` or its value (``"primary"``, ``"secondary"``,
        ``"link"``, ``"neon-link"``).
    options:
        Threshold override, policy selection and strict mode.

    Raises
    ------
    contrastkit.errors.PolicyNotFoundError
        If ``options`` names a policy that is not registered.
    """
    from contrastkit.engine.engine import contrasting_color as _contrasting_color

    return _contrasting_color(background, role, options)


def contrasting_palette(
    background: Color, options: ContrastOptions | None = None
) -> dict[ContrastRole, Color]:
    """Return the foreground color for every role on ``background``."""
    from contrastkit.engine.engine import contrasting_palette as _contrasting_palette

    return _contrasting_palette(background, options)


def parse_color(text: str) -> Color:
    """Parse ``#RRGGBB``, ``r,g,b[,a]`` or a palette name into a ``Color``.

    Raises
    ------
    contrastkit.errors.InvalidColorError
        If ``text`` is not a recognised color form.
    """
    from contrastkit.color.parsing import parse_color as _parse_color

    return _parse_color(text)


def load_options(path: "str | Path") -> ContrastOptions:
    """Load ``ContrastOptions`` from a YAML file."""
    from contrastkit.config.options import load_options as _load_options

    return _load_options(path)


__all__ = [
    "__version__",
    "Color",
    "ContrastOptions",
    "ContrastRole",
    "relative_luminance",
    "contrast_ratio",
    "has_good_contrast",
    "contrasting_color",
    "contrasting_palette",
    "parse_color",
    "load_options",
]
