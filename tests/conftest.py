"""Shared test fixtures for contrast-kit.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from contrastkit.color import Color


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "contrastkit"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def black() -> Color:
    return Color(0.0, 0.0, 0.0, 1.0)


@pytest.fixture()
def white() -> Color:
    return Color(1.0, 1.0, 1.0, 1.0)


@pytest.fixture()
def orange() -> Color:
    """Pure orange, luminance about 0.366."""
    return Color(1.0, 0.5, 0.0, 1.0)


@pytest.fixture()
def mid_gray() -> Color:
    """50% gray, luminance about 0.214: light at 4.5, dark at 7.0."""
    return Color(0.5, 0.5, 0.5, 1.0)


@pytest.fixture()
def sample_backgrounds() -> list[Color]:
    """A spread of backgrounds including the achromatic edge cases."""
    steps = (0.0, 0.25, 0.5, 0.75, 1.0)
    return [Color(r, g, b) for r in steps for g in steps for b in steps]
