"""Test that the quickstart API works for contrast-kit."""
from __future__ import annotations


def test_quickstart_functions_importable() -> None:
    import contrastkit

    assert callable(contrastkit.relative_luminance)
    assert callable(contrastkit.contrast_ratio)
    assert callable(contrastkit.has_good_contrast)
    assert callable(contrastkit.contrasting_color)


def test_quickstart_version(expected_version: str) -> None:
    import contrastkit

    assert contrastkit.__version__ == expected_version


def test_quickstart_all_exports_exist(package_name: str) -> None:
    import importlib

    module = importlib.import_module(package_name)
    for name in module.__all__:
        assert hasattr(module, name), name


def test_quickstart_primary_on_black() -> None:
    import contrastkit
    from contrastkit import Color

    text = contrastkit.contrasting_color(Color(0.0, 0.0, 0.0))
    assert text == Color(1.0, 1.0, 1.0)


def test_quickstart_role_by_name() -> None:
    import contrastkit

    background = contrastkit.parse_color("white")
    assert contrastkit.contrasting_color(background, "link") == contrastkit.parse_color("blue")


def test_quickstart_palette_has_every_role() -> None:
    import contrastkit
    from contrastkit import ContrastRole

    palette = contrastkit.contrasting_palette(contrastkit.parse_color("#336699"))
    assert set(palette) == set(ContrastRole)


def test_quickstart_luminance_and_ratio() -> None:
    import contrastkit

    white = contrastkit.parse_color("#FFFFFF")
    black = contrastkit.parse_color("#000000")
    assert abs(contrastkit.relative_luminance(white) - 1.0) < 1e-9
    assert abs(contrastkit.contrast_ratio(white, black) - 21.0) < 1e-9
    assert contrastkit.has_good_contrast(white, black, 4.5)
