"""Unit tests for contrastkit.engine.luminance — channel linearization,
relative luminance, both ratio forms and the dark/light decision.
"""
from __future__ import annotations

import pytest

from contrastkit.color.model import Color
from contrastkit.engine.luminance import (
    contrast_ratio,
    has_good_contrast,
    is_dark,
    linearize_channel,
    ratio_function,
    relative_luminance,
    wcag_contrast_ratio,
)


class TestLinearizeChannel:
    def test_zero(self) -> None:
        assert linearize_channel(0.0) == 0.0

    def test_one(self) -> None:
        assert linearize_channel(1.0) == pytest.approx(1.0)

    def test_linear_segment(self) -> None:
        assert linearize_channel(0.03928) == pytest.approx(0.03928 / 12.92)

    def test_power_segment(self) -> None:
        assert linearize_channel(0.5) == pytest.approx(((0.5 + 0.055) / 1.055) ** 2.4)


class TestRelativeLuminance:
    def test_white_is_one(self, white: Color) -> None:
        assert relative_luminance(white) == pytest.approx(1.0, abs=1e-9)

    def test_black_is_zero(self, black: Color) -> None:
        assert relative_luminance(black) == 0.0

    def test_orange(self, orange: Color) -> None:
        assert relative_luminance(orange) == pytest.approx(0.3657, abs=1e-3)

    def test_channel_weights(self) -> None:
        assert relative_luminance(Color(1.0, 0.0, 0.0)) == pytest.approx(0.2126)
        assert relative_luminance(Color(0.0, 1.0, 0.0)) == pytest.approx(0.7152)
        assert relative_luminance(Color(0.0, 0.0, 1.0)) == pytest.approx(0.0722)

    def test_alpha_ignored(self) -> None:
        assert relative_luminance(Color(0.3, 0.6, 0.9, 0.1)) == relative_luminance(
            Color(0.3, 0.6, 0.9, 1.0)
        )

    def test_out_of_range_not_revalidated(self) -> None:
        assert relative_luminance(Color(1.2, 1.2, 1.2)) > 1.0

    def test_in_unit_interval(self, sample_backgrounds: list[Color]) -> None:
        for color in sample_backgrounds:
            assert 0.0 <= relative_luminance(color) <= 1.0 + 1e-9


class TestContrastRatio:
    def test_white_over_black_is_21(self, white: Color, black: Color) -> None:
        assert contrast_ratio(white, black) == pytest.approx(21.0)

    def test_is_not_symmetric(self, white: Color, black: Color) -> None:
        assert contrast_ratio(black, white) == pytest.approx(0.05 / 1.05)
        assert contrast_ratio(black, white) != contrast_ratio(white, black)

    def test_same_color_is_one(self, orange: Color) -> None:
        assert contrast_ratio(orange, orange) == pytest.approx(1.0)

    def test_wcag_ratio_is_symmetric(self, white: Color, black: Color) -> None:
        assert wcag_contrast_ratio(black, white) == pytest.approx(21.0)
        assert wcag_contrast_ratio(white, black) == pytest.approx(21.0)

    def test_wcag_ratio_at_least_one(self, sample_backgrounds: list[Color], orange: Color) -> None:
        for color in sample_backgrounds:
            assert wcag_contrast_ratio(color, orange) >= 1.0

    def test_ratio_function_lookup(self) -> None:
        assert ratio_function("asymmetric") is contrast_ratio
        assert ratio_function("wcag") is wcag_contrast_ratio

    def test_ratio_function_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown ratio"):
            ratio_function("apca")


class TestHasGoodContrast:
    def test_white_on_black_passes(self, white: Color, black: Color) -> None:
        assert has_good_contrast(white, black, 4.5)

    def test_black_on_white_fails_asymmetric(self, white: Color, black: Color) -> None:
        assert not has_good_contrast(black, white, 4.5)

    def test_black_on_white_passes_wcag(self, white: Color, black: Color) -> None:
        assert has_good_contrast(black, white, 4.5, ratio="wcag")

    def test_threshold_is_inclusive(self, white: Color, black: Color) -> None:
        assert has_good_contrast(white, black, contrast_ratio(white, black))


class TestIsDark:
    def test_black_is_dark(self, black: Color) -> None:
        assert is_dark(black, 4.5)
        assert is_dark(black, 7.0)

    def test_white_is_light(self, white: Color) -> None:
        assert not is_dark(white, 4.5)
        assert not is_dark(white, 7.0)

    def test_threshold_changes_decision(self, mid_gray: Color) -> None:
        # (0.214 + 0.05) / 0.05 is about 5.28
        assert not is_dark(mid_gray, 4.5)
        assert is_dark(mid_gray, 7.0)

    def test_orange_is_light_at_aa(self, orange: Color) -> None:
        assert not is_dark(orange, 4.5)
