"""Tests for color conversions, contrast and brand schemes."""

from __future__ import annotations

import pytest

from shallot.core.color import (
    SUCCESS,
    contrast_ratio,
    derive_scheme,
    hex_to_rgb,
    hsl_to_rgb,
    meets_wcag_aa,
    meets_wcag_aaa,
    rgb_to_hex,
    rgb_to_hsl,
    scheme_variables,
)
from shallot.core.ir.tokens import ColorScheme, hsl


class TestConversions:
    def test_hex_to_rgb(self):
        assert hex_to_rgb("#ffffff") == (255, 255, 255)
        assert hex_to_rgb("#fff") == (255, 255, 255)
        assert hex_to_rgb("0a0B0c") == (10, 11, 12)

    @pytest.mark.parametrize("value", ["", "#ff", "#gggggg", "red", "#12345"])
    def test_hex_to_rgb_invalid(self, value):
        assert hex_to_rgb(value) is None

    def test_rgb_to_hex(self):
        assert rgb_to_hex((255, 0, 16)) == "#ff0010"

    def test_hsl_to_rgb(self):
        assert hsl_to_rgb(hsl(0, 100, 50)) == (255, 0, 0)
        assert hsl_to_rgb(hsl(120, 100, 25)) == (0, 128, 0)
        assert hsl_to_rgb(hsl(0, 0, 100)) == (255, 255, 255)

    def test_rgb_to_hsl(self):
        color = rgb_to_hsl((255, 0, 0))
        assert (color.h, color.s, color.l) == (0.0, 100.0, 50.0)
        blue = rgb_to_hsl((0, 0, 255))
        assert blue.h == 240.0


class TestContrast:
    def test_black_on_white(self):
        assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

    def test_symmetric(self):
        assert contrast_ratio("#336699", "#ffffff") == pytest.approx(
            contrast_ratio("#ffffff", "#336699")
        )

    def test_same_color(self):
        assert contrast_ratio(hsl(200, 50, 50), hsl(200, 50, 50)) == pytest.approx(1.0)

    def test_unparseable(self):
        assert contrast_ratio("tomato", "#ffffff") is None
        assert meets_wcag_aa("tomato", "#ffffff") is False

    def test_wcag_levels(self):
        assert meets_wcag_aa("#000000", "#ffffff")
        assert meets_wcag_aaa("#000000", "#ffffff")
        assert not meets_wcag_aa("#777777", "#888888")


class TestSchemes:
    def test_complementary(self):
        colors = derive_scheme(hsl(312, 35, 33), ColorScheme.COMPLEMENTARY)
        assert colors["primary"].h == 312.0
        assert colors["secondary"].h == 132.0
        assert colors["accent"].l == 53.0

    def test_split_complementary_uses_complement_neighbours(self):
        colors = derive_scheme(hsl(0, 50, 50), ColorScheme.SPLIT_COMPLEMENTARY)
        assert (colors["secondary"].h, colors["accent"].h) == (150.0, 210.0)

    def test_monochromatic_keeps_hue(self):
        colors = derive_scheme(hsl(200, 50, 40), ColorScheme.MONOCHROMATIC)
        assert {colors[name].h for name in ("primary", "secondary", "accent")} == {200.0}

    @pytest.mark.parametrize("scheme", list(ColorScheme))
    def test_status_colors_fixed(self, scheme):
        assert derive_scheme(hsl(10, 50, 50), scheme)["success"] == SUCCESS

    def test_variables(self):
        variables = scheme_variables(hsl(312, 35, 33), ColorScheme.TRIADIC)
        assert variables["--sh-color-primary"] == "hsl(312 35% 33%)"
        assert variables["--sh-color-primary-light"] == "hsl(312 35% 43%)"
        assert variables["--sh-color-secondary"] == "hsl(72 35% 33%)"
        assert list(variables)[-1] == "--sh-gradient-secondary"
        assert variables["--sh-gradient-primary"].startswith("linear-gradient(135deg, ")
