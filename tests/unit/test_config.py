"""Tests for the shallot.yaml schema models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from shallot.core.animations import AnimationDirection
from shallot.core.ir.config import (
    AnimationSpec,
    ContainerSpec,
    FlexSpec,
    GridSpec,
    StylesheetConfig,
    parse_easing,
)
from shallot.core.ir.tokens import CubicBezier, Easing
from shallot.core.layout import FlexDirection
from shallot.core.responsive import Breakpoint


class TestParseEasing:
    def test_keyword(self):
        assert parse_easing("ease-in-out") == Easing.EASE_IN_OUT

    def test_named_curve(self):
        assert parse_easing("ease_out_back") == CubicBezier.ease_out_back()

    def test_cubic_bezier(self):
        assert parse_easing("cubic-bezier(0.1, 0.2, 0.3, 1)") == CubicBezier(0.1, 0.2, 0.3, 1.0)

    @pytest.mark.parametrize("text", ["bouncy", "cubic-bezier(1, 2)", "cubic-bezier(a, b, c, d)"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_easing(text)

    @pytest.mark.parametrize(
        "text",
        ["cubic-bezier(nan, 0, 1, 1)", "cubic-bezier(0, inf, 1, 1)", "cubic-bezier(0, 0, -inf, 1)"],
    )
    def test_non_finite_points(self, text):
        with pytest.raises(ValueError, match="finite"):
            parse_easing(text)


class TestLayoutSpecs:
    def test_container_defaults(self):
        config = ContainerSpec().to_config()
        assert config.padding.get(Breakpoint.XL) == 32
        assert config.max_widths[Breakpoint.SM] == 640

    def test_container_custom_widths(self):
        config = ContainerSpec(max_widths={"lg": 960}).to_config()
        assert dict(config.max_widths) == {Breakpoint.LG: 960}

    def test_unknown_breakpoint(self):
        with pytest.raises(ValidationError, match="unknown breakpoint"):
            GridSpec(columns={"base": 1, "tablet": 2})

    def test_grid_to_config(self):
        config = GridSpec(columns={"base": 1, "lg": 3}, row_gap={"base": 8}).to_config()
        assert config.columns.get(Breakpoint.XL) == 3
        assert config.row_gap.get(Breakpoint.BASE) == 8

    def test_flex_to_config(self):
        config = FlexSpec(direction={"base": "column", "md": "row"}).to_config()
        assert config.direction.get(Breakpoint.LG) == FlexDirection.ROW


class TestAnimationSpec:
    def test_to_animation(self):
        spec = AnimationSpec(
            name="wiggle",
            keyframes=[
                {"offset": 0, "properties": {"transform": "rotate(0deg)"}},
                {"offset": 100, "properties": {"transform": "rotate(5deg)"}},
            ],
            easing="ease_out_expo",
            iterations="infinite",
            direction="alternate",
        )
        animation = spec.to_animation()
        assert animation.name == "wiggle"
        assert animation.timing.easing == CubicBezier.ease_out_expo()
        assert animation.timing.direction == AnimationDirection.ALTERNATE
        assert len(animation.keyframes) == 2

    def test_invalid_easing(self):
        with pytest.raises(ValidationError):
            AnimationSpec(name="x", keyframes=[], easing="wobbly")

    def test_non_finite_easing(self):
        with pytest.raises(ValidationError):
            AnimationSpec(name="x", keyframes=[], easing="cubic-bezier(inf, 0, 1, 1)")

    @pytest.mark.parametrize("offset", [float("nan"), float("inf")])
    def test_non_finite_offset(self, offset):
        with pytest.raises(ValidationError):
            AnimationSpec(
                name="x",
                keyframes=[{"offset": offset, "properties": {"opacity": "0"}}],
            )


class TestStylesheetConfig:
    def test_defaults(self, default_config: StylesheetConfig):
        assert default_config.theme.accent_h == 312.0
        assert default_config.animations == []
        assert default_config.to_animations() == []

    def test_from_dict(self):
        config = StylesheetConfig.model_validate(
            {"theme": {"mode": "dark", "accent_h": 200}, "tokens": {"radius_preset": "sharp"}}
        )
        assert config.theme.mode == "dark"
        assert config.tokens.radius_preset == "sharp"
