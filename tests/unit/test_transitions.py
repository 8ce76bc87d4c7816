"""Tests for transitions and transform/filter builders."""

from __future__ import annotations

import pytest

from shallot.core.errors import InvalidConfigError
from shallot.core.ir.tokens import Easing
from shallot.core.transitions import (
    TRANSITION_PRESETS,
    TRANSITION_SETS,
    Filter,
    Transform,
    Transition,
    TransitionProperty,
    TransitionSet,
    button,
    fade,
    render_transition,
    transition_css,
)


class TestTransition:
    def test_to_css_includes_delay(self):
        assert Transition().to_css() == "all 200ms ease-out 0ms"

    def test_custom_property(self):
        assert Transition("letter-spacing", 100).to_css() == "letter-spacing 100ms ease-out 0ms"

    def test_invalid_property(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            Transition("not valid", 100)
        assert exc_info.value.config == "transition"

    def test_negative_duration(self):
        with pytest.raises(InvalidConfigError):
            Transition(TransitionProperty.OPACITY, -5)

    def test_preset(self):
        assert fade().to_css() == "opacity 150ms cubic-bezier(0.19, 1, 0.22, 1) 0ms"


class TestTransitionSet:
    def test_render_in_order(self):
        transitions = TransitionSet(
            (
                Transition(TransitionProperty.TRANSFORM, 200, Easing.EASE_OUT, 0),
                Transition(TransitionProperty.OPACITY, 150, Easing.LINEAR, 50),
            )
        )
        assert render_transition(transitions) == (
            "transform 200ms ease-out 0ms, opacity 150ms linear 50ms"
        )

    def test_empty_is_none(self):
        assert render_transition(TransitionSet()) == "none"

    def test_add_returns_copy(self):
        empty = TransitionSet()
        one = empty.add(fade())
        assert len(empty) == 0
        assert len(one) == 1

    def test_layered_same_property_kept(self):
        transitions = TransitionSet((Transition("opacity", 100), Transition("opacity", 300)))
        assert transitions.to_css().count("opacity") == 2

    def test_button_set(self):
        assert button().to_css().startswith("background-color 200ms ease-out 0ms, transform 150ms")


class TestTransform:
    def test_empty_is_none(self):
        assert Transform().build() == "none"

    def test_chain(self):
        value = Transform().translate_y("-2px").scale(1.02).rotate(45).build()
        assert value == "translateY(-2px) scale(1.02) rotate(45deg)"

    def test_immutable(self):
        base = Transform().translate("1px", "2px")
        base.skew(10, 0)
        assert base.build() == "translate(1px, 2px)"


class TestFilter:
    def test_percentages(self):
        assert Filter().grayscale(0.5).invert(1).build() == "grayscale(50%) invert(100%)"

    def test_misc(self):
        value = Filter().blur("4px").brightness(1.1).hue_rotate(90).drop_shadow(0, 2, 4, "black")
        assert value.build() == "blur(4px) brightness(1.1) hue-rotate(90deg) drop-shadow(0px 2px 4px black)"

    def test_empty_is_none(self):
        assert Filter().build() == "none"


class TestTransitionCss:
    def test_preset_and_set_classes(self):
        css = transition_css()
        for name in (*TRANSITION_PRESETS, *TRANSITION_SETS):
            assert f".sh-transition-{name.replace('_', '-')} {{" in css

    def test_utilities(self):
        css = transition_css()
        assert css.startswith("/* Transitions */\n")
        assert ".sh-duration-75 { transition-duration: 75ms; }" in css
        assert ".sh-ease-linear { transition-timing-function: linear; }" in css
        assert ".sh-hover-lift:hover { transform: translateY(-2px); }" in css
        assert ".sh-active-press:active { transform: scale(0.98); }" in css
