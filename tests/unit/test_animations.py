"""Tests for keyframe animations and animation classes."""

from __future__ import annotations

import pytest

from shallot.core.animations import (
    PRESETS,
    AnimationDirection,
    AnimationTiming,
    Keyframe,
    KeyframeAnimation,
    animation_classes,
    generate_all_animations,
    preset,
    preset_animations,
    render_keyframes,
)
from shallot.core.errors import InvalidConfigError
from shallot.core.ir.tokens import CubicBezier, Easing


def _wobble() -> KeyframeAnimation:
    return KeyframeAnimation(
        "wobble",
        (
            (0, {"transform": "rotate(0deg)"}),
            (50, {"transform": "rotate(3deg)"}),
            (100, {"transform": "rotate(0deg)"}),
        ),
    )


# =============================================================================
# Keyframes
# =============================================================================


class TestKeyframeAnimation:
    def test_render_single_line(self):
        animation = KeyframeAnimation.from_to("fade_in", {"opacity": "0"}, {"opacity": "1"})
        assert render_keyframes(animation) == (
            "@keyframes fade_in { 0% { opacity: 0; } 100% { opacity: 1; } }"
        )

    def test_tuple_steps_coerced(self):
        animation = _wobble()
        assert all(isinstance(step, Keyframe) for step in animation.keyframes)

    def test_steps_rendered_as_given(self):
        animation = KeyframeAnimation("blink", ((25, {"opacity": "0"}), (75, {"opacity": "1"})))
        assert render_keyframes(animation) == (
            "@keyframes blink { 25% { opacity: 0; } 75% { opacity: 1; } }"
        )

    def test_fractional_offset(self):
        assert Keyframe(12.5, {"opacity": "0.5"}).to_css() == "12.5% { opacity: 0.5; }"

    def test_offsets_must_increase(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            KeyframeAnimation("bad", ((50, {"opacity": "0"}), (50, {"opacity": "1"})))
        assert exc_info.value.config == "keyframes"
        assert exc_info.value.token == "bad"

    def test_offset_range(self):
        with pytest.raises(InvalidConfigError, match="outside 0-100"):
            KeyframeAnimation("bad", ((0, {"opacity": "0"}), (120, {"opacity": "1"})))

    @pytest.mark.parametrize("offset", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_offset_rejected(self, offset):
        with pytest.raises(InvalidConfigError, match="finite") as exc_info:
            KeyframeAnimation("bad", ((0, {"opacity": "0"}), (offset, {"opacity": "1"})))
        assert exc_info.value.token == "bad"

    def test_equal_keyframes_hash_equal(self):
        a = Keyframe(50, {"opacity": "0.5"})
        b = Keyframe(50, {"opacity": "0.5"})
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b, Keyframe(60, {"opacity": "0.5"})}) == 2

    def test_animations_usable_in_sets(self):
        assert len({_wobble(), _wobble()}) == 1

    def test_empty_rejected(self):
        with pytest.raises(InvalidConfigError, match="no keyframes"):
            KeyframeAnimation("empty", ())

    @pytest.mark.parametrize("name", ["1spin", "spin around", ""])
    def test_invalid_name(self, name):
        with pytest.raises(InvalidConfigError):
            KeyframeAnimation(name, ((0, {"opacity": "0"}),))

    def test_invalid_property(self):
        with pytest.raises(InvalidConfigError, match="Invalid property"):
            KeyframeAnimation("x", ((0, {"opa city": "0"}),))

    def test_class_suffix(self):
        assert preset("fade_in").class_suffix == "fade-in"
        assert KeyframeAnimation.from_to("my_spin", {}, {}).class_suffix == "my-spin"

    def test_with_timing(self):
        animation = _wobble().with_timing(duration_ms=900, iterations="infinite")
        assert animation.timing.duration_ms == 900
        assert animation.animation_css() == "wobble 900ms ease-out 0ms infinite normal both running"


class TestAnimationTiming:
    def test_shorthand(self):
        timing = AnimationTiming(
            duration_ms=250,
            easing=CubicBezier.ease_out_expo(),
            delay_ms=50,
            direction=AnimationDirection.ALTERNATE,
        )
        assert timing.shorthand("pop") == (
            "pop 250ms cubic-bezier(0.19, 1, 0.22, 1) 50ms 1 alternate both running"
        )

    def test_declarations(self):
        declarations = AnimationTiming(easing=Easing.LINEAR).declarations("spin")
        assert declarations["animation-name"] == "spin"
        assert declarations["animation-timing-function"] == "linear"
        assert declarations["animation-fill-mode"] == "both"

    @pytest.mark.parametrize("iterations", [0, -1, "forever"])
    def test_invalid_iterations(self, iterations):
        with pytest.raises(InvalidConfigError):
            AnimationTiming(iterations=iterations)

    def test_negative_duration(self):
        with pytest.raises(InvalidConfigError):
            AnimationTiming(duration_ms=-1)


# =============================================================================
# Presets and output
# =============================================================================


class TestPresets:
    def test_catalogue(self):
        assert list(PRESETS) == [
            "fade_in", "fade_out", "slide_in_up", "slide_in_down", "scale_in",
            "bounce_in", "shake", "pulse", "glow", "float",
        ]  # fmt: skip

    def test_lookup_by_key_or_css_name(self):
        assert preset("slide_in_up").name == "sh-slide-in-up"
        assert preset("sh-slide-in-up").name == "sh-slide-in-up"

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            preset("teleport")

    def test_shake_steps(self):
        shake = preset("shake")
        assert [step.offset for step in shake.keyframes] == list(range(0, 101, 10))

    def test_pulse_is_infinite(self):
        assert preset("pulse").timing.iterations == "infinite"


class TestGenerateAllAnimations:
    def test_one_line_per_animation(self):
        lines = generate_all_animations().splitlines()
        assert len(lines) == len(PRESETS)
        assert lines[0].startswith("@keyframes sh-fade-in { 0% { opacity: 0; }")

    def test_extras_follow_presets(self):
        lines = generate_all_animations([_wobble()]).splitlines()
        assert lines[-1].startswith("@keyframes wobble {")

    @pytest.mark.parametrize("name", ["fade_in", "sh-shake", "shake", "sh_pulse"])
    def test_collision_with_preset(self, name):
        clash = KeyframeAnimation.from_to(name, {"opacity": "0"}, {"opacity": "1"})
        with pytest.raises(InvalidConfigError, match="collides"):
            generate_all_animations([clash])

    def test_collision_between_extras(self):
        with pytest.raises(InvalidConfigError):
            generate_all_animations([_wobble(), _wobble()])

    def test_deterministic(self):
        assert generate_all_animations([_wobble()]) == generate_all_animations([_wobble()])


class TestAnimationClasses:
    def test_class_per_animation(self):
        css = animation_classes()
        for animation in preset_animations():
            assert f".sh-animate-{animation.class_suffix} {{\n" in css

    def test_longhand_body(self):
        css = animation_classes()
        assert "  animation-name: sh-pulse;\n" in css
        assert "  animation-iteration-count: infinite;\n" in css

    def test_controls_and_reduced_motion(self):
        css = animation_classes([_wobble()])
        assert ".sh-animate-none { animation: none !important; }" in css
        assert ".sh-animate-paused { animation-play-state: paused !important; }" in css
        reduced = css.split("@media (prefers-reduced-motion: reduce) {")[1]
        assert "  .sh-animate-wobble" in reduced
        assert "animation-duration: 0.01ms !important;" in reduced
