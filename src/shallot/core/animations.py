"""
Keyframe animations and animation utility classes.

Provides:
- AnimationTiming with direction/fill-mode/play-state enums
- Keyframe and KeyframeAnimation (validated at construction)
- The preset catalogue (fade_in ... float)
- render_keyframes, generate_all_animations, animation_classes
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Literal

from .css_utils import is_valid_css_identifier
from .errors import make_config_error
from .ir.tokens import CubicBezier, Easing, EasingFunction
from .units import format_number

logger = logging.getLogger(__name__)

Iterations = int | Literal["infinite"]


# =============================================================================
# Timing
# =============================================================================


class AnimationDirection(StrEnum):
    NORMAL = "normal"
    REVERSE = "reverse"
    ALTERNATE = "alternate"
    ALTERNATE_REVERSE = "alternate-reverse"


class AnimationFillMode(StrEnum):
    NONE = "none"
    FORWARDS = "forwards"
    BACKWARDS = "backwards"
    BOTH = "both"


class AnimationPlayState(StrEnum):
    RUNNING = "running"
    PAUSED = "paused"


def format_ms(value: int) -> str:
    return f"{value}ms"


@dataclass(frozen=True)
class AnimationTiming:
    """Default timing bound to an animation by its utility class."""

    duration_ms: int = 300
    easing: EasingFunction = Easing.EASE_OUT
    delay_ms: int = 0
    iterations: Iterations = 1
    direction: AnimationDirection = AnimationDirection.NORMAL
    fill_mode: AnimationFillMode = AnimationFillMode.BOTH
    play_state: AnimationPlayState = AnimationPlayState.RUNNING

    def __post_init__(self) -> None:
        if self.duration_ms < 0 or self.delay_ms < 0:
            raise make_config_error("Durations must not be negative", "animation_timing")
        if self.iterations != "infinite" and (
            not isinstance(self.iterations, int) or self.iterations < 1
        ):
            raise make_config_error(
                f"Iterations must be a positive integer or 'infinite', got {self.iterations!r}",
                "animation_timing",
            )

    def declarations(self, name: str) -> dict[str, str]:
        """Longhand ``animation-*`` declarations for an animation name."""
        return {
            "animation-name": name,
            "animation-duration": format_ms(self.duration_ms),
            "animation-timing-function": self.easing.to_css(),
            "animation-delay": format_ms(self.delay_ms),
            "animation-iteration-count": str(self.iterations),
            "animation-direction": self.direction.value,
            "animation-fill-mode": self.fill_mode.value,
            "animation-play-state": self.play_state.value,
        }

    def shorthand(self, name: str) -> str:
        """The ``animation`` shorthand value."""
        return " ".join(
            [
                name,
                format_ms(self.duration_ms),
                self.easing.to_css(),
                format_ms(self.delay_ms),
                str(self.iterations),
                self.direction.value,
                self.fill_mode.value,
                self.play_state.value,
            ]
        )


# =============================================================================
# Keyframes
# =============================================================================


@dataclass(frozen=True)
class Keyframe:
    """One step: an offset percentage and its declarations in order."""

    offset: float
    properties: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def __hash__(self) -> int:
        return hash((self.offset, tuple(self.properties.items())))

    def to_css(self) -> str:
        body = " ".join(f"{prop}: {value};" for prop, value in self.properties.items())
        return f"{format_number(self.offset)}% {{ {body} }}"


@dataclass(frozen=True)
class KeyframeAnimation:
    """
    A named keyframe animation with its default timing.

    Steps are rendered exactly as stored; 0% and 100% are never synthesized.

    Raises:
        InvalidConfigError: If the name is not a CSS identifier, there are no
            steps, an offset is outside [0, 100], offsets are not strictly
            increasing, or a property name is invalid.
    """

    name: str
    keyframes: tuple[Keyframe, ...]
    timing: AnimationTiming = field(default_factory=AnimationTiming)

    def __post_init__(self) -> None:
        steps = tuple(
            step if isinstance(step, Keyframe) else Keyframe(*step) for step in self.keyframes
        )
        object.__setattr__(self, "keyframes", steps)

        if not is_valid_css_identifier(self.name):
            raise make_config_error(
                f"Invalid animation name {self.name!r}", "keyframes", token=self.name
            )
        if not steps:
            raise make_config_error("Animation has no keyframes", "keyframes", token=self.name)

        previous: float | None = None
        for step in steps:
            if not math.isfinite(step.offset):
                raise make_config_error(
                    f"Keyframe offset must be finite, got {step.offset!r}",
                    "keyframes",
                    token=self.name,
                )
            if not 0.0 <= step.offset <= 100.0:
                raise make_config_error(
                    f"Keyframe offset {format_number(step.offset)}% is outside 0-100",
                    "keyframes",
                    token=self.name,
                )
            if previous is not None and step.offset <= previous:
                raise make_config_error(
                    f"Keyframe offsets must be strictly increasing: "
                    f"{format_number(step.offset)}% follows {format_number(previous)}%",
                    "keyframes",
                    token=self.name,
                )
            for prop in step.properties:
                if not is_valid_css_identifier(prop):
                    raise make_config_error(
                        f"Invalid property {prop!r} in keyframes", "keyframes", token=self.name
                    )
            previous = step.offset

    @classmethod
    def from_to(
        cls,
        name: str,
        start: Mapping[str, str],
        end: Mapping[str, str],
        timing: AnimationTiming | None = None,
    ) -> KeyframeAnimation:
        """Two-step animation from 0% to 100%."""
        return cls(name, (Keyframe(0, start), Keyframe(100, end)), timing or AnimationTiming())

    def with_timing(self, **changes: Any) -> KeyframeAnimation:
        """Copy with some timing fields replaced."""
        return replace(self, timing=replace(self.timing, **changes))

    @property
    def class_suffix(self) -> str:
        return self.name.removeprefix("sh-").replace("_", "-")

    def animation_css(self) -> str:
        return self.timing.shorthand(self.name)


def render_keyframes(animation: KeyframeAnimation) -> str:
    """Render one ``@keyframes`` block on a single line."""
    steps = " ".join(step.to_css() for step in animation.keyframes)
    return f"@keyframes {animation.name} {{ {steps} }}"


# =============================================================================
# Presets
# =============================================================================


def fade_in() -> KeyframeAnimation:
    return KeyframeAnimation.from_to(
        "sh-fade-in",
        {"opacity": "0"},
        {"opacity": "1"},
        AnimationTiming(duration_ms=300, easing=CubicBezier.ease_out_expo()),
    )


def fade_out() -> KeyframeAnimation:
    return KeyframeAnimation.from_to(
        "sh-fade-out",
        {"opacity": "1"},
        {"opacity": "0"},
        AnimationTiming(duration_ms=300, easing=CubicBezier.ease_in_out_cubic()),
    )


def slide_in_up() -> KeyframeAnimation:
    return KeyframeAnimation.from_to(
        "sh-slide-in-up",
        {"transform": "translateY(100%)", "opacity": "0"},
        {"transform": "translateY(0)", "opacity": "1"},
        AnimationTiming(duration_ms=400, easing=CubicBezier.ease_out_back()),
    )


def slide_in_down() -> KeyframeAnimation:
    return KeyframeAnimation.from_to(
        "sh-slide-in-down",
        {"transform": "translateY(-100%)", "opacity": "0"},
        {"transform": "translateY(0)", "opacity": "1"},
        AnimationTiming(duration_ms=400, easing=CubicBezier.ease_out_back()),
    )


def scale_in() -> KeyframeAnimation:
    return KeyframeAnimation.from_to(
        "sh-scale-in",
        {"transform": "scale(0.9)", "opacity": "0"},
        {"transform": "scale(1)", "opacity": "1"},
        AnimationTiming(duration_ms=300, easing=CubicBezier.ease_out_expo()),
    )


def bounce_in() -> KeyframeAnimation:
    return KeyframeAnimation(
        "sh-bounce-in",
        (
            Keyframe(0, {"opacity": "0", "transform": "scale(0.3, 0.3)"}),
            Keyframe(50, {"opacity": "1", "transform": "scale(1.05)"}),
            Keyframe(70, {"transform": "scale(0.9)"}),
            Keyframe(100, {"transform": "scale(1)"}),
        ),
        AnimationTiming(duration_ms=600, easing=CubicBezier.ease_out_back()),
    )


_SHAKE_OFFSETS = (0, -10, 10, -10, 10, -5, 5, -2, 2, -1, 0)


def shake() -> KeyframeAnimation:
    steps = tuple(
        Keyframe(index * 10, {"transform": f"translateX({dx}px)" if dx else "translateX(0)"})
        for index, dx in enumerate(_SHAKE_OFFSETS)
    )
    return KeyframeAnimation(
        "sh-shake",
        steps,
        AnimationTiming(duration_ms=800, easing=CubicBezier.ease_in_out_cubic()),
    )


def pulse() -> KeyframeAnimation:
    return KeyframeAnimation(
        "sh-pulse",
        (
            Keyframe(0, {"opacity": "1"}),
            Keyframe(50, {"opacity": "0.5"}),
            Keyframe(100, {"opacity": "1"}),
        ),
        AnimationTiming(
            duration_ms=2000, easing=CubicBezier.ease_in_out_cubic(), iterations="infinite"
        ),
    )


_GLOW_LOW = "0 0 5px rgba(255, 255, 255, 0.5)"
_GLOW_HIGH = "0 0 20px rgba(255, 255, 255, 0.8), 0 0 30px rgba(255, 255, 255, 0.6)"


def glow() -> KeyframeAnimation:
    return KeyframeAnimation(
        "sh-glow",
        (
            Keyframe(0, {"box-shadow": _GLOW_LOW}),
            Keyframe(50, {"box-shadow": _GLOW_HIGH}),
            Keyframe(100, {"box-shadow": _GLOW_LOW}),
        ),
        AnimationTiming(
            duration_ms=2000, easing=CubicBezier.ease_in_out_cubic(), iterations="infinite"
        ),
    )


def float_() -> KeyframeAnimation:
    return KeyframeAnimation(
        "sh-float",
        (
            Keyframe(0, {"transform": "translateY(0px)"}),
            Keyframe(50, {"transform": "translateY(-10px)"}),
            Keyframe(100, {"transform": "translateY(0px)"}),
        ),
        AnimationTiming(
            duration_ms=3000, easing=CubicBezier.ease_in_out_cubic(), iterations="infinite"
        ),
    )


# Fixed, ordered preset table
PRESETS: Mapping[str, Callable[[], KeyframeAnimation]] = MappingProxyType(
    {
        "fade_in": fade_in,
        "fade_out": fade_out,
        "slide_in_up": slide_in_up,
        "slide_in_down": slide_in_down,
        "scale_in": scale_in,
        "bounce_in": bounce_in,
        "shake": shake,
        "pulse": pulse,
        "glow": glow,
        "float": float_,
    }
)


def preset(name: str) -> KeyframeAnimation:
    """Look up a preset by key (``fade_in``) or CSS name (``sh-fade-in``)."""
    factory = PRESETS.get(name) or PRESETS.get(name.removeprefix("sh-").replace("-", "_"))
    if factory is None:
        raise KeyError(f"Unknown animation preset: {name}")
    return factory()


def preset_animations() -> list[KeyframeAnimation]:
    return [factory() for factory in PRESETS.values()]


def _check_extras(extra: Iterable[KeyframeAnimation]) -> list[KeyframeAnimation]:
    """Validate custom animations against presets and each other."""
    taken: set[str] = set(PRESETS)
    for animation in preset_animations():
        taken.update({animation.name, animation.class_suffix})

    checked = []
    for animation in extra:
        names = {animation.name, animation.class_suffix}
        clash = names & taken
        if clash:
            raise make_config_error(
                f"Animation name {animation.name!r} collides with an existing animation",
                "keyframes",
                token=animation.name,
            )
        taken.update(names)
        checked.append(animation)
    return checked


def generate_all_animations(extra: Iterable[KeyframeAnimation] = ()) -> str:
    """Render every preset's keyframes, then the extras, one block per line.

    Raises:
        InvalidConfigError: If an extra animation collides with a preset or
            another extra.
    """
    animations = preset_animations() + _check_extras(extra)
    logger.debug("Rendering %d keyframe animations", len(animations))
    return "\n".join(render_keyframes(a) for a in animations) + "\n"


def animation_classes(extra: Iterable[KeyframeAnimation] = ()) -> str:
    """One ``.sh-animate-<x>`` class per animation plus control utilities."""
    animations = preset_animations() + _check_extras(extra)

    blocks = []
    for animation in animations:
        body = "\n".join(
            f"  {prop}: {value};" for prop, value in animation.timing.declarations(animation.name).items()
        )
        blocks.append(f".sh-animate-{animation.class_suffix} {{\n{body}\n}}")

    blocks.append(".sh-animate-none { animation: none !important; }")
    blocks.append(".sh-animate-paused { animation-play-state: paused !important; }")
    blocks.append(".sh-animate-running { animation-play-state: running !important; }")

    selectors = ",\n".join(f"  .sh-animate-{a.class_suffix}" for a in animations)
    blocks.append(
        "@media (prefers-reduced-motion: reduce) {\n"
        f"{selectors} {{\n"
        "    animation-duration: 0.01ms !important;\n"
        "    animation-iteration-count: 1 !important;\n"
        "  }\n"
        "}"
    )
    return "\n".join(blocks) + "\n"
