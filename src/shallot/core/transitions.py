"""
Transitions, transition presets and transform/filter value builders.

A TransitionSet renders to the ``transition`` shorthand with entries kept in
the order given. Layered transitions on the same property are legal and are
never merged.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .animations import format_ms
from .css_utils import is_valid_css_identifier, render_classes
from .errors import make_config_error
from .ir.tokens import CubicBezier, Easing, EasingFunction
from .units import format_number


class TransitionProperty(StrEnum):
    ALL = "all"
    NONE = "none"
    OPACITY = "opacity"
    TRANSFORM = "transform"
    COLOR = "color"
    BACKGROUND_COLOR = "background-color"
    BORDER_COLOR = "border-color"
    BOX_SHADOW = "box-shadow"
    WIDTH = "width"
    HEIGHT = "height"
    MAX_WIDTH = "max-width"
    MAX_HEIGHT = "max-height"
    MARGIN = "margin"
    PADDING = "padding"
    FILTER = "filter"
    OUTLINE = "outline"


@dataclass(frozen=True)
class Transition:
    """One transitioned property.

    ``property`` is a TransitionProperty or any other valid CSS identifier.
    """

    property: TransitionProperty | str = TransitionProperty.ALL
    duration_ms: int = 200
    easing: EasingFunction = Easing.EASE_OUT
    delay_ms: int = 0

    def __post_init__(self) -> None:
        if not is_valid_css_identifier(str(self.property)):
            raise make_config_error(
                f"Invalid transition property {self.property!r}",
                "transition",
                token=str(self.property),
            )
        if self.duration_ms < 0 or self.delay_ms < 0:
            raise make_config_error(
                "Transition durations must not be negative", "transition", token=str(self.property)
            )

    def to_css(self) -> str:
        return (
            f"{self.property} {format_ms(self.duration_ms)} "
            f"{self.easing.to_css()} {format_ms(self.delay_ms)}"
        )


@dataclass(frozen=True)
class TransitionSet:
    """Ordered transitions; order is preserved verbatim when rendered."""

    transitions: tuple[Transition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "transitions", tuple(self.transitions))

    def add(self, transition: Transition) -> TransitionSet:
        return TransitionSet((*self.transitions, transition))

    def __len__(self) -> int:
        return len(self.transitions)

    def to_css(self) -> str:
        return render_transition(self)


def render_transition(transitions: TransitionSet) -> str:
    """Render the ``transition`` shorthand value; an empty set is ``none``."""
    if not transitions.transitions:
        return "none"
    return ", ".join(t.to_css() for t in transitions.transitions)


# =============================================================================
# Presets
# =============================================================================


def fade() -> Transition:
    return Transition(TransitionProperty.OPACITY, 150, CubicBezier.ease_out_expo())


def fade_smooth() -> Transition:
    return Transition(TransitionProperty.OPACITY, 300, CubicBezier.ease_in_out_cubic())


def transform() -> Transition:
    return Transition(TransitionProperty.TRANSFORM, 300, CubicBezier.ease_out_back())


def transform_fast() -> Transition:
    return Transition(TransitionProperty.TRANSFORM, 150, CubicBezier.ease_out_expo())


def color() -> Transition:
    return Transition(TransitionProperty.COLOR, 200, Easing.EASE_OUT)


def background() -> Transition:
    return Transition(TransitionProperty.BACKGROUND_COLOR, 200, Easing.EASE_OUT)


def border() -> Transition:
    return Transition(TransitionProperty.BORDER_COLOR, 150, Easing.EASE_OUT)


def shadow() -> Transition:
    return Transition(TransitionProperty.BOX_SHADOW, 300, CubicBezier.ease_out_expo())


def size() -> Transition:
    return Transition(TransitionProperty.WIDTH, 300, CubicBezier.ease_in_out_cubic())


def all_() -> Transition:
    return Transition(TransitionProperty.ALL, 200, Easing.EASE_OUT)


def button() -> TransitionSet:
    return TransitionSet(
        (
            Transition(TransitionProperty.BACKGROUND_COLOR, 200, Easing.EASE_OUT),
            Transition(TransitionProperty.TRANSFORM, 150, CubicBezier.ease_out_expo()),
            Transition(TransitionProperty.BOX_SHADOW, 200, Easing.EASE_OUT),
        )
    )


def card_hover() -> TransitionSet:
    return TransitionSet(
        (
            Transition(TransitionProperty.TRANSFORM, 300, CubicBezier.ease_out_expo()),
            Transition(TransitionProperty.BOX_SHADOW, 300, Easing.EASE_OUT),
        )
    )


def input_focus() -> TransitionSet:
    return TransitionSet(
        (
            Transition(TransitionProperty.BORDER_COLOR, 150, Easing.EASE_OUT),
            Transition(TransitionProperty.BOX_SHADOW, 150, Easing.EASE_OUT),
        )
    )


def modal() -> TransitionSet:
    return TransitionSet(
        (
            Transition(TransitionProperty.OPACITY, 200, CubicBezier.ease_out_expo()),
            Transition(TransitionProperty.TRANSFORM, 300, CubicBezier.ease_out_back()),
        )
    )


TRANSITION_PRESETS = {
    "fade": fade,
    "fade_smooth": fade_smooth,
    "transform": transform,
    "transform_fast": transform_fast,
    "color": color,
    "background": background,
    "border": border,
    "shadow": shadow,
    "size": size,
    "all": all_,
}

TRANSITION_SETS = {
    "button": button,
    "card_hover": card_hover,
    "input_focus": input_focus,
    "modal": modal,
}


# =============================================================================
# Transform and filter values
# =============================================================================


def _n(value: float) -> str:
    return format_number(value, 3)


@dataclass(frozen=True)
class Transform:
    """Immutable ``transform`` value; each method returns an extended copy."""

    operations: tuple[str, ...] = ()

    def _with(self, operation: str) -> Transform:
        return Transform((*self.operations, operation))

    def translate(self, x: str, y: str) -> Transform:
        return self._with(f"translate({x}, {y})")

    def translate_x(self, x: str) -> Transform:
        return self._with(f"translateX({x})")

    def translate_y(self, y: str) -> Transform:
        return self._with(f"translateY({y})")

    def scale(self, factor: float) -> Transform:
        return self._with(f"scale({_n(factor)})")

    def scale_xy(self, x: float, y: float) -> Transform:
        return self._with(f"scale({_n(x)}, {_n(y)})")

    def rotate(self, degrees: float) -> Transform:
        return self._with(f"rotate({_n(degrees)}deg)")

    def skew(self, x: float, y: float) -> Transform:
        return self._with(f"skew({_n(x)}deg, {_n(y)}deg)")

    def build(self) -> str:
        return " ".join(self.operations) if self.operations else "none"


@dataclass(frozen=True)
class Filter:
    """Immutable ``filter`` value. Fractional amounts render as percentages."""

    effects: tuple[str, ...] = ()

    def _with(self, effect: str) -> Filter:
        return Filter((*self.effects, effect))

    def blur(self, radius: str) -> Filter:
        return self._with(f"blur({radius})")

    def brightness(self, amount: float) -> Filter:
        return self._with(f"brightness({_n(amount)})")

    def contrast(self, amount: float) -> Filter:
        return self._with(f"contrast({_n(amount * 100)}%)")

    def grayscale(self, amount: float) -> Filter:
        return self._with(f"grayscale({_n(amount * 100)}%)")

    def sepia(self, amount: float) -> Filter:
        return self._with(f"sepia({_n(amount * 100)}%)")

    def saturate(self, amount: float) -> Filter:
        return self._with(f"saturate({_n(amount * 100)}%)")

    def hue_rotate(self, degrees: float) -> Filter:
        return self._with(f"hue-rotate({_n(degrees)}deg)")

    def invert(self, amount: float) -> Filter:
        return self._with(f"invert({_n(amount * 100)}%)")

    def opacity(self, amount: float) -> Filter:
        return self._with(f"opacity({_n(amount * 100)}%)")

    def drop_shadow(self, x: float, y: float, blur: float, color: str) -> Filter:
        return self._with(f"drop-shadow({_n(x)}px {_n(y)}px {_n(blur)}px {color})")

    def build(self) -> str:
        return " ".join(self.effects) if self.effects else "none"


# =============================================================================
# Utility classes
# =============================================================================

_DURATIONS = (75, 100, 150, 200, 300, 500, 700, 1000)
_EASE_UTILITIES = {
    "linear": Easing.LINEAR,
    "in": CubicBezier(0.4, 0.0, 1.0, 1.0),
    "out": CubicBezier(0.0, 0.0, 0.2, 1.0),
    "in-out": CubicBezier.standard(),
}


def transition_css() -> str:
    """Transition preset classes plus duration, easing and hover utilities."""
    standard = CubicBezier.standard()
    rules: dict[str, dict[str, str]] = {
        "sh-transition": {"transition": Transition(TransitionProperty.ALL, 200, standard).to_css()},
        "sh-transition-colors": {
            "transition-property": "color, background-color, border-color, "
            "text-decoration-color, fill, stroke",
            "transition-timing-function": standard.to_css(),
            "transition-duration": format_ms(200),
        },
    }
    for name, factory in TRANSITION_PRESETS.items():
        rules[f"sh-transition-{name.replace('_', '-')}"] = {
            "transition": render_transition(TransitionSet((factory(),)))
        }
    for name, factory in TRANSITION_SETS.items():
        rules[f"sh-transition-{name.replace('_', '-')}"] = {"transition": render_transition(factory())}
    for ms in _DURATIONS:
        rules[f"sh-duration-{ms}"] = {"transition-duration": format_ms(ms)}
    for name, easing in _EASE_UTILITIES.items():
        rules[f"sh-ease-{name}"] = {"transition-timing-function": easing.to_css()}

    lift = TransitionSet(
        (
            Transition(TransitionProperty.TRANSFORM, 200, standard),
            Transition(TransitionProperty.BOX_SHADOW, 200, standard),
        )
    )
    rules["sh-transform-gpu"] = {"transform": "translate3d(0, 0, 0)", "will-change": "transform"}
    rules["sh-hover-lift"] = {"transition": render_transition(lift)}
    rules["sh-hover-lift:hover"] = {"transform": Transform().translate_y("-2px").build()}
    rules["sh-hover-scale"] = {
        "transition": Transition(TransitionProperty.TRANSFORM, 150, standard).to_css()
    }
    rules["sh-hover-scale:hover"] = {"transform": Transform().scale(1.02).build()}
    rules["sh-active-press:active"] = {"transform": Transform().scale(0.98).build()}
    rules["sh-focus-ring-transition"] = {
        "transition": render_transition(
            TransitionSet(
                (
                    Transition(TransitionProperty.BOX_SHADOW, 200, standard),
                    Transition(TransitionProperty.OUTLINE, 200, standard),
                )
            )
        )
    }
    return f"/* Transitions */\n{render_classes(rules)}\n"
