"""
Stylesheet configuration types.

StylesheetConfig is the shape of ``shallot.yaml``: a Theme seed, token
presets or explicit scales, container/grid/flex layout maps keyed by
breakpoint name, and custom keyframe animations. Sections are plain data;
the ``to_*`` methods build the validated runtime objects.
"""

from __future__ import annotations

import math
import re
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..animations import (
    AnimationDirection,
    AnimationFillMode,
    AnimationTiming,
    Keyframe,
    KeyframeAnimation,
)
from ..layout import (
    AlignItems,
    ContainerConfig,
    FlexConfig,
    FlexDirection,
    FlexWrap,
    GridConfig,
    JustifyContent,
)
from ..responsive import Breakpoint, ResponsiveValue
from .tokens import DEFAULT_FONT_MONO, DEFAULT_FONT_SANS, CubicBezier, Easing, EasingFunction, Theme

# =============================================================================
# Presets
# =============================================================================


class TypeRatio(StrEnum):
    """Modular type scale ratios."""

    MINOR_SECOND = "minor_second"
    MAJOR_SECOND = "major_second"
    MINOR_THIRD = "minor_third"
    MAJOR_THIRD = "major_third"
    PERFECT_FOURTH = "perfect_fourth"
    AUGMENTED_FOURTH = "augmented_fourth"
    PERFECT_FIFTH = "perfect_fifth"
    GOLDEN_RATIO = "golden_ratio"


TYPE_RATIO_VALUES: dict[TypeRatio, float] = {
    TypeRatio.MINOR_SECOND: 1.067,
    TypeRatio.MAJOR_SECOND: 1.125,
    TypeRatio.MINOR_THIRD: 1.200,
    TypeRatio.MAJOR_THIRD: 1.250,
    TypeRatio.PERFECT_FOURTH: 1.333,
    TypeRatio.AUGMENTED_FOURTH: 1.414,
    TypeRatio.PERFECT_FIFTH: 1.500,
    TypeRatio.GOLDEN_RATIO: 1.618,
}


class Density(StrEnum):
    """Spacing density presets."""

    COMPACT = "compact"
    COMFORTABLE = "comfortable"
    SPACIOUS = "spacious"


class RadiusPreset(StrEnum):
    """Border radius presets."""

    SHARP = "sharp"
    SUBTLE = "subtle"
    ROUNDED = "rounded"
    PILL = "pill"


class ShadowPreset(StrEnum):
    """Shadow depth presets."""

    NONE = "none"
    SUBTLE = "subtle"
    SOFT = "soft"
    DRAMATIC = "dramatic"


# =============================================================================
# Easing
# =============================================================================

_BEZIER_RE = re.compile(r"^cubic-bezier\(\s*([^,]+),\s*([^,]+),\s*([^,]+),\s*([^)]+)\)$")
_NAMED_CURVES = {
    "ease_out_expo": CubicBezier.ease_out_expo,
    "ease_in_out_cubic": CubicBezier.ease_in_out_cubic,
    "ease_out_back": CubicBezier.ease_out_back,
    "ease_in_out_back": CubicBezier.ease_in_out_back,
    "ease_out_quint": CubicBezier.ease_out_quint,
    "ease_out_quart": CubicBezier.ease_out_quart,
}


def parse_easing(text: str) -> EasingFunction:
    """Parse a keyword, a named curve or a ``cubic-bezier(...)`` expression.

    Raises:
        ValueError: If the text is none of those, or a curve point is not finite.
    """
    value = text.strip()
    if value in _NAMED_CURVES:
        return _NAMED_CURVES[value]()
    match = _BEZIER_RE.match(value)
    if match:
        points = [float(group) for group in match.groups()]
        if not all(math.isfinite(p) for p in points):
            raise ValueError(f"cubic-bezier points must be finite: {value!r}")
        return CubicBezier(*points)
    return Easing(value)


# =============================================================================
# Sections
# =============================================================================

BreakpointMap = dict[str, int]

_BREAKPOINT_NAMES = frozenset(bp.value for bp in Breakpoint)


def _check_breakpoints(value: dict | None) -> dict | None:
    if value is None:
        return value
    unknown = sorted(set(value) - _BREAKPOINT_NAMES)
    if unknown:
        raise ValueError(
            f"unknown breakpoint(s) {', '.join(unknown)}; expected one of "
            f"{', '.join(bp.value for bp in Breakpoint)}"
        )
    return value


class DesignTokensSpec(BaseModel):
    """Token section. Explicit scales win over presets."""

    model_config = ConfigDict(frozen=True)

    font_sans: str = DEFAULT_FONT_SANS
    font_mono: str = DEFAULT_FONT_MONO

    base_size_px: int = Field(default=16, ge=10, le=24, description="Base font size (px)")
    type_ratio: TypeRatio | None = None
    base_unit_px: int = Field(default=4, ge=1, le=16, description="Spacing unit (px)")
    density: Density | None = None
    radius_preset: RadiusPreset | None = None
    shadow_preset: ShadowPreset | None = None

    typography: dict[str, str] | None = None
    spacing: dict[str, str] | None = None
    radius: dict[str, str] | None = None
    shadow: dict[str, str] | None = None

    duration_fast_ms: int = Field(default=120, gt=0)
    duration_med_ms: int = Field(default=200, gt=0)
    duration_slow_ms: int = Field(default=360, gt=0)


def _default_padding() -> BreakpointMap:
    return {"base": 16, "md": 24, "lg": 32}


class ContainerSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_widths: BreakpointMap | None = Field(
        default=None, description="Max width per breakpoint; defaults to the thresholds"
    )
    padding: BreakpointMap = Field(default_factory=_default_padding)
    center: bool = True

    @field_validator("max_widths", "padding")
    @classmethod
    def known_breakpoints(cls, value: dict | None) -> dict | None:
        return _check_breakpoints(value)

    def to_config(self) -> ContainerConfig:
        padding = ResponsiveValue(self.padding)
        if self.max_widths is None:
            return ContainerConfig(padding=padding, center=self.center)
        max_widths = {Breakpoint(name): width for name, width in self.max_widths.items()}
        return ContainerConfig(max_widths=max_widths, padding=padding, center=self.center)


class GridSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    columns: BreakpointMap = Field(default_factory=lambda: {"base": 1, "sm": 2, "md": 3, "lg": 4})
    gap: BreakpointMap = Field(default_factory=_default_padding)
    row_gap: BreakpointMap | None = None
    min_item_width: int | None = Field(default=None, gt=0)

    @field_validator("columns", "gap", "row_gap")
    @classmethod
    def known_breakpoints(cls, value: dict | None) -> dict | None:
        return _check_breakpoints(value)

    def to_config(self) -> GridConfig:
        return GridConfig(
            columns=ResponsiveValue(self.columns),
            gap=ResponsiveValue(self.gap),
            row_gap=ResponsiveValue(self.row_gap) if self.row_gap is not None else None,
            min_item_width=self.min_item_width,
        )


class FlexSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    direction: dict[str, FlexDirection] = Field(default_factory=lambda: {"base": FlexDirection.ROW})
    wrap: dict[str, FlexWrap] = Field(default_factory=lambda: {"base": FlexWrap.NO_WRAP})
    justify: dict[str, JustifyContent] = Field(
        default_factory=lambda: {"base": JustifyContent.START}
    )
    align: dict[str, AlignItems] = Field(default_factory=lambda: {"base": AlignItems.STRETCH})
    gap: BreakpointMap = Field(default_factory=lambda: {"base": 0})

    @field_validator("direction", "wrap", "justify", "align", "gap")
    @classmethod
    def known_breakpoints(cls, value: dict) -> dict:
        return _check_breakpoints(value)

    def to_config(self) -> FlexConfig:
        return FlexConfig(
            direction=ResponsiveValue(self.direction),
            wrap=ResponsiveValue(self.wrap),
            justify=ResponsiveValue(self.justify),
            align=ResponsiveValue(self.align),
            gap=ResponsiveValue(self.gap),
        )


class KeyframeSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    offset: float = Field(allow_inf_nan=False)
    properties: dict[str, str]


class AnimationSpec(BaseModel):
    """A custom keyframe animation."""

    model_config = ConfigDict(frozen=True)

    name: str
    keyframes: list[KeyframeSpec]
    duration_ms: int = Field(default=300, ge=0)
    easing: str = "ease-out"
    delay_ms: int = Field(default=0, ge=0)
    iterations: int | Literal["infinite"] = 1
    direction: AnimationDirection = AnimationDirection.NORMAL
    fill_mode: AnimationFillMode = AnimationFillMode.BOTH

    @field_validator("easing")
    @classmethod
    def known_easing(cls, value: str) -> str:
        parse_easing(value)
        return value

    def to_animation(self) -> KeyframeAnimation:
        timing = AnimationTiming(
            duration_ms=self.duration_ms,
            easing=parse_easing(self.easing),
            delay_ms=self.delay_ms,
            iterations=self.iterations,
            direction=self.direction,
            fill_mode=self.fill_mode,
        )
        steps = tuple(Keyframe(step.offset, step.properties) for step in self.keyframes)
        return KeyframeAnimation(self.name, steps, timing)


# =============================================================================
# Root
# =============================================================================


class StylesheetConfig(BaseModel):
    """Root of ``shallot.yaml``."""

    model_config = ConfigDict(frozen=True)

    theme: Theme = Field(default_factory=Theme)
    tokens: DesignTokensSpec = Field(default_factory=DesignTokensSpec)
    container: ContainerSpec = Field(default_factory=ContainerSpec)
    grid: GridSpec = Field(default_factory=GridSpec)
    flex: FlexSpec = Field(default_factory=FlexSpec)
    animations: list[AnimationSpec] = Field(default_factory=list)

    def to_animations(self) -> list[KeyframeAnimation]:
        return [spec.to_animation() for spec in self.animations]
