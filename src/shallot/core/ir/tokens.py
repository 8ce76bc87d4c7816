"""
Design token model for the Shallot stylesheet engine.

Closed variant sets (color mode, palette roles, size tokens, easing keywords)
are StrEnums so every rendering site produces a valid CSS token. Colors,
themes, palettes and scales are immutable once constructed.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from ..errors import make_config_error
from ..units import format_number, to_px

# =============================================================================
# Enums
# =============================================================================


class ColorMode(StrEnum):
    """Color mode for the theme."""

    LIGHT = "light"
    DARK = "dark"


class ColorScheme(StrEnum):
    """Harmony used to derive brand colors from a primary color."""

    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SPLIT_COMPLEMENTARY = "split_complementary"


class PaletteRole(StrEnum):
    """Semantic color roles. Values are the ``--sh-*`` variable suffixes."""

    BACKGROUND = "bg"
    SURFACE = "surface"
    SURFACE_2 = "surface-2"
    BORDER = "border"
    TEXT = "text"
    TEXT_MUTED = "text-muted"
    ACCENT = "accent"
    ACCENT_2 = "accent-2"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class SizeToken(StrEnum):
    """Size tokens shared by every scale, smallest first."""

    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"


class ScaleKind(StrEnum):
    """Kinds of token scales."""

    TYPOGRAPHY = "typography"
    SPACING = "spacing"
    RADIUS = "radius"
    SHADOW = "shadow"


# Scales whose magnitudes must grow strictly with the token order
MONOTONIC_SCALES: frozenset[ScaleKind] = frozenset({ScaleKind.SPACING, ScaleKind.RADIUS})


class Easing(StrEnum):
    """Keyword timing functions."""

    LINEAR = "linear"
    EASE = "ease"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"
    STEP_START = "step-start"
    STEP_END = "step-end"

    def to_css(self) -> str:
        return self.value


@dataclass(frozen=True)
class CubicBezier:
    """A ``cubic-bezier()`` timing function."""

    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        points = (self.x1, self.y1, self.x2, self.y2)
        if not all(math.isfinite(p) for p in points):
            raise make_config_error(
                f"cubic-bezier points must be finite, got {points!r}", "easing"
            )

    def to_css(self) -> str:
        points = ", ".join(format_number(p, 3) for p in (self.x1, self.y1, self.x2, self.y2))
        return f"cubic-bezier({points})"

    # Named curves
    @classmethod
    def ease_out_expo(cls) -> CubicBezier:
        return cls(0.19, 1.0, 0.22, 1.0)

    @classmethod
    def ease_in_out_cubic(cls) -> CubicBezier:
        return cls(0.645, 0.045, 0.355, 1.0)

    @classmethod
    def ease_out_back(cls) -> CubicBezier:
        """Slight overshoot."""
        return cls(0.175, 0.885, 0.32, 1.275)

    @classmethod
    def ease_in_out_back(cls) -> CubicBezier:
        return cls(0.68, -0.55, 0.265, 1.55)

    @classmethod
    def ease_out_quint(cls) -> CubicBezier:
        return cls(0.22, 1.0, 0.36, 1.0)

    @classmethod
    def ease_out_quart(cls) -> CubicBezier:
        return cls(0.25, 1.0, 0.5, 1.0)

    @classmethod
    def standard(cls) -> CubicBezier:
        return cls(0.4, 0.0, 0.2, 1.0)


EasingFunction = Easing | CubicBezier


# =============================================================================
# Colors
# =============================================================================


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class HSLColor(BaseModel):
    """Hue/saturation/lightness color with optional alpha.

    Derivations return new colors; a color is never changed in place.
    """

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0.0, lt=360.0, description="Hue in degrees")
    s: float = Field(ge=0.0, le=100.0, description="Saturation percentage")
    l: float = Field(ge=0.0, le=100.0, description="Lightness percentage")  # noqa: E741
    a: float = Field(default=1.0, ge=0.0, le=1.0, description="Alpha (0-1)")

    def to_css(self) -> str:
        body = f"{format_number(self.h)} {format_number(self.s)}% {format_number(self.l)}%"
        if self.a < 1.0:
            return f"hsl({body} / {format_number(self.a)})"
        return f"hsl({body})"

    def __str__(self) -> str:
        return self.to_css()

    def _derive(
        self,
        *,
        h: float | None = None,
        s: float | None = None,
        l: float | None = None,  # noqa: E741
        a: float | None = None,
    ) -> HSLColor:
        return HSLColor(
            h=self.h if h is None else h,
            s=self.s if s is None else _clamp(s, 0.0, 100.0),
            l=self.l if l is None else _clamp(l, 0.0, 100.0),
            a=self.a if a is None else _clamp(a, 0.0, 1.0),
        )

    def lighten(self, amount: float) -> HSLColor:
        return self._derive(l=self.l + amount)

    def darken(self, amount: float) -> HSLColor:
        return self._derive(l=self.l - amount)

    def saturate(self, amount: float) -> HSLColor:
        return self._derive(s=self.s + amount)

    def desaturate(self, amount: float) -> HSLColor:
        return self._derive(s=self.s - amount)

    def rotate(self, degrees: float) -> HSLColor:
        hue = (self.h + degrees) % 360.0
        # A tiny negative sum wraps to exactly 360.0
        return self._derive(h=0.0 if hue >= 360.0 else hue)

    def with_alpha(self, alpha: float) -> HSLColor:
        return self._derive(a=alpha)

    def complement(self) -> HSLColor:
        return self.rotate(180.0)

    def analogous(self, offset: float = 30.0) -> tuple[HSLColor, HSLColor]:
        return self.rotate(-offset), self.rotate(offset)

    def triadic(self) -> tuple[HSLColor, HSLColor]:
        return self.rotate(120.0), self.rotate(240.0)

    def tetradic(self) -> tuple[HSLColor, HSLColor, HSLColor]:
        return self.rotate(90.0), self.rotate(180.0), self.rotate(270.0)


def hsl(h: float, s: float, l: float, a: float = 1.0) -> HSLColor:  # noqa: E741
    """Shorthand constructor for HSLColor."""
    return HSLColor(h=h, s=s, l=l, a=a)


# =============================================================================
# Theme
# =============================================================================


class Theme(BaseModel):
    """Color mode plus the three accent seed values.

    Palettes are derived from a theme, never authored per mode.
    """

    model_config = ConfigDict(frozen=True)

    mode: ColorMode = Field(default=ColorMode.LIGHT, description="Light or dark mode")
    accent_h: float = Field(default=312.0, ge=0.0, lt=360.0, description="Accent hue")
    accent_s: float = Field(default=35.0, ge=0.0, le=100.0, description="Accent saturation")
    accent_l: float = Field(default=33.0, ge=0.0, le=100.0, description="Accent lightness")
    scheme: ColorScheme | None = Field(
        default=None, description="Optional harmony for --sh-color-* brand variables"
    )

    @property
    def accent(self) -> HSLColor:
        return HSLColor(h=self.accent_h, s=self.accent_s, l=self.accent_l)


@dataclass(frozen=True)
class Palette:
    """Fully resolved mapping of every PaletteRole to a color."""

    colors: Mapping[PaletteRole, HSLColor]

    def __post_init__(self) -> None:
        try:
            given = {PaletteRole(role): color for role, color in self.colors.items()}
        except ValueError as e:
            raise make_config_error(str(e), "palette") from e
        missing = [role for role in PaletteRole if role not in given]
        if missing:
            raise make_config_error(
                f"Palette is missing roles: {', '.join(r.value for r in missing)}",
                "palette",
                token=missing[0].value,
            )
        ordered = {role: given[role] for role in PaletteRole}
        object.__setattr__(self, "colors", MappingProxyType(ordered))

    def __hash__(self) -> int:
        return hash(tuple(self.colors.items()))

    def __getitem__(self, role: PaletteRole | str) -> HSLColor:
        return self.colors[PaletteRole(role)]

    def __iter__(self) -> Iterator[PaletteRole]:
        return iter(self.colors)

    def __len__(self) -> int:
        return len(self.colors)

    def items(self) -> Iterator[tuple[PaletteRole, HSLColor]]:
        return iter(self.colors.items())

    def to_css_variables(self) -> dict[str, str]:
        """Ordered ``--sh-<role>`` variables."""
        return {f"--sh-{role.value}": color.to_css() for role, color in self.colors.items()}


# =============================================================================
# Scales
# =============================================================================


@dataclass(frozen=True)
class Scale:
    """Ordered mapping of size tokens to CSS values for one scale kind.

    Any subset of SizeToken may be present; order always follows SizeToken.
    Spacing and radius values must be lengths whose pixel magnitudes grow
    strictly with the token order.
    """

    kind: ScaleKind
    values: Mapping[SizeToken, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ScaleKind(self.kind))
        config = f"scale.{self.kind.value}"
        given: dict[SizeToken, str] = {}
        for token, value in self.values.items():
            try:
                given[SizeToken(token)] = str(value)
            except ValueError as e:
                raise make_config_error(f"Unknown size token {token!r}", config, token=str(token)) from e
        if not given:
            raise make_config_error("Scale has no entries", config)
        ordered = {token: given[token] for token in SizeToken if token in given}
        if self.kind in MONOTONIC_SCALES:
            _check_increasing(ordered, config)
        object.__setattr__(self, "values", MappingProxyType(ordered))

    def __hash__(self) -> int:
        return hash((self.kind, tuple(self.values.items())))

    def __getitem__(self, token: SizeToken | str) -> str:
        return self.values[SizeToken(token)]

    def __contains__(self, token: object) -> bool:
        return token in self.values

    def __iter__(self) -> Iterator[SizeToken]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def items(self) -> Iterator[tuple[SizeToken, str]]:
        return iter(self.values.items())

    def to_css_variables(self, prefix: str) -> dict[str, str]:
        """Ordered ``--sh-<prefix>-<token>`` variables."""
        return {f"--sh-{prefix}-{token.value}": value for token, value in self.values.items()}


def _check_increasing(values: Mapping[SizeToken, str], config: str) -> None:
    previous: tuple[SizeToken, float] | None = None
    for token, value in values.items():
        try:
            magnitude = to_px(value)
        except ValueError as e:
            raise make_config_error(str(e), config, token=token.value) from e
        if previous is not None and magnitude <= previous[1]:
            raise make_config_error(
                f"{value} is not larger than {previous[0].value} "
                f"({format_number(previous[1])}px)",
                config,
                token=token.value,
            )
        previous = (token, magnitude)


# =============================================================================
# Design tokens
# =============================================================================

DEFAULT_FONT_SANS = (
    "'Outfit', ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, "
    "Helvetica, Arial, 'Apple Color Emoji', 'Segoe UI Emoji'"
)
DEFAULT_FONT_MONO = "'JetBrains Mono', 'Fira Code', monospace"


def _default_typography() -> Scale:
    return Scale(
        ScaleKind.TYPOGRAPHY,
        {
            SizeToken.XS: "0.75rem",
            SizeToken.SM: "0.875rem",
            SizeToken.MD: "1rem",
            SizeToken.LG: "1.125rem",
            SizeToken.XL: "1.25rem",
            SizeToken.XXL: "1.5rem",
        },
    )


def _default_spacing() -> Scale:
    return Scale(
        ScaleKind.SPACING,
        {
            SizeToken.XS: "0.25rem",
            SizeToken.SM: "0.5rem",
            SizeToken.MD: "1rem",
            SizeToken.LG: "1.5rem",
            SizeToken.XL: "2rem",
            SizeToken.XXL: "3rem",
        },
    )


def _default_radius() -> Scale:
    return Scale(
        ScaleKind.RADIUS,
        {
            SizeToken.SM: "10px",
            SizeToken.MD: "14px",
            SizeToken.LG: "18px",
            SizeToken.XL: "24px",
        },
    )


def _default_shadow() -> Scale:
    return Scale(
        ScaleKind.SHADOW,
        {
            SizeToken.SM: "0 6px 18px hsl(240 30% 10% / 0.08)",
            SizeToken.MD: "0 16px 48px hsl(240 30% 10% / 0.10)",
            SizeToken.XL: "0 28px 80px hsl(240 30% 10% / 0.18)",
        },
    )


@dataclass(frozen=True)
class TimingScale:
    """Motion durations (ms) and easing curves shared by animations and transitions."""

    fast_ms: int = 120
    med_ms: int = 200
    slow_ms: int = 360
    ease_out: EasingFunction = field(default_factory=lambda: CubicBezier(0.16, 1.0, 0.3, 1.0))
    ease_in_out: EasingFunction = field(default_factory=CubicBezier.standard)

    def __post_init__(self) -> None:
        if not 0 < self.fast_ms < self.med_ms < self.slow_ms:
            raise make_config_error(
                f"Durations must satisfy 0 < fast < med < slow, got "
                f"{self.fast_ms}/{self.med_ms}/{self.slow_ms}",
                "timing",
            )

    def to_css_variables(self) -> dict[str, str]:
        return {
            "--sh-dur-fast": f"{self.fast_ms}ms",
            "--sh-dur-med": f"{self.med_ms}ms",
            "--sh-dur-slow": f"{self.slow_ms}ms",
            "--sh-ease-out": self.ease_out.to_css(),
            "--sh-ease-in-out": self.ease_in_out.to_css(),
        }


@dataclass(frozen=True)
class DesignTokens:
    """All non-color tokens that feed the ``:root`` block."""

    font_sans: str = DEFAULT_FONT_SANS
    font_mono: str = DEFAULT_FONT_MONO
    typography: Scale = field(default_factory=_default_typography)
    spacing: Scale = field(default_factory=_default_spacing)
    radius: Scale = field(default_factory=_default_radius)
    shadow: Scale = field(default_factory=_default_shadow)
    timing: TimingScale = field(default_factory=TimingScale)

    def __post_init__(self) -> None:
        expected = {
            "typography": ScaleKind.TYPOGRAPHY,
            "spacing": ScaleKind.SPACING,
            "radius": ScaleKind.RADIUS,
            "shadow": ScaleKind.SHADOW,
        }
        for name, kind in expected.items():
            scale: Scale = getattr(self, name)
            if scale.kind != kind:
                raise make_config_error(
                    f"Expected a {kind.value} scale, got {scale.kind.value}", f"tokens.{name}"
                )
