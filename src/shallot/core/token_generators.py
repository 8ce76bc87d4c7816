"""
Scale generators for typography, spacing, radius and shadow tokens.

Each generator returns a validated Scale keyed by SizeToken, so generated
spacing and radius scales obey the same strictly-increasing rule as
hand-written ones.
"""

from __future__ import annotations

from .ir.config import (
    TYPE_RATIO_VALUES,
    Density,
    DesignTokensSpec,
    RadiusPreset,
    ShadowPreset,
    TypeRatio,
)
from .ir.tokens import DesignTokens, Scale, ScaleKind, SizeToken, TimingScale
from .units import ROOT_FONT_PX, format_number

# =============================================================================
# Typography
# =============================================================================

# Steps relative to the base size (md)
_TYPE_STEPS: dict[SizeToken, int] = {
    SizeToken.XS: -2,
    SizeToken.SM: -1,
    SizeToken.MD: 0,
    SizeToken.LG: 1,
    SizeToken.XL: 2,
    SizeToken.XXL: 3,
}


def _rem(size_px: float) -> str:
    if size_px == 0:
        return "0"
    return f"{format_number(size_px / ROOT_FONT_PX, 4)}rem"


def generate_type_scale(base_size_px: int = 16, ratio: TypeRatio = TypeRatio.MAJOR_THIRD) -> Scale:
    """Generate a modular type scale.

    Args:
        base_size_px: Font size of the md step in pixels.
        ratio: Modular scale ratio preset.

    Returns:
        Typography Scale in rem.
    """
    ratio_value = TYPE_RATIO_VALUES[ratio]
    values = {token: _rem(base_size_px * ratio_value**step) for token, step in _TYPE_STEPS.items()}
    return Scale(ScaleKind.TYPOGRAPHY, values)


# =============================================================================
# Spacing
# =============================================================================

_DENSITY_MULTIPLIERS: dict[Density, float] = {
    Density.COMPACT: 0.75,
    Density.COMFORTABLE: 1.0,
    Density.SPACIOUS: 1.5,
}

# Multiples of the base unit per token
_SPACING_MULTIPLIERS: dict[SizeToken, int] = {
    SizeToken.XS: 1,
    SizeToken.SM: 2,
    SizeToken.MD: 4,
    SizeToken.LG: 6,
    SizeToken.XL: 8,
    SizeToken.XXL: 12,
}


def generate_spacing_scale(
    base_unit_px: int = 4, density: Density = Density.COMFORTABLE
) -> Scale:
    """Generate a spacing scale.

    The defaults reproduce the built-in scale (0.25rem ... 3rem).
    """
    factor = base_unit_px * _DENSITY_MULTIPLIERS[density]
    values = {token: _rem(factor * mult) for token, mult in _SPACING_MULTIPLIERS.items()}
    return Scale(ScaleKind.SPACING, values)


# =============================================================================
# Shape
# =============================================================================

_RADIUS_PRESETS: dict[RadiusPreset, dict[SizeToken, str]] = {
    RadiusPreset.SHARP: {
        SizeToken.SM: "2px",
        SizeToken.MD: "4px",
        SizeToken.LG: "6px",
        SizeToken.XL: "8px",
    },
    RadiusPreset.SUBTLE: {
        SizeToken.SM: "4px",
        SizeToken.MD: "6px",
        SizeToken.LG: "8px",
        SizeToken.XL: "12px",
    },
    RadiusPreset.ROUNDED: {
        SizeToken.SM: "10px",
        SizeToken.MD: "14px",
        SizeToken.LG: "18px",
        SizeToken.XL: "24px",
    },
    RadiusPreset.PILL: {
        SizeToken.SM: "12px",
        SizeToken.MD: "20px",
        SizeToken.LG: "28px",
        SizeToken.XL: "9999px",
    },
}

_SHADOW_PRESETS: dict[ShadowPreset, dict[SizeToken, str]] = {
    ShadowPreset.NONE: {
        SizeToken.SM: "none",
        SizeToken.MD: "none",
        SizeToken.XL: "none",
    },
    ShadowPreset.SUBTLE: {
        SizeToken.SM: "0 1px 2px hsl(240 30% 10% / 0.04)",
        SizeToken.MD: "0 2px 4px hsl(240 30% 10% / 0.06)",
        SizeToken.XL: "0 8px 16px hsl(240 30% 10% / 0.10)",
    },
    ShadowPreset.SOFT: {
        SizeToken.SM: "0 6px 18px hsl(240 30% 10% / 0.08)",
        SizeToken.MD: "0 16px 48px hsl(240 30% 10% / 0.10)",
        SizeToken.XL: "0 28px 80px hsl(240 30% 10% / 0.18)",
    },
    ShadowPreset.DRAMATIC: {
        SizeToken.SM: "0 2px 4px hsl(240 30% 10% / 0.12)",
        SizeToken.MD: "0 6px 12px hsl(240 30% 10% / 0.16)",
        SizeToken.XL: "0 24px 48px hsl(240 30% 10% / 0.24)",
    },
}


def generate_radius_scale(preset: RadiusPreset = RadiusPreset.ROUNDED) -> Scale:
    return Scale(ScaleKind.RADIUS, _RADIUS_PRESETS[preset])


def generate_shadow_scale(preset: ShadowPreset = ShadowPreset.SOFT) -> Scale:
    return Scale(ScaleKind.SHADOW, _SHADOW_PRESETS[preset])


# =============================================================================
# Assembly
# =============================================================================


def build_design_tokens(spec: DesignTokensSpec) -> DesignTokens:
    """
    Build DesignTokens from a config section.

    Explicit scale overrides win over presets; a section with neither keeps
    the built-in default scale.

    Raises:
        InvalidConfigError: If a resulting scale or the timing is invalid.
    """
    defaults = DesignTokens()

    if spec.typography is not None:
        typography = Scale(ScaleKind.TYPOGRAPHY, spec.typography)
    elif spec.type_ratio is not None:
        typography = generate_type_scale(spec.base_size_px, spec.type_ratio)
    else:
        typography = defaults.typography

    if spec.spacing is not None:
        spacing = Scale(ScaleKind.SPACING, spec.spacing)
    elif spec.density is not None:
        spacing = generate_spacing_scale(spec.base_unit_px, spec.density)
    else:
        spacing = defaults.spacing

    if spec.radius is not None:
        radius = Scale(ScaleKind.RADIUS, spec.radius)
    elif spec.radius_preset is not None:
        radius = generate_radius_scale(spec.radius_preset)
    else:
        radius = defaults.radius

    if spec.shadow is not None:
        shadow = Scale(ScaleKind.SHADOW, spec.shadow)
    elif spec.shadow_preset is not None:
        shadow = generate_shadow_scale(spec.shadow_preset)
    else:
        shadow = defaults.shadow

    return DesignTokens(
        font_sans=spec.font_sans,
        font_mono=spec.font_mono,
        typography=typography,
        spacing=spacing,
        radius=radius,
        shadow=shadow,
        timing=TimingScale(
            fast_ms=spec.duration_fast_ms,
            med_ms=spec.duration_med_ms,
            slow_ms=spec.duration_slow_ms,
        ),
    )
