"""
Shallot token model.

Token types live in ``tokens``; the ``shallot.yaml`` schema lives in
``config`` and is imported from there directly.
"""

from .tokens import (
    MONOTONIC_SCALES,
    ColorMode,
    ColorScheme,
    CubicBezier,
    DesignTokens,
    Easing,
    EasingFunction,
    HSLColor,
    Palette,
    PaletteRole,
    Scale,
    ScaleKind,
    SizeToken,
    Theme,
    TimingScale,
    hsl,
)

__all__ = [
    "MONOTONIC_SCALES",
    "ColorMode",
    "ColorScheme",
    "CubicBezier",
    "DesignTokens",
    "Easing",
    "EasingFunction",
    "HSLColor",
    "Palette",
    "PaletteRole",
    "Scale",
    "ScaleKind",
    "SizeToken",
    "Theme",
    "TimingScale",
    "hsl",
]
