"""
Color math and brand color harmonies.

Pure-Python conversions between HSL, RGB and hex, WCAG contrast helpers,
and ColorScheme-driven brand palettes rendered as ``--sh-color-*``
variables. No external color libraries required.
"""

from __future__ import annotations

import colorsys
import re

from .ir.tokens import ColorScheme, HSLColor, hsl

RGB = tuple[int, int, int]

_HEX_SHORT = re.compile(r"^#?([0-9a-fA-F]{3})$")
_HEX_LONG = re.compile(r"^#?([0-9a-fA-F]{6})$")

# Fixed semantic hues shared by every scheme
SUCCESS = hsl(145, 63, 38)
WARNING = hsl(38, 92, 52)
ERROR = hsl(352, 78, 54)
INFO = hsl(220, 75, 48)

WCAG_AA = 4.5
WCAG_AAA = 7.0


# =============================================================================
# Conversions
# =============================================================================


def hex_to_rgb(value: str) -> RGB | None:
    """Parse ``#rgb`` or ``#rrggbb`` (leading ``#`` optional).

    Returns:
        RGB tuple, or None if the text is not a hex color.
    """
    text = value.strip()
    short = _HEX_SHORT.match(text)
    if short:
        chunk = short.group(1)
        return int(chunk[0] * 2, 16), int(chunk[1] * 2, 16), int(chunk[2] * 2, 16)
    long = _HEX_LONG.match(text)
    if long:
        chunk = long.group(1)
        return int(chunk[0:2], 16), int(chunk[2:4], 16), int(chunk[4:6], 16)
    return None


def rgb_to_hex(rgb: RGB) -> str:
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def hsl_to_rgb(color: HSLColor) -> RGB:
    r, g, b = colorsys.hls_to_rgb(color.h / 360.0, color.l / 100.0, color.s / 100.0)
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


def rgb_to_hsl(rgb: RGB) -> HSLColor:
    h, l, s = colorsys.rgb_to_hls(*(chan / 255.0 for chan in rgb))  # noqa: E741
    return HSLColor(h=round(h * 360.0, 1) % 360.0, s=round(s * 100.0, 1), l=round(l * 100.0, 1))


# =============================================================================
# Contrast
# =============================================================================


def luminance(rgb: RGB) -> float:
    """WCAG relative luminance."""

    def channel(value: int) -> float:
        c = value / 255.0
        if c <= 0.03928:
            return c / 12.92
        return ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (channel(v) for v in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: RGB | HSLColor | str, second: RGB | HSLColor | str) -> float | None:
    """Contrast ratio between two colors, or None if either cannot be parsed."""
    left = _as_rgb(first)
    right = _as_rgb(second)
    if left is None or right is None:
        return None
    bright = max(luminance(left), luminance(right))
    dark = min(luminance(left), luminance(right))
    return (bright + 0.05) / (dark + 0.05)


def meets_wcag_aa(first: RGB | HSLColor | str, second: RGB | HSLColor | str) -> bool:
    ratio = contrast_ratio(first, second)
    return ratio is not None and ratio >= WCAG_AA


def meets_wcag_aaa(first: RGB | HSLColor | str, second: RGB | HSLColor | str) -> bool:
    ratio = contrast_ratio(first, second)
    return ratio is not None and ratio >= WCAG_AAA


def _as_rgb(value: RGB | HSLColor | str) -> RGB | None:
    if isinstance(value, HSLColor):
        return hsl_to_rgb(value)
    if isinstance(value, str):
        return hex_to_rgb(value)
    return value


# =============================================================================
# Brand schemes
# =============================================================================


def derive_scheme(primary: HSLColor, scheme: ColorScheme) -> dict[str, HSLColor]:
    """Derive secondary/accent brand colors from a primary color.

    Returns:
        Ordered dict with primary, secondary, accent, success, warning,
        error and info colors.
    """
    if scheme == ColorScheme.MONOCHROMATIC:
        secondary, accent = primary.desaturate(20.0), primary.lighten(15.0)
    elif scheme == ColorScheme.ANALOGOUS:
        secondary, accent = primary.analogous(30.0)
    elif scheme == ColorScheme.COMPLEMENTARY:
        secondary, accent = primary.complement(), primary.lighten(20.0)
    elif scheme == ColorScheme.TRIADIC:
        secondary, accent = primary.triadic()
    elif scheme == ColorScheme.TETRADIC:
        secondary, accent, _ = primary.tetradic()
    elif scheme == ColorScheme.SPLIT_COMPLEMENTARY:
        # Neighbours of the complement, 30 degrees either side
        secondary, accent = primary.complement().analogous(30.0)
    else:
        raise ValueError(f"Unknown color scheme: {scheme!r}")

    return {
        "primary": primary,
        "secondary": secondary,
        "accent": accent,
        "success": SUCCESS,
        "warning": WARNING,
        "error": ERROR,
        "info": INFO,
    }


def scheme_variables(primary: HSLColor, scheme: ColorScheme) -> dict[str, str]:
    """Render a derived scheme as ordered ``--sh-color-*`` variables."""
    colors = derive_scheme(primary, scheme)
    variables: dict[str, str] = {}

    for name in ("primary", "secondary", "accent"):
        color = colors[name]
        variables[f"--sh-color-{name}"] = color.to_css()
        variables[f"--sh-color-{name}-light"] = color.lighten(10.0).to_css()
        variables[f"--sh-color-{name}-dark"] = color.darken(10.0).to_css()

    for name in ("success", "warning", "error", "info"):
        variables[f"--sh-color-{name}"] = colors[name].to_css()

    for name in ("primary", "secondary"):
        color = colors[name]
        variables[f"--sh-gradient-{name}"] = (
            f"linear-gradient(135deg, {color.to_css()}, {color.lighten(15.0).to_css()})"
        )

    return variables
