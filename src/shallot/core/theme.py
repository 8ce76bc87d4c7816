"""
Theme resolver for Shallot.

Derives the full semantic palette from a Theme (mode + accent seed) and
renders the ``:root`` block of ``--sh-*`` custom properties that every
widget consumes. The same seed always yields byte-identical output.
"""

from __future__ import annotations

import logging

from .color import ERROR, SUCCESS, WARNING, scheme_variables
from .css_utils import css_vars
from .ir.tokens import ColorMode, DesignTokens, HSLColor, Palette, PaletteRole, Theme, hsl

logger = logging.getLogger(__name__)

# Neutral surfaces per mode: (bg, surface, surface-2, border, text, text-muted)
_NEUTRALS: dict[ColorMode, dict[PaletteRole, HSLColor]] = {
    ColorMode.LIGHT: {
        PaletteRole.BACKGROUND: hsl(240, 20, 98),
        PaletteRole.SURFACE: hsl(0, 0, 100),
        PaletteRole.SURFACE_2: hsl(240, 14, 96),
        PaletteRole.BORDER: hsl(240, 10, 88),
        PaletteRole.TEXT: hsl(240, 10, 12),
        PaletteRole.TEXT_MUTED: hsl(240, 6, 40),
    },
    ColorMode.DARK: {
        PaletteRole.BACKGROUND: hsl(240, 10, 8),
        PaletteRole.SURFACE: hsl(240, 10, 12),
        PaletteRole.SURFACE_2: hsl(240, 10, 16),
        PaletteRole.BORDER: hsl(240, 10, 22),
        PaletteRole.TEXT: hsl(0, 0, 98),
        PaletteRole.TEXT_MUTED: hsl(240, 6, 70),
    },
}

# Lightness shift from accent to accent-2 per mode
_ACCENT_2_SHIFT: dict[ColorMode, float] = {
    ColorMode.LIGHT: 18.0,
    ColorMode.DARK: -10.0,
}
_ACCENT_2_MIN_SATURATION = 18.0
_ACCENT_2_LIGHTNESS_RANGE = (10.0, 90.0)


def secondary_accent(theme: Theme) -> HSLColor:
    """Hue-preserving lightness shift of the accent for the theme's mode."""
    low, high = _ACCENT_2_LIGHTNESS_RANGE
    lightness = max(low, min(high, theme.accent_l + _ACCENT_2_SHIFT[theme.mode]))
    return HSLColor(
        h=theme.accent_h,
        s=max(theme.accent_s, _ACCENT_2_MIN_SATURATION),
        l=lightness,
    )


def resolve(theme: Theme) -> Palette:
    """Resolve a Theme into a complete Palette.

    Args:
        theme: Mode and accent seed values.

    Returns:
        Palette with every PaletteRole populated.
    """
    colors = dict(_NEUTRALS[theme.mode])
    colors[PaletteRole.ACCENT] = theme.accent
    colors[PaletteRole.ACCENT_2] = secondary_accent(theme)
    colors[PaletteRole.SUCCESS] = SUCCESS
    colors[PaletteRole.WARNING] = WARNING
    colors[PaletteRole.ERROR] = ERROR
    return Palette(colors)


def resolve_both(theme: Theme) -> dict[ColorMode, Palette]:
    """Resolve the light and dark palettes for the same accent seed."""
    return {mode: resolve(theme.model_copy(update={"mode": mode})) for mode in ColorMode}


def theme_variables(theme: Theme, tokens: DesignTokens | None = None) -> dict[str, str]:
    """
    Build the ordered ``:root`` custom properties for a theme.

    Variables that reference others via ``var()`` always come after the
    variables they reference.

    Args:
        theme: Theme to resolve
        tokens: Design tokens, defaults when omitted

    Returns:
        Ordered dict of variable name to CSS value
    """
    tokens = tokens or DesignTokens()
    palette = resolve(theme)
    variables: dict[str, str] = {}

    variables["--sh-font-sans"] = tokens.font_sans
    variables["--sh-font-mono"] = tokens.font_mono
    variables.update(tokens.typography.to_css_variables("font-size"))
    variables.update(tokens.spacing.to_css_variables("space"))
    variables.update(tokens.radius.to_css_variables("radius"))
    variables.update(tokens.shadow.to_css_variables("shadow"))
    variables.update(tokens.timing.to_css_variables())

    # Palette roles in role order: bg, surfaces, border, text, accents, status
    for role in (
        PaletteRole.BACKGROUND,
        PaletteRole.SURFACE,
        PaletteRole.SURFACE_2,
        PaletteRole.BORDER,
        PaletteRole.TEXT,
        PaletteRole.TEXT_MUTED,
        PaletteRole.ACCENT,
        PaletteRole.ACCENT_2,
    ):
        variables[f"--sh-{role.value}"] = palette[role].to_css()
    variables["--sh-page-gradient"] = (
        "radial-gradient(900px circle at 15% 10%, "
        "color-mix(in srgb, var(--sh-accent) 14%, transparent), transparent 60%), "
        "radial-gradient(900px circle at 90% 20%, "
        "color-mix(in srgb, var(--sh-accent-2) 12%, transparent), transparent 55%), "
        "var(--sh-bg)"
    )
    variables["--sh-shadow-glow"] = (
        "0 0 0 4px color-mix(in srgb, var(--sh-accent) 22%, transparent), "
        "0 18px 54px color-mix(in srgb, var(--sh-accent) 18%, transparent)"
    )
    for role in (PaletteRole.SUCCESS, PaletteRole.WARNING, PaletteRole.ERROR):
        variables[f"--sh-{role.value}"] = palette[role].to_css()

    # Aliases for consumers that expect --color-* names
    variables["--color-primary"] = "var(--sh-accent)"
    variables["--color-secondary"] = "var(--sh-accent-2)"
    variables["--color-background"] = "var(--sh-bg)"
    variables["--color-surface"] = "var(--sh-surface)"
    variables["--color-surface-2"] = "var(--sh-surface-2)"
    variables["--color-border"] = "var(--sh-border)"
    variables["--color-text"] = "var(--sh-text)"
    variables["--color-text-muted"] = "var(--sh-text-muted)"
    variables["--color-primary-content"] = "white"
    for token in tokens.shadow:
        variables[f"--shadow-{token.value}"] = f"var(--sh-shadow-{token.value})"

    if theme.scheme is not None:
        variables.update(scheme_variables(theme.accent, theme.scheme))

    return variables


_BASE_RULES = """\
html, body { height: 100%; }
body {
  margin: 0;
  font-family: var(--sh-font-sans);
  background: var(--sh-page-gradient);
  background-attachment: fixed;
  color: var(--sh-text);
  line-height: 1.45;
}
* { box-sizing: border-box; }
::selection { background: color-mix(in srgb, var(--sh-accent) 35%, transparent); }
:focus-visible { outline: 3px solid color-mix(in srgb, var(--sh-accent) 30%, transparent); outline-offset: 3px; }
a { color: var(--sh-accent); text-decoration: none; }
a:hover { text-decoration: underline; }
"""


def theme_css(theme: Theme | None = None, tokens: DesignTokens | None = None) -> str:
    """
    Generate the theme stylesheet section.

    Args:
        theme: Theme to render, the default Light theme when omitted
        tokens: Design tokens, defaults when omitted

    Returns:
        CSS string with the :root block and base element rules
    """
    theme = theme or Theme()
    variables = theme_variables(theme, tokens)
    logger.debug(
        "Resolved %s theme (accent %s) into %d variables",
        theme.mode.value,
        theme.accent.to_css(),
        len(variables),
    )
    return f":root {{\n{css_vars(variables, indent=2)}\n}}\n\n{_BASE_RULES}"
