"""
Icon catalogue and icon CSS.

Icons are stroke-based 24x24 SVG fragments. ``Icon.to_svg_string`` renders
inline SVG for widgets; ``icon_css`` renders the size and button classes.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from enum import StrEnum

from .animations import AnimationTiming, Keyframe, KeyframeAnimation, render_keyframes
from .css_utils import render_classes
from .errors import make_config_error
from .ir.tokens import Easing


class IconSize(StrEnum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"

    @property
    def px(self) -> int:
        return _ICON_PX[self]


_ICON_PX = {
    IconSize.XS: 12,
    IconSize.SM: 16,
    IconSize.MD: 20,
    IconSize.LG: 24,
    IconSize.XL: 32,
    IconSize.XXL: 48,
}


class IconCategory(StrEnum):
    NAVIGATION = "navigation"
    ACTION = "action"
    STATUS = "status"
    COMMUNICATION = "communication"
    MEDIA = "media"
    FILE = "file"
    SYSTEM = "system"
    SOCIAL = "social"


_CHEVRON_LEFT = '<path d="m15 18-6-6 6-6"/>'
_CHEVRON_RIGHT = '<path d="m9 18 6-6-6-6"/>'
_CHEVRON_UP = '<path d="m18 15-6-6-6 6"/>'
_CHEVRON_DOWN = '<path d="m6 9 6 6 6-6"/>'

ICON_PATHS: dict[str, str] = {
    # Navigation
    "arrow-left": _CHEVRON_LEFT,
    "arrow-right": _CHEVRON_RIGHT,
    "arrow-up": _CHEVRON_UP,
    "arrow-down": _CHEVRON_DOWN,
    "chevron-left": _CHEVRON_LEFT,
    "chevron-right": _CHEVRON_RIGHT,
    "chevron-up": _CHEVRON_UP,
    "chevron-down": _CHEVRON_DOWN,
    "menu": (
        '<line x1="4" x2="20" y1="12" y2="12"/><line x1="4" x2="20" y1="6" y2="6"/>'
        '<line x1="4" x2="20" y1="18" y2="18"/>'
    ),
    "home": (
        '<path d="m3 9 9-7 9 7v11a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"/>'
        '<polyline points="9 22 9 12 15 12 15 22"/>'
    ),
    "search": '<circle cx="11" cy="11" r="8"/><path d="m21 21-4.3-4.3"/>',
    # Actions
    "plus": '<path d="M5 12h14"/><path d="M12 5v14"/>',
    "minus": '<path d="M5 12h14"/>',
    "x": '<path d="M18 6 6 18"/><path d="m6 6 12 12"/>',
    "check": '<path d="M20 6 9 17l-5-5"/>',
    "edit": (
        '<path d="M11 4H4a2 2 0 0 0-2 2v14a2 2 0 0 0 2 2h14a2 2 0 0 0 2-2v-7"/>'
        '<path d="M18.5 2.5a2.121 2.121 0 0 1 3 3L12 15l-4 1 1-4 9.5-9.5z"/>'
    ),
    "trash": (
        '<path d="M3 6h18"/><path d="M19 6v14c0 1-1 2-2 2H7c-1 0-2-1-2-2V6"/>'
        '<path d="M8 6V4c0-1 1-2 2-2h4c1 0 2 1 2 2v2"/>'
    ),
    "copy": (
        '<rect width="14" height="14" x="8" y="8" rx="2" ry="2"/>'
        '<path d="M4 16c-1.1 0-2-.9-2-2V4c0-1.1.9-2 2-2h10c1.1 0 2 .9 2 2"/>'
    ),
    "download": (
        '<path d="M21 15v4a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2v-4"/>'
        '<polyline points="7 10 12 15 17 10"/><line x1="12" x2="12" y1="15" y2="3"/>'
    ),
    "upload": (
        '<path d="M21 15v4a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2v-4"/>'
        '<polyline points="17 8 12 3 7 8"/><line x1="12" x2="12" y1="3" y2="15"/>'
    ),
    # Status
    "info": '<circle cx="12" cy="12" r="10"/><path d="M12 16v-4"/><path d="M12 8h.01"/>',
    "warning": (
        '<path d="m21.73 18-8-14a2 2 0 0 0-3.48 0l-8 14A2 2 0 0 0 4 21h16a2 2 0 0 0 1.73-3Z"/>'
        '<line x1="12" x2="12" y1="9" y2="13"/><line x1="12" x2="12.01" y1="17" y2="17"/>'
    ),
    "alert-circle": (
        '<circle cx="12" cy="12" r="10"/><line x1="12" x2="12" y1="8" y2="12"/>'
        '<line x1="12" x2="12.01" y1="16" y2="16"/>'
    ),
    "check-circle": '<circle cx="12" cy="12" r="10"/><path d="m9 12 2 2 4-4"/>',
    "bell": (
        '<path d="M6 8a6 6 0 0 1 12 0c0 7 3 9 3 9H3s3-2 3-9"/>'
        '<path d="M10.3 21a1.94 1.94 0 0 0 3.4 0"/>'
    ),
    # Communication
    "mail": (
        '<rect width="20" height="16" x="2" y="4" rx="2"/>'
        '<path d="m22 7-8.97 5.7a1.94 1.94 0 0 1-2.06 0L2 7"/>'
    ),
    "message-circle": '<path d="m3 21 1.9-5.7a8.5 8.5 0 1 1 3.8 3.8z"/>',
    "share": (
        '<path d="M4 12v8a2 2 0 0 0 2 2h12a2 2 0 0 0 2-2v-8"/>'
        '<polyline points="16 6 12 2 8 6"/><line x1="12" x2="12" y1="2" y2="15"/>'
    ),
    "heart": (
        '<path d="M19 14c1.49-1.46 3-3.21 3-5.5A5.5 5.5 0 0 0 16.5 3c-1.76 0-3 .5-4.5 2'
        '-1.5-1.5-2.74-2-4.5-2A5.5 5.5 0 0 0 2 8.5c0 2.3 1.5 4.05 3 5.5l7 7Z"/>'
    ),
    "star": (
        '<polygon points="12 2 15.09 8.26 22 9.27 17 14.14 18.18 21.02 12 17.77 '
        '5.82 21.02 7 14.14 2 9.27 8.91 8.26 12 2"/>'
    ),
    "bookmark": '<path d="m19 21-7-4-7 4V5a2 2 0 0 1 2-2h10a2 2 0 0 1 2 2v16z"/>',
    # Media
    "play": '<polygon points="6 3 20 12 6 21 6 3"/>',
    "pause": '<rect width="4" height="16" x="6" y="4"/><rect width="4" height="16" x="14" y="4"/>',
    "image": (
        '<rect width="18" height="18" x="3" y="3" rx="2" ry="2"/><circle cx="9" cy="9" r="2"/>'
        '<path d="m21 15-3.086-3.086a2 2 0 0 0-2.828 0L6 21"/>'
    ),
    "video": '<path d="m22 8-6 4 6 4V8Z"/><rect width="14" height="12" x="2" y="6" rx="2"/>',
    # File
    "file": (
        '<path d="M14.5 2H6a2 2 0 0 0-2 2v16a2 2 0 0 0 2 2h12a2 2 0 0 0 2-2V7.5L14.5 2z"/>'
        '<polyline points="14 2 14 8 20 8"/>'
    ),
    "folder": (
        '<path d="M4 20h16a2 2 0 0 0 2-2V8a2 2 0 0 0-2-2h-7.93a2 2 0 0 1-1.66-.9l-.82-1.2'
        'A2 2 0 0 0 7.93 3H4a2 2 0 0 0-2 2v13c0 1.1.9 2 2 2Z"/>'
    ),
    # System
    "user": '<path d="M19 21v-2a4 4 0 0 0-4-4H9a4 4 0 0 0-4 4v2"/><circle cx="12" cy="7" r="4"/>',
    "lock": (
        '<rect width="18" height="11" x="3" y="11" rx="2" ry="2"/>'
        '<path d="M7 11V7a5 5 0 0 1 10 0v4"/>'
    ),
    "eye": (
        '<path d="M2 12s3-7 10-7 10 7 10 7-3 7-10 7-10-7-10-7Z"/>'
        '<circle cx="12" cy="12" r="3"/>'
    ),
    "clock": '<circle cx="12" cy="12" r="10"/><polyline points="12 6 12 12 16 14"/>',
    "circle": '<circle cx="12" cy="12" r="10"/>',
    "loader": (
        '<line x1="12" y1="2" x2="12" y2="6"/><line x1="12" y1="18" x2="12" y2="22"/>'
        '<line x1="4.93" y1="4.93" x2="7.76" y2="7.76"/>'
        '<line x1="16.24" y1="16.24" x2="19.07" y2="19.07"/>'
        '<line x1="2" y1="12" x2="6" y2="12"/><line x1="18" y1="12" x2="22" y2="12"/>'
        '<line x1="4.93" y1="19.07" x2="7.76" y2="16.24"/>'
        '<line x1="16.24" y1="7.76" x2="19.07" y2="4.93"/>'
    ),
    "external-link": (
        '<path d="M18 13v6a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2V8a2 2 0 0 1 2-2h6"/>'
        '<polyline points="15 3 21 3 21 9"/><line x1="10" x2="21" y1="14" y2="3"/>'
    ),
}

ICON_ALIASES: dict[str, str] = {
    "close": "x",
    "error": "alert-circle",
    "success": "check-circle",
    "loading": "loader",
    "spinner": "loader",
}

ICON_CATEGORIES: dict[IconCategory, tuple[str, ...]] = {
    IconCategory.NAVIGATION: (
        "arrow-left", "arrow-right", "arrow-up", "arrow-down",
        "chevron-left", "chevron-right", "chevron-up", "chevron-down",
        "menu", "home", "search",
    ),
    IconCategory.ACTION: (
        "plus", "minus", "x", "close", "check", "edit", "trash", "copy", "download", "upload",
    ),
    IconCategory.STATUS: (
        "info", "warning", "error", "alert-circle", "success", "check-circle", "bell",
    ),
    IconCategory.COMMUNICATION: ("mail", "message-circle", "share", "heart", "star", "bookmark"),
    IconCategory.MEDIA: ("play", "pause", "image", "video"),
    IconCategory.FILE: ("file", "folder"),
    IconCategory.SYSTEM: (
        "user", "lock", "eye", "clock", "circle", "loader", "loading", "spinner", "external-link",
    ),
    IconCategory.SOCIAL: ("share", "heart", "star", "bookmark"),
}  # fmt: skip


def available_icons() -> list[str]:
    """All icon names, including aliases, in catalogue order."""
    return [*ICON_PATHS, *ICON_ALIASES]


def icons_by_category(category: IconCategory) -> list[str]:
    return list(ICON_CATEGORIES[category])


def svg_path(name: str) -> str:
    """SVG child elements for an icon name or alias.

    Raises:
        InvalidConfigError: If the icon is not in the catalogue.
    """
    key = ICON_ALIASES.get(name, name)
    try:
        return ICON_PATHS[key]
    except KeyError as e:
        raise make_config_error(f"Unknown icon {name!r}", "icon", token=name) from e


@dataclass(frozen=True)
class Icon:
    name: str
    size: IconSize = IconSize.MD
    color: str | None = None
    aria_label: str | None = None

    def __post_init__(self) -> None:
        svg_path(self.name)

    @property
    def css_class(self) -> str:
        return f"sh-icon sh-icon--{self.size.value}"

    def to_svg_string(self) -> str:
        """Inline SVG markup. Decorative unless an aria label is given."""
        size = self.size.px
        color_attr = f' color="{html.escape(self.color)}"' if self.color else ""
        if self.aria_label:
            aria_attr = f' aria-label="{html.escape(self.aria_label)}" role="img"'
        else:
            aria_attr = ' aria-hidden="true"'
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
            'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
            f'stroke-linecap="round" stroke-linejoin="round"{color_attr}{aria_attr}>'
            f"{svg_path(self.name)}</svg>"
        )


ICON_SPIN = KeyframeAnimation(
    "sh-icon-spin",
    (
        Keyframe(0, {"transform": "rotate(0deg)"}),
        Keyframe(100, {"transform": "rotate(360deg)"}),
    ),
    AnimationTiming(duration_ms=1000, easing=Easing.LINEAR, iterations="infinite"),
)


def icon_css() -> str:
    rules: dict[str, dict[str, str]] = {
        "sh-icon": {
            "display": "inline-flex",
            "align-items": "center",
            "justify-content": "center",
            "flex-shrink": "0",
            "vertical-align": "middle",
        },
        "sh-icon svg": {"width": "100%", "height": "100%"},
    }
    for size in IconSize:
        rules[f"sh-icon--{size.value}"] = {"width": f"{size.px}px", "height": f"{size.px}px"}
    rules["sh-icon--spin"] = {"animation": ICON_SPIN.animation_css()}
    rules["sh-icon-button"] = {
        "display": "inline-flex",
        "align-items": "center",
        "justify-content": "center",
        "padding": "0.5rem",
        "border-radius": "var(--sh-radius-md)",
        "background": "transparent",
        "border": "none",
        "cursor": "pointer",
        "transition": "all var(--sh-dur-fast) var(--sh-ease-out)",
    }
    rules["sh-icon-button:hover"] = {"background": "var(--sh-surface-2)"}
    rules["sh-icon-button:focus-visible"] = {
        "outline": "2px solid var(--sh-accent)",
        "outline-offset": "2px",
    }
    rules["sh-icon-text"] = {"display": "inline-flex", "align-items": "center", "gap": "0.5rem"}
    return f"/* Icons */\n{render_keyframes(ICON_SPIN)}\n{render_classes(rules)}\n"
