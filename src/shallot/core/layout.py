"""
Layout generators for containers, grids and flex rows.

Each config is translated into ResponsiveProperty instances and compiled by
the shared responsive routine, so container/grid/flex output follows the
same minimality rule as every other responsive declaration.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from .css_utils import render_classes
from .responsive import Breakpoint, ResponsiveProperty, ResponsiveValue, render_rules
from .units import format_number

logger = logging.getLogger(__name__)


# =============================================================================
# Enums
# =============================================================================


class FlexDirection(StrEnum):
    ROW = "row"
    COLUMN = "column"
    ROW_REVERSE = "row-reverse"
    COLUMN_REVERSE = "column-reverse"


class FlexWrap(StrEnum):
    NO_WRAP = "nowrap"
    WRAP = "wrap"
    WRAP_REVERSE = "wrap-reverse"


class JustifyContent(StrEnum):
    START = "flex-start"
    END = "flex-end"
    CENTER = "center"
    BETWEEN = "space-between"
    AROUND = "space-around"
    EVENLY = "space-evenly"


class AlignItems(StrEnum):
    START = "flex-start"
    END = "flex-end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


# =============================================================================
# Helpers
# =============================================================================


def _responsive(value: Any) -> ResponsiveValue:
    """Wrap a plain value as a base-only ResponsiveValue."""
    if isinstance(value, ResponsiveValue):
        return value
    return ResponsiveValue({Breakpoint.BASE: value})


def _px(value: int) -> str:
    return "0" if value == 0 else f"{value}px"


def _columns(count: int) -> str:
    return f"repeat({count}, minmax(0, 1fr))"


def _prop(name: str, value: ResponsiveValue, render: Callable[[Any], str] = str) -> ResponsiveProperty:
    return ResponsiveProperty(name, value.map(render))


# =============================================================================
# Configs
# =============================================================================


def _default_max_widths() -> dict[Breakpoint, int]:
    return {bp: bp.min_width for bp in Breakpoint if bp is not Breakpoint.BASE}


def _default_padding() -> ResponsiveValue[int]:
    return ResponsiveValue.of(16, md=24, lg=32)


@dataclass(frozen=True)
class ContainerConfig:
    """Centered page container.

    Attributes:
        max_widths: Max width in px from each breakpoint upward; base is unbounded
        padding: Horizontal padding in px
        center: Whether to center with auto margins
    """

    max_widths: Mapping[Breakpoint, int] = field(default_factory=_default_max_widths)
    padding: ResponsiveValue[int] | int = field(default_factory=_default_padding)
    center: bool = True

    def to_properties(self) -> list[ResponsiveProperty]:
        widths: dict[Breakpoint | str, str] = {Breakpoint.BASE: "100%"}
        for breakpoint, width in self.max_widths.items():
            if Breakpoint(breakpoint) is not Breakpoint.BASE:
                widths[breakpoint] = _px(width)
        padding = _responsive(self.padding)

        props = [
            ResponsiveProperty.fixed("width", "100%"),
            ResponsiveProperty("max-width", ResponsiveValue(widths)),
            _prop("padding-left", padding, _px),
            _prop("padding-right", padding, _px),
        ]
        if self.center:
            props.append(ResponsiveProperty.fixed("margin-left", "auto"))
            props.append(ResponsiveProperty.fixed("margin-right", "auto"))
        return props


@dataclass(frozen=True)
class GridConfig:
    """CSS grid layout.

    Attributes:
        columns: Column count per breakpoint
        gap: Gap in px
        row_gap: Optional separate row gap in px
        min_item_width: When set, columns auto-fill with items at least this wide (px)
    """

    columns: ResponsiveValue[int] | int = field(
        default_factory=lambda: ResponsiveValue.of(1, sm=2, md=3, lg=4)
    )
    gap: ResponsiveValue[int] | int = field(default_factory=_default_padding)
    row_gap: ResponsiveValue[int] | int | None = None
    min_item_width: int | None = None

    def to_properties(self) -> list[ResponsiveProperty]:
        props = [ResponsiveProperty.fixed("display", "grid")]
        if self.min_item_width is not None:
            props.append(
                ResponsiveProperty.fixed(
                    "grid-template-columns",
                    f"repeat(auto-fill, minmax({_px(self.min_item_width)}, 1fr))",
                )
            )
        else:
            props.append(_prop("grid-template-columns", _responsive(self.columns), _columns))
        props.append(_prop("gap", _responsive(self.gap), _px))
        if self.row_gap is not None:
            props.append(_prop("row-gap", _responsive(self.row_gap), _px))
        return props


@dataclass(frozen=True)
class FlexConfig:
    """Flexbox layout. Every field may vary by breakpoint."""

    direction: ResponsiveValue[FlexDirection] | FlexDirection = FlexDirection.ROW
    wrap: ResponsiveValue[FlexWrap] | FlexWrap = FlexWrap.NO_WRAP
    justify: ResponsiveValue[JustifyContent] | JustifyContent = JustifyContent.START
    align: ResponsiveValue[AlignItems] | AlignItems = AlignItems.STRETCH
    gap: ResponsiveValue[int] | int = 0

    def to_properties(self) -> list[ResponsiveProperty]:
        return [
            ResponsiveProperty.fixed("display", "flex"),
            _prop("flex-direction", _responsive(self.direction)),
            _prop("flex-wrap", _responsive(self.wrap)),
            _prop("justify-content", _responsive(self.justify)),
            _prop("align-items", _responsive(self.align)),
            _prop("gap", _responsive(self.gap), _px),
        ]


# =============================================================================
# Generators
# =============================================================================


def generate_container_css(
    config: ContainerConfig | None = None, selector: str = ".sh-container"
) -> str:
    """Container rule plus fixed-width ``.sh-container-<bp>`` variants."""
    config = config or ContainerConfig()
    parts = [render_rules(selector, config.to_properties())]

    if config.center:
        parts.append(
            ".sh-container-center { display: flex; flex-direction: column; align-items: center; }\n"
        )
    for breakpoint in Breakpoint:
        width = config.max_widths.get(breakpoint)
        if width is None or breakpoint is Breakpoint.BASE:
            continue
        parts.append(
            f"{breakpoint.media_query()} {{\n"
            f"  .sh-container-{breakpoint.class_suffix} {{ max-width: {_px(width)}; }}\n"
            "}\n"
        )
    return "".join(parts)


def generate_grid_css(config: GridConfig | None = None, selector: str = ".sh-grid") -> str:
    return render_rules(selector, (config or GridConfig()).to_properties())


def generate_flex_css(config: FlexConfig | None = None, selector: str = ".sh-stack") -> str:
    return render_rules(selector, (config or FlexConfig()).to_properties())


# =============================================================================
# Utility classes
# =============================================================================

MAX_GRID_COLUMNS = 6
_SPACING_STEPS = (0, 1, 2, 4, 6, 8)
_GAP_STEPS = (1, 2, 4, 6, 8)
_TEXT_SIZES = {
    "xs": ("0.75rem", "1rem"),
    "sm": ("0.875rem", "1.25rem"),
    "base": ("1rem", "1.5rem"),
    "lg": ("1.125rem", "1.75rem"),
    "xl": ("1.25rem", "1.75rem"),
    "2xl": ("1.5rem", "2rem"),
    "3xl": ("1.875rem", "2.25rem"),
    "4xl": ("2.25rem", "2.5rem"),
}
_DISPLAYS = {"block": "block", "hidden": "none", "flex": "flex"}


def _step(step: int) -> str:
    """Spacing step n is n quarter-rems."""
    return "0" if step == 0 else f"{format_number(step * 0.25)}rem"


def _grid_column_classes() -> str:
    base = {
        f"sh-grid-cols-{n}": {"grid-template-columns": _columns(n)}
        for n in range(1, MAX_GRID_COLUMNS + 1)
    }
    blocks = [render_classes(base)]
    for breakpoint in Breakpoint:
        if breakpoint is Breakpoint.BASE:
            continue
        rules = {
            f"sh-grid-cols-{breakpoint.class_suffix}-{n}": {"grid-template-columns": _columns(n)}
            for n in range(1, MAX_GRID_COLUMNS + 1)
        }
        blocks.append(_media_block(breakpoint, render_classes(rules)))
    return "\n".join(blocks)


def _flex_classes() -> str:
    rules: dict[str, dict[str, str]] = {
        "sh-flex": {"display": "flex"},
        "sh-inline-flex": {"display": "inline-flex"},
        "sh-flex-row": {"flex-direction": FlexDirection.ROW.value},
        "sh-flex-col": {"flex-direction": FlexDirection.COLUMN.value},
        "sh-flex-wrap": {"flex-wrap": FlexWrap.WRAP.value},
        "sh-flex-nowrap": {"flex-wrap": FlexWrap.NO_WRAP.value},
        "sh-items-start": {"align-items": AlignItems.START.value},
        "sh-items-center": {"align-items": AlignItems.CENTER.value},
        "sh-items-end": {"align-items": AlignItems.END.value},
        "sh-justify-start": {"justify-content": JustifyContent.START.value},
        "sh-justify-center": {"justify-content": JustifyContent.CENTER.value},
        "sh-justify-end": {"justify-content": JustifyContent.END.value},
        "sh-justify-between": {"justify-content": JustifyContent.BETWEEN.value},
    }
    for step in _GAP_STEPS:
        rules[f"sh-gap-{step}"] = {"gap": _step(step)}
    return render_classes(rules)


def _spacing_classes() -> str:
    rules: dict[str, dict[str, str]] = {}
    for prefix, prop in (("m", "margin"), ("p", "padding")):
        for step in _SPACING_STEPS:
            rules[f"sh-{prefix}-{step}"] = {prop: _step(step)}
    return render_classes(rules)


def _typography_classes() -> str:
    rules: dict[str, dict[str, str]] = {
        f"sh-text-{name}": {"font-size": size, "line-height": line}
        for name, (size, line) in _TEXT_SIZES.items()
    }
    for align in ("center", "left", "right"):
        rules[f"sh-text-{align}"] = {"text-align": align}
    return render_classes(rules)


def _display_classes() -> str:
    base = {
        "sh-block": {"display": "block"},
        "sh-inline-block": {"display": "inline-block"},
        "sh-inline": {"display": "inline"},
        "sh-hidden": {"display": "none"},
    }
    blocks = [render_classes(base)]
    for breakpoint in Breakpoint:
        if breakpoint is Breakpoint.BASE:
            continue
        # ``:`` is escaped in the selector, the class itself is "sh-md:hidden"
        rules = {
            f"sh-{breakpoint.class_suffix}\\:{name}": {"display": value}
            for name, value in _DISPLAYS.items()
        }
        blocks.append(_media_block(breakpoint, render_classes(rules)))
    return "\n".join(blocks)


def _media_block(breakpoint: Breakpoint, body: str) -> str:
    indented = "\n".join(f"  {line}" for line in body.splitlines())
    return f"{breakpoint.media_query()} {{\n{indented}\n}}"


def generate_responsive_css(
    container: ContainerConfig | None = None,
    grid: GridConfig | None = None,
    flex: FlexConfig | None = None,
) -> str:
    """
    Generate the full responsive layout section.

    Args:
        container: Container config, defaults when omitted
        grid: Grid config, defaults when omitted
        flex: Flex config, defaults when omitted

    Returns:
        Container, grid and flex rules followed by layout utility classes
    """
    sections = [
        ("Container", generate_container_css(container)),
        ("Grid", generate_grid_css(grid)),
        ("Grid columns", _grid_column_classes() + "\n"),
        ("Stack", generate_flex_css(flex)),
        ("Flex", _flex_classes() + "\n"),
        ("Spacing", _spacing_classes() + "\n"),
        ("Typography", _typography_classes() + "\n"),
        ("Display", _display_classes() + "\n"),
    ]
    for name, css in sections:
        logger.debug("Layout section %s: %d chars", name, len(css))
    return "\n".join(f"/* {name} */\n{css}" for name, css in sections)
