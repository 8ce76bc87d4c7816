"""
Responsive value resolution and compression.

A ResponsiveValue maps some breakpoints to values. Resolution cascades
downward (mobile-first): a breakpoint without an explicit entry inherits
the nearest smaller breakpoint's value. Compilation emits the base value
plus one media-scoped declaration for every breakpoint where the resolved
value actually changes, so compiled CSS never repeats a declaration that
is already in effect.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Generic, TypeVar

from .css_utils import is_valid_css_identifier, render_rule
from .errors import make_config_error

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class Breakpoint(StrEnum):
    """Named width thresholds, smallest first."""

    BASE = "base"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"

    @property
    def index(self) -> int:
        return _ORDER.index(self)

    @property
    def min_width(self) -> int:
        return _MIN_WIDTHS[self]

    @property
    def max_width(self) -> int | None:
        """Last pixel before the next breakpoint, None for the largest."""
        following = self.next()
        return None if following is None else following.min_width - 1

    def next(self) -> Breakpoint | None:
        position = self.index + 1
        return _ORDER[position] if position < len(_ORDER) else None

    def previous(self) -> Breakpoint | None:
        return _ORDER[self.index - 1] if self.index > 0 else None

    def media_query(self) -> str | None:
        """Mobile-first media query; None for BASE, which needs no condition."""
        if self is Breakpoint.BASE:
            return None
        return f"@media (min-width: {self.min_width}px)"

    def range_query(self) -> str:
        """Media query limited to this breakpoint's own width band."""
        max_width = self.max_width
        if max_width is None:
            return f"@media (min-width: {self.min_width}px)"
        return f"@media (min-width: {self.min_width}px) and (max-width: {max_width}px)"

    @property
    def class_suffix(self) -> str:
        return "" if self is Breakpoint.BASE else self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Breakpoint):
            return NotImplemented
        return self.index < other.index

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Breakpoint):
            return NotImplemented
        return self.index <= other.index

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Breakpoint):
            return NotImplemented
        return self.index > other.index

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Breakpoint):
            return NotImplemented
        return self.index >= other.index


_ORDER: tuple[Breakpoint, ...] = tuple(Breakpoint)
_MIN_WIDTHS: dict[Breakpoint, int] = {
    Breakpoint.BASE: 0,
    Breakpoint.SM: 640,
    Breakpoint.MD: 768,
    Breakpoint.LG: 1024,
    Breakpoint.XL: 1280,
    Breakpoint.XXL: 1536,
}

BREAKPOINTS = _ORDER


# =============================================================================
# Responsive values
# =============================================================================


@dataclass(frozen=True, init=False)
class ResponsiveValue(Generic[T]):
    """A partial mapping from Breakpoint to value with a guaranteed base.

    Args:
        values: Explicit per-breakpoint values (breakpoint names accepted).
        default: Used for BASE when ``values`` has no base entry.

    Raises:
        InvalidConfigError: If neither a base entry nor a default is given.
    """

    values: Mapping[Breakpoint, T]

    def __init__(self, values: Mapping[Breakpoint | str, T], default: T | None = None) -> None:
        explicit: dict[Breakpoint, T] = {}
        for key, value in values.items():
            try:
                breakpoint = Breakpoint(key)
            except ValueError as e:
                raise make_config_error(
                    f"Unknown breakpoint {key!r}", "responsive_value", token=str(key)
                ) from e
            if value is None:
                continue
            explicit[breakpoint] = value
        if Breakpoint.BASE not in explicit:
            if default is None:
                raise make_config_error(
                    "Responsive value has no base entry and no default",
                    "responsive_value",
                    token=Breakpoint.BASE.value,
                )
            explicit[Breakpoint.BASE] = default
        ordered = {bp: explicit[bp] for bp in _ORDER if bp in explicit}
        object.__setattr__(self, "values", MappingProxyType(ordered))

    def __hash__(self) -> int:
        return hash(tuple(self.values.items()))

    @classmethod
    def of(cls, base: T, **overrides: T) -> ResponsiveValue[T]:
        """``ResponsiveValue.of(16, md=24, lg=32)``. Use ``xxl`` for 2xl."""
        values: dict[Breakpoint | str, T] = {Breakpoint.BASE: base}
        for name, value in overrides.items():
            values["2xl" if name == "xxl" else name] = value
        return cls(values)

    def with_value(self, breakpoint: Breakpoint | str, value: T) -> ResponsiveValue[T]:
        """Return a copy with one breakpoint set."""
        updated: dict[Breakpoint | str, T] = dict(self.values)
        updated[Breakpoint(breakpoint)] = value
        return ResponsiveValue(updated)

    def with_sm(self, value: T) -> ResponsiveValue[T]:
        return self.with_value(Breakpoint.SM, value)

    def with_md(self, value: T) -> ResponsiveValue[T]:
        return self.with_value(Breakpoint.MD, value)

    def with_lg(self, value: T) -> ResponsiveValue[T]:
        return self.with_value(Breakpoint.LG, value)

    def with_xl(self, value: T) -> ResponsiveValue[T]:
        return self.with_value(Breakpoint.XL, value)

    def with_xxl(self, value: T) -> ResponsiveValue[T]:
        return self.with_value(Breakpoint.XXL, value)

    def get(self, breakpoint: Breakpoint | str) -> T:
        return resolve(self, Breakpoint(breakpoint))

    def explicit(self) -> Iterator[tuple[Breakpoint, T]]:
        return iter(self.values.items())

    def map(self, func: Callable[[T], U]) -> ResponsiveValue[U]:
        """Apply ``func`` to every explicit value."""
        return ResponsiveValue({bp: func(value) for bp, value in self.values.items()})

    def expanded(self) -> dict[Breakpoint, T]:
        """Resolved value at every breakpoint."""
        return {bp: resolve(self, bp) for bp in _ORDER}


def resolve(value: ResponsiveValue[T], at: Breakpoint) -> T:
    """Resolve a responsive value at a breakpoint.

    Walks downward from ``at`` to the nearest breakpoint with an explicit
    entry. Never fails: every ResponsiveValue has a base entry.
    """
    for candidate in reversed(_ORDER[: at.index + 1]):
        if candidate in value.values:
            return value.values[candidate]
    # Unreachable: construction guarantees a BASE entry
    raise AssertionError("ResponsiveValue without base entry")


@dataclass(frozen=True)
class ResponsiveProperty:
    """A CSS property whose value varies by breakpoint."""

    name: str
    value: ResponsiveValue[str]

    def __post_init__(self) -> None:
        if not is_valid_css_identifier(self.name):
            raise make_config_error(
                f"Invalid CSS property name {self.name!r}", "responsive_property", token=self.name
            )

    @classmethod
    def fixed(cls, name: str, value: str) -> ResponsiveProperty:
        """A property with the same value at every breakpoint."""
        return cls(name, ResponsiveValue({Breakpoint.BASE: value}))

    def declaration(self, value: str) -> str:
        return f"{self.name}: {value};"


CompiledDeclaration = tuple[Breakpoint | None, str]


def compile_property(prop: ResponsiveProperty) -> list[CompiledDeclaration]:
    """Compile a responsive property into minimal declarations.

    Returns:
        ``(None, decl)`` for the base value, then ``(breakpoint, decl)`` in
        ascending order for each breakpoint whose resolved value differs
        from the immediately smaller breakpoint's resolved value.
    """
    previous = resolve(prop.value, Breakpoint.BASE)
    compiled: list[CompiledDeclaration] = [(None, prop.declaration(previous))]
    for breakpoint in _ORDER[1:]:
        current = resolve(prop.value, breakpoint)
        if current != previous:
            compiled.append((breakpoint, prop.declaration(current)))
        previous = current
    logger.debug(
        "Compiled %s: %d explicit values -> %d declarations",
        prop.name,
        len(prop.value.values),
        len(compiled),
    )
    return compiled


def expand(compiled: Iterable[CompiledDeclaration]) -> dict[Breakpoint, str]:
    """Re-cascade compiled declarations into one declaration per breakpoint."""
    explicit: dict[Breakpoint | str, str] = {}
    for breakpoint, declaration in compiled:
        explicit[breakpoint or Breakpoint.BASE] = declaration
    return ResponsiveValue(explicit).expanded()


def render_rules(selector: str, properties: Iterable[ResponsiveProperty]) -> str:
    """Render properties for one selector as a base rule plus media blocks.

    All base declarations share one rule; each breakpoint gets at most one
    ``@media`` block, in ascending order. Declarations keep property order.
    """
    by_breakpoint: dict[Breakpoint | None, list[str]] = {}
    for prop in properties:
        for breakpoint, declaration in compile_property(prop):
            by_breakpoint.setdefault(breakpoint, []).append(declaration)

    blocks: list[str] = []
    if None in by_breakpoint:
        blocks.append(render_rule(selector, by_breakpoint[None]))
    for breakpoint in _ORDER[1:]:
        declarations = by_breakpoint.get(breakpoint)
        if declarations:
            inner = render_rule(selector, declarations, indent=2)
            blocks.append(f"{breakpoint.media_query()} {{\n{inner}\n}}")
    return "\n".join(blocks) + "\n"
