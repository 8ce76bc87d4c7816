"""
CSS length units and locale-independent number formatting.

All numbers that end up in generated CSS go through ``format_number`` so the
output never depends on locale, float repr quirks or trailing zeros.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

# Browser default root font size, used for rem <-> px conversion
ROOT_FONT_PX = 16.0

_LENGTH_RE = re.compile(r"^\s*(-?(?:\d+\.?\d*|\.\d+))\s*(px|rem|em|%|vw|vh)?\s*$")


class Unit(StrEnum):
    """CSS length units."""

    PX = "px"
    REM = "rem"
    EM = "em"
    PERCENT = "%"
    VW = "vw"
    VH = "vh"
    AUTO = "auto"


# Units whose magnitude can be converted to pixels without layout context
_ABSOLUTE_UNITS = {Unit.PX, Unit.REM, Unit.EM}


def format_number(value: float, places: int = 4) -> str:
    """Format a number for CSS output.

    Integral values render without a decimal point and fractional values are
    rounded to ``places`` digits with trailing zeros stripped.

    Examples:
        >>> format_number(312.0)
        '312'
        >>> format_number(0.125)
        '0.125'
    """
    if value == int(value):
        return str(int(value))
    text = f"{value:.{places}f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


@dataclass(frozen=True)
class Length:
    """A CSS length value with a unit."""

    value: float
    unit: Unit

    def to_css(self) -> str:
        if self.unit == Unit.AUTO:
            return "auto"
        if self.value == 0:
            return "0"
        return f"{format_number(self.value)}{self.unit.value}"

    def to_px(self, root_px: float = ROOT_FONT_PX) -> float:
        """Convert to pixels. Only px, rem and em are convertible."""
        if self.unit not in _ABSOLUTE_UNITS:
            raise ValueError(f"Cannot convert '{self.to_css()}' to pixels")
        if self.unit == Unit.PX:
            return self.value
        return self.value * root_px

    def __str__(self) -> str:
        return self.to_css()


AUTO = Length(0, Unit.AUTO)


def px(value: float) -> Length:
    return Length(value, Unit.PX)


def rem(value: float) -> Length:
    return Length(value, Unit.REM)


def em(value: float) -> Length:
    return Length(value, Unit.EM)


def percent(value: float) -> Length:
    return Length(value, Unit.PERCENT)


def vw(value: float) -> Length:
    return Length(value, Unit.VW)


def vh(value: float) -> Length:
    return Length(value, Unit.VH)


def parse_length(text: str) -> Length:
    """Parse a CSS length such as ``"14px"``, ``"0.5rem"`` or ``"0"``.

    Raises:
        ValueError: If the text is not a single plain length.
    """
    if text.strip() == "auto":
        return AUTO
    match = _LENGTH_RE.match(text)
    if not match:
        raise ValueError(f"Not a CSS length: {text!r}")
    number, unit = match.groups()
    if unit is None:
        if float(number) != 0:
            raise ValueError(f"Unitless non-zero length: {text!r}")
        unit = "px"
    return Length(float(number), Unit(unit))


def to_px(text: str, root_px: float = ROOT_FONT_PX) -> float:
    """Pixel magnitude of a CSS length string."""
    return parse_length(text).to_px(root_px)
