"""
CSS utilities - helpers for class lists, inline styles and custom properties.

This module provides:
- ClassBuilder: conditional, de-duplicated class attribute values
- StyleBuilder: inline style attribute values with stable key order
- CSS variable helpers (var, var_with_fallback, define_var, css_vars)
- CSS identifier validation and escaping
- Generic utility classes
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

_IDENTIFIER_RE = re.compile(r"[A-Za-z_-][A-Za-z0-9_-]*")
_INVALID_CHAR_RE = re.compile(r"[^A-Za-z0-9_-]")


# =============================================================================
# Identifiers
# =============================================================================


def is_valid_css_identifier(ident: str) -> bool:
    """True iff ``ident`` matches ``[A-Za-z_-][A-Za-z0-9_-]*``."""
    return _IDENTIFIER_RE.fullmatch(ident) is not None


def css_escape(ident: str) -> str:
    """Map any string onto a valid CSS identifier.

    Disallowed characters become ``-``; an empty result or a leading digit
    gets a ``_`` prefix. Valid identifiers are returned unchanged, so
    escaping twice equals escaping once.
    """
    escaped = _INVALID_CHAR_RE.sub("-", ident)
    if not escaped or escaped[0].isdigit():
        escaped = "_" + escaped
    return escaped


# =============================================================================
# Class builder
# =============================================================================


class ClassBuilder:
    """Build a ``class`` attribute value conditionally.

    Tokens are recorded with an include flag in call order. ``build()`` drops
    excluded entries, keeps the first occurrence of each token and joins the
    survivors with single spaces.

    Example::

        ClassBuilder().add("btn").add_if("active", is_active).build()
    """

    def __init__(self) -> None:
        self._entries: list[tuple[str, bool]] = []

    @classmethod
    def from_tokens(cls, tokens: Iterable[str] | str) -> ClassBuilder:
        """Start a builder from an existing class list or class string."""
        builder = cls()
        if isinstance(tokens, str):
            tokens = [tokens]
        return builder.add_many(tokens)

    def add(self, token: str) -> ClassBuilder:
        return self.add_if(token, True)

    def add_if(self, token: str, condition: bool) -> ClassBuilder:
        # A token containing whitespace is several class names
        for part in token.split():
            self._entries.append((part, bool(condition)))
        return self

    def add_with_value(self, base: str, value: str | None) -> ClassBuilder:
        """Add a BEM modifier ``base--value`` when value is set."""
        if value:
            self.add(f"{base}--{value}")
        return self

    def add_many(self, tokens: Iterable[str]) -> ClassBuilder:
        for token in tokens:
            self.add(token)
        return self

    def tokens(self) -> list[str]:
        """Included tokens, de-duplicated in first-seen order."""
        seen: dict[str, None] = {}
        for token, included in self._entries:
            if included and token not in seen:
                seen[token] = None
        return list(seen)

    def build(self) -> str:
        return " ".join(self.tokens())

    def is_empty(self) -> bool:
        return not self.tokens()

    def __len__(self) -> int:
        return len(self.tokens())

    def __str__(self) -> str:
        return self.build()


def build_classes(entries: Iterable[tuple[str, bool]]) -> str:
    """Build a class string from ``(token, included)`` pairs."""
    builder = ClassBuilder()
    for token, included in entries:
        builder.add_if(token, included)
    return builder.build()


# =============================================================================
# Style builder
# =============================================================================


class StyleBuilder:
    """Build a ``style`` attribute value.

    A later write to the same property replaces its value but keeps the
    property at the position of its first insertion.
    """

    def __init__(self) -> None:
        self._styles: dict[str, str] = {}

    def property(self, name: str, value: str) -> StyleBuilder:
        self._styles[name] = value
        return self

    def property_if(self, name: str, value: str, condition: bool) -> StyleBuilder:
        if condition:
            self._styles[name] = value
        return self

    def var(self, name: str, value: str) -> StyleBuilder:
        """Set a custom property; the ``--`` prefix is added when missing."""
        return self.property(_var_name(name), value)

    def extend(self, styles: Mapping[str, str]) -> StyleBuilder:
        for name, value in styles.items():
            self._styles[name] = value
        return self

    def build(self) -> str:
        return " ".join(f"{name}: {value};" for name, value in self._styles.items())

    def is_empty(self) -> bool:
        return not self._styles

    def __str__(self) -> str:
        return self.build()


# =============================================================================
# CSS variables
# =============================================================================


def _var_name(name: str) -> str:
    return name if name.startswith("--") else f"--{name}"


def var(name: str) -> str:
    """Reference a custom property: ``var(--name)``."""
    return f"var({_var_name(name)})"


def var_with_fallback(name: str, fallback: str) -> str:
    return f"var({_var_name(name)}, {fallback})"


def define_var(name: str, value: str) -> str:
    """A single custom property declaration: ``--name: value;``."""
    return f"{_var_name(name)}: {value};"


def css_vars(variables: Mapping[str, str], indent: int = 0) -> str:
    """Render custom property declarations one per line, in insertion order.

    Order is kept so later variables may reference earlier ones.
    """
    prefix = " " * indent
    return "\n".join(f"{prefix}{define_var(name, value)}" for name, value in variables.items())


# =============================================================================
# Rule rendering
# =============================================================================


def render_rule(selector: str, declarations: Iterable[str], indent: int = 0) -> str:
    """Render ``selector { decl; ... }`` with one declaration per line."""
    pad = " " * indent
    body = "\n".join(f"{pad}  {decl}" for decl in declarations)
    return f"{pad}{selector} {{\n{body}\n{pad}}}"


def render_classes(rules: Mapping[str, Mapping[str, str]]) -> str:
    """Render single-line utility classes from ``{class: {prop: value}}``."""
    lines = []
    for class_name, props in rules.items():
        body = " ".join(f"{prop}: {value};" for prop, value in props.items())
        lines.append(f".{class_name} {{ {body} }}")
    return "\n".join(lines)


# =============================================================================
# Utility classes
# =============================================================================

_SR_ONLY = {
    "position": "absolute",
    "width": "1px",
    "height": "1px",
    "padding": "0",
    "margin": "-1px",
    "overflow": "hidden",
    "clip": "rect(0, 0, 0, 0)",
    "white-space": "nowrap",
    "border": "0",
}

_Z_INDEX = {
    "dropdown": 1000,
    "sticky": 1020,
    "modal": 1050,
    "popover": 1060,
    "tooltip": 1070,
}


def _utility_rules() -> dict[str, dict[str, str]]:
    rules: dict[str, dict[str, str]] = {
        "sh-sr-only": dict(_SR_ONLY),
        "sh-visually-hidden": {k: v for k, v in _SR_ONLY.items() if k != "white-space"},
        "sh-cursor-pointer": {"cursor": "pointer"},
        "sh-cursor-not-allowed": {"cursor": "not-allowed"},
        "sh-pointer-events-none": {"pointer-events": "none"},
        "sh-pointer-events-auto": {"pointer-events": "auto"},
        "sh-select-none": {"user-select": "none"},
        "sh-select-text": {"user-select": "text"},
    }
    for overflow in ("hidden", "auto", "scroll"):
        rules[f"sh-overflow-{overflow}"] = {"overflow": overflow}
    for position in ("relative", "absolute", "fixed", "sticky"):
        rules[f"sh-{position}"] = {"position": position}
    for layer, z in _Z_INDEX.items():
        rules[f"sh-z-{layer}"] = {"z-index": str(z)}
    rules["sh-invisible"] = {"visibility": "hidden"}
    rules["sh-visible"] = {"visibility": "visible"}
    for opacity, value in (("0", "0"), ("50", "0.5"), ("100", "1")):
        rules[f"sh-opacity-{opacity}"] = {"opacity": value}
    return rules


def utility_classes() -> str:
    """Generic utility classes (layout helpers, focus ring, cursor, z-index)."""
    focus = (
        ".sh-focus-ring:focus-visible { outline: 2px solid var(--sh-accent); outline-offset: 2px; }\n"
        ".sh-focus-ring:focus:not(:focus-visible) { outline: none; }"
    )
    return f"/* Utilities */\n{render_classes(_utility_rules())}\n{focus}\n"
