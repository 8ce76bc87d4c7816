"""Tests for class/style builders and CSS helpers."""

from __future__ import annotations

import pytest

from shallot.core.css_utils import (
    ClassBuilder,
    StyleBuilder,
    build_classes,
    css_escape,
    css_vars,
    define_var,
    is_valid_css_identifier,
    render_classes,
    render_rule,
    utility_classes,
    var,
    var_with_fallback,
)


class TestClassBuilder:
    def test_excluded_and_duplicates_dropped(self):
        assert build_classes([("a", True), ("b", False), ("a", True)]) == "a"

    def test_first_occurrence_wins(self):
        builder = ClassBuilder().add("btn").add("active").add("btn")
        assert builder.build() == "btn active"
        assert len(builder) == 2

    def test_conditional(self):
        builder = ClassBuilder().add("btn").add_if("btn--active", False).add_if("btn--lg", True)
        assert str(builder) == "btn btn--lg"

    def test_whitespace_splits_tokens(self):
        assert ClassBuilder().add_if("  card   card--raised ", True).tokens() == [
            "card",
            "card--raised",
        ]

    def test_with_value(self):
        builder = ClassBuilder().add("btn").add_with_value("btn", "primary").add_with_value("btn", None)
        assert builder.build() == "btn btn--primary"

    def test_from_tokens(self):
        assert ClassBuilder.from_tokens("a b").add("c").build() == "a b c"
        assert ClassBuilder.from_tokens(["x", "y", "x"]).build() == "x y"

    def test_empty(self):
        assert ClassBuilder().is_empty()
        assert ClassBuilder().add_if("x", False).build() == ""


class TestStyleBuilder:
    def test_build(self):
        style = StyleBuilder().property("color", "red").property("margin", "0").build()
        assert style == "color: red; margin: 0;"

    def test_rewrite_keeps_first_position(self):
        style = StyleBuilder().property("a", "1").property("b", "2").property("a", "3")
        assert style.build() == "a: 3; b: 2;"

    def test_conditional_and_vars(self):
        style = (
            StyleBuilder()
            .property_if("display", "none", False)
            .var("sh-accent", "red")
            .var("--gap", "4px")
            .extend({"width": "100%"})
        )
        assert style.build() == "--sh-accent: red; --gap: 4px; width: 100%;"

    def test_empty(self):
        assert StyleBuilder().is_empty()
        assert StyleBuilder().build() == ""


class TestIdentifiers:
    @pytest.mark.parametrize("ident", ["a", "_a", "-a", "sh-fade-in", "a_b-9"])
    def test_valid(self, ident):
        assert is_valid_css_identifier(ident)

    @pytest.mark.parametrize("ident", ["", "9a", "a b", "a:b", "é", "a\n"])
    def test_invalid(self, ident):
        assert not is_valid_css_identifier(ident)

    @pytest.mark.parametrize(
        "raw,escaped",
        [("a b", "a-b"), ("1col", "_1col"), ("", "_"), ("md:hidden", "md-hidden"), ("ok", "ok")],
    )
    def test_escape(self, raw, escaped):
        assert css_escape(raw) == escaped

    @pytest.mark.parametrize("raw", ["", "9", "a b", "x/y.z", "--ok", "ünïcode"])
    def test_escape_is_idempotent_and_valid(self, raw):
        once = css_escape(raw)
        assert css_escape(once) == once
        assert is_valid_css_identifier(once)


class TestVariables:
    def test_references(self):
        assert var("sh-accent") == "var(--sh-accent)"
        assert var("--sh-accent") == "var(--sh-accent)"
        assert var_with_fallback("gap", "4px") == "var(--gap, 4px)"
        assert define_var("gap", "4px") == "--gap: 4px;"

    def test_css_vars_keeps_order(self):
        assert css_vars({"--b": "1", "--a": "var(--b)"}, indent=2) == "  --b: 1;\n  --a: var(--b);"


class TestRendering:
    def test_render_rule(self):
        assert render_rule(".x", ["a: 1;", "b: 2;"]) == ".x {\n  a: 1;\n  b: 2;\n}"

    def test_render_classes(self):
        assert render_classes({"sh-x": {"a": "1", "b": "2"}}) == ".sh-x { a: 1; b: 2; }"

    def test_utility_classes(self):
        css = utility_classes()
        assert css.startswith("/* Utilities */\n")
        assert ".sh-z-modal { z-index: 1050; }" in css
        assert ".sh-opacity-50 { opacity: 0.5; }" in css
        assert ".sh-sr-only { position: absolute;" in css
        assert ".sh-focus-ring:focus-visible {" in css
