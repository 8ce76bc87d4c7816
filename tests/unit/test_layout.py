"""Tests for container, grid and flex generators."""

from __future__ import annotations

from shallot.core.layout import (
    AlignItems,
    ContainerConfig,
    FlexConfig,
    FlexDirection,
    GridConfig,
    JustifyContent,
    generate_container_css,
    generate_flex_css,
    generate_grid_css,
    generate_responsive_css,
)
from shallot.core.responsive import Breakpoint, ResponsiveValue


class TestContainer:
    def test_default(self):
        css = generate_container_css()
        assert css.startswith(".sh-container {\n  width: 100%;\n  max-width: 100%;\n")
        assert "margin-left: auto;" in css
        assert "@media (min-width: 640px) {\n  .sh-container {\n    max-width: 640px;\n  }\n}" in css
        assert "padding-left: 24px;" in css

    def test_breakpoint_variants(self):
        css = generate_container_css()
        assert "  .sh-container-lg { max-width: 1024px; }" in css
        assert ".sh-container-center {" in css

    def test_not_centered(self):
        css = generate_container_css(ContainerConfig(center=False))
        assert "margin-left" not in css
        assert ".sh-container-center" not in css

    def test_custom_widths_and_fixed_padding(self):
        config = ContainerConfig(max_widths={Breakpoint.LG: 960}, padding=12)
        css = generate_container_css(config)
        assert "max-width: 960px;" in css
        assert "@media (min-width: 640px)" not in css
        assert css.count("padding-left") == 1


class TestGrid:
    def test_default_columns_per_breakpoint(self):
        css = generate_grid_css()
        assert "grid-template-columns: repeat(1, minmax(0, 1fr));" in css
        assert "grid-template-columns: repeat(4, minmax(0, 1fr));" in css
        assert "@media (min-width: 1280px)" not in css

    def test_gap_not_repeated_at_sm(self):
        css = generate_grid_css(GridConfig(columns=2))
        assert "@media (min-width: 640px)" not in css
        assert "gap: 24px;" in css

    def test_auto_fill(self):
        css = generate_grid_css(GridConfig(min_item_width=240))
        assert "grid-template-columns: repeat(auto-fill, minmax(240px, 1fr));" in css
        assert "repeat(2, minmax(0, 1fr))" not in css

    def test_row_gap(self):
        css = generate_grid_css(GridConfig(row_gap=ResponsiveValue.of(8, lg=16)))
        assert "row-gap: 8px;" in css
        assert "row-gap: 16px;" in css

    def test_custom_selector(self):
        assert generate_grid_css(selector=".cards").startswith(".cards {\n  display: grid;")


class TestFlex:
    def test_default_has_no_media(self):
        css = generate_flex_css()
        assert "@media" not in css
        assert "flex-direction: row;" in css
        assert "gap: 0;" in css

    def test_responsive_direction(self):
        config = FlexConfig(
            direction=ResponsiveValue.of(FlexDirection.COLUMN, md=FlexDirection.ROW),
            justify=JustifyContent.BETWEEN,
            align=AlignItems.CENTER,
        )
        css = generate_flex_css(config)
        assert "flex-direction: column;" in css
        assert "@media (min-width: 768px) {\n  .sh-stack {\n    flex-direction: row;\n  }\n}" in css
        assert "justify-content: space-between;" in css


class TestResponsiveCss:
    def test_sections_in_order(self):
        css = generate_responsive_css()
        headers = ["/* Container */", "/* Grid */", "/* Grid columns */", "/* Stack */",
                   "/* Flex */", "/* Spacing */", "/* Typography */", "/* Display */"]
        positions = [css.index(header) for header in headers]
        assert positions == sorted(positions)

    def test_grid_column_classes_use_their_breakpoint(self):
        css = generate_responsive_css()
        md_block = css.split("@media (min-width: 768px) {\n  .sh-grid-cols-md-1")[1]
        assert ".sh-grid-cols-md-3 { grid-template-columns: repeat(3, minmax(0, 1fr)); }" in md_block
        assert ".sh-grid-cols-sm-" not in md_block.split("\n}")[0]

    def test_utility_classes(self):
        css = generate_responsive_css()
        assert ".sh-m-4 { margin: 1rem; }" in css
        assert ".sh-p-0 { padding: 0; }" in css
        assert ".sh-text-2xl { font-size: 1.5rem; line-height: 2rem; }" in css
        assert ".sh-gap-2 { gap: 0.5rem; }" in css
        assert "  .sh-md\\:hidden { display: none; }" in css
