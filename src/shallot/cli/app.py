"""
Shallot command line.

Commands:
- css: print the generated stylesheet
- check: validate shallot.yaml
- init: scaffold shallot.yaml
- palette: show the resolved light and dark palettes
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shallot.core.color import hsl_to_rgb, rgb_to_hex
from shallot.core.config_loader import (
    get_config_path,
    scaffold_config,
    validate_config,
)
from shallot.core.errors import ShallotError
from shallot.core.ir.tokens import ColorMode
from shallot.core.stylesheet import build_stylesheet
from shallot.core.theme import resolve_both

from .utils import configure_logging, fail, load_or_exit, override_theme, version_callback

console = Console()

app = typer.Typer(
    help="Shallot - design tokens, themes and responsive CSS for zero-JS UIs",
    no_args_is_help=True,
)

ConfigDir = Annotated[
    Path,
    typer.Option("--config-dir", "-c", help="Directory containing shallot.yaml"),
]
ModeOption = Annotated[
    ColorMode | None,
    typer.Option("--mode", "-m", help="Override the theme color mode"),
]
HueOption = Annotated[
    float | None,
    typer.Option("--hue", help="Override the accent hue (0-360)"),
]


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """Shallot CLI main callback for global options."""
    configure_logging(verbose)


@app.command()
def css(
    config_dir: ConfigDir = Path("."),
    mode: ModeOption = None,
    hue: HueOption = None,
    digest: Annotated[
        bool, typer.Option("--digest", help="Print the SHA-256 digest to stderr")
    ] = False,
) -> None:
    """Print the complete stylesheet to stdout."""
    config = override_theme(load_or_exit(config_dir), mode=mode, hue=hue)
    try:
        stylesheet = build_stylesheet(config)
    except ShallotError as e:
        raise fail(str(e)) from e
    typer.echo(stylesheet.css, nl=False)
    if digest:
        typer.echo(stylesheet.digest, err=True)


@app.command()
def check(config_dir: ConfigDir = Path(".")) -> None:
    """Validate shallot.yaml and report errors and warnings."""
    config = load_or_exit(config_dir)
    result = validate_config(config)

    for error in result.errors:
        console.print(f"[red]error[/red] {escape(error)}")
    for warning in result.warnings:
        console.print(f"[yellow]warning[/yellow] {escape(warning)}")

    if not result.is_valid:
        console.print(f"[red]✗ {len(result.errors)} error(s)[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]✓ Config is valid[/green] ({len(result.warnings)} warning(s))")


@app.command()
def init(
    config_dir: ConfigDir = Path("."),
    mode: Annotated[ColorMode, typer.Option("--mode", "-m", help="Color mode")] = ColorMode.LIGHT,
    hue: Annotated[float, typer.Option("--hue", min=0.0, max=359.99, help="Accent hue")] = 312.0,
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite existing config")] = False,
) -> None:
    """Create a shallot.yaml with default settings."""
    config_dir.mkdir(parents=True, exist_ok=True)
    path = scaffold_config(config_dir, mode=mode, accent_h=hue, overwrite=force)
    if path is None:
        typer.echo(f"Config already exists: {get_config_path(config_dir)}")
        typer.echo("Use --force to overwrite.")
        raise typer.Exit(code=1)
    typer.echo(f"✓ Created {path}")


@app.command()
def palette(config_dir: ConfigDir = Path("."), hue: HueOption = None) -> None:
    """Show the resolved palette for both color modes."""
    config = override_theme(load_or_exit(config_dir), hue=hue)
    palettes = resolve_both(config.theme)

    table = Table(title="Palette")
    table.add_column("Role")
    for mode in ColorMode:
        table.add_column(mode.value.title())

    light, dark = palettes[ColorMode.LIGHT], palettes[ColorMode.DARK]
    for role in light:
        cells = []
        for color in (light[role], dark[role]):
            swatch = rgb_to_hex(hsl_to_rgb(color))
            cells.append(f"[on {swatch}]    [/] {color.to_css()}")
        table.add_row(f"--sh-{role.value}", *cells)

    console.print(table)


def main(argv: list[str] | None = None) -> None:
    app(args=argv if argv is not None else sys.argv[1:])
