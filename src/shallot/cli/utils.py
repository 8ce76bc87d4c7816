"""
Shallot CLI utilities.

Shared helpers for version reporting, logging setup and config loading.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer
from pydantic import ValidationError

from shallot.core.config_loader import load_config
from shallot.core.errors import ShallotError
from shallot.core.ir.config import StylesheetConfig
from shallot.core.ir.tokens import ColorMode, Theme

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_version() -> str:
    from shallot import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"shallot {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def fail(message: str) -> typer.Exit:
    """Print an error to stderr and return the exit to raise."""
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def load_or_exit(config_dir: Path) -> StylesheetConfig:
    try:
        return load_config(config_dir)
    except ShallotError as e:
        raise fail(str(e)) from e


def override_theme(
    config: StylesheetConfig, mode: ColorMode | None = None, hue: float | None = None
) -> StylesheetConfig:
    """Apply command-line theme overrides, validating the resulting Theme."""
    changes: dict[str, object] = {}
    if mode is not None:
        changes["mode"] = mode
    if hue is not None:
        changes["accent_h"] = hue
    if not changes:
        return config
    try:
        theme = Theme.model_validate({**config.theme.model_dump(), **changes})
    except ValidationError as e:
        raise fail(f"Invalid theme override: {e}") from e
    return config.model_copy(update={"theme": theme})
