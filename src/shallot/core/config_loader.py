"""
Configuration persistence for Shallot.

Reads and writes ``shallot.yaml`` in a project root. The file holds the
theme seed, token presets, layout maps and custom animations that feed the
stylesheet aggregator.

Default location: {project_root}/shallot.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .color import WCAG_AA, contrast_ratio
from .errors import ConfigLoadError, InvalidConfigError
from .ir.config import StylesheetConfig
from .ir.tokens import ColorMode, PaletteRole, Theme
from .stylesheet import all_css
from .theme import resolve_both

logger = logging.getLogger(__name__)

CONFIG_FILE = "shallot.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_config_path(project_root: Path) -> Path:
    """Get the shallot.yaml file path."""
    return project_root / CONFIG_FILE


def config_exists(project_root: Path) -> bool:
    return get_config_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def parse_config(data: dict[str, Any], source: Path | None = None) -> StylesheetConfig:
    """Parse a StylesheetConfig from raw YAML data.

    Raises:
        ConfigLoadError: If the data does not match the schema.
    """
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a mapping at the top of {source or 'config'}")
    try:
        return StylesheetConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid config schema in {source or 'config'}: {e}") from e


def load_config(project_root: Path, *, use_defaults: bool = True) -> StylesheetConfig:
    """Load StylesheetConfig from shallot.yaml.

    Args:
        project_root: Directory holding shallot.yaml.
        use_defaults: If True, return the default config when the file is
            missing or empty.

    Returns:
        StylesheetConfig instance.

    Raises:
        ConfigLoadError: If the file is missing (when use_defaults=False),
            empty, not valid YAML, or does not match the schema.
    """
    config_path = get_config_path(project_root)

    if not config_path.exists():
        if use_defaults:
            logger.debug("No shallot.yaml found, using defaults")
            return StylesheetConfig()
        raise ConfigLoadError(f"Config not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning("Empty shallot.yaml at %s, using defaults", config_path)
            return StylesheetConfig()
        raise ConfigLoadError(f"Empty or invalid YAML in {config_path}")

    config = parse_config(data, config_path)
    logger.info("Loaded config from %s", config_path)
    return config


def save_config(project_root: Path, config: StylesheetConfig) -> Path:
    """Save a StylesheetConfig to shallot.yaml.

    Returns:
        Path to the saved file.
    """
    config_path = get_config_path(project_root)
    data = config.model_dump(mode="json", exclude_none=True)
    config_path.write_text(
        yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
    logger.info("Saved config to %s", config_path)
    return config_path


# =============================================================================
# Validation
# =============================================================================


class ConfigValidationResult:
    """Result of config validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __repr__(self) -> str:
        return f"ConfigValidationResult(errors={len(self.errors)}, warnings={len(self.warnings)})"


# Foreground/background pairs checked against WCAG AA
_CONTRAST_PAIRS = (
    (PaletteRole.TEXT, PaletteRole.BACKGROUND),
    (PaletteRole.TEXT, PaletteRole.SURFACE),
    (PaletteRole.TEXT_MUTED, PaletteRole.SURFACE),
)


def validate_config(config: StylesheetConfig) -> ConfigValidationResult:
    """Validate a config for semantic correctness.

    Errors are the validation failures that would stop stylesheet
    generation. Warnings flag legal but questionable choices such as low
    contrast between the accent and the page surfaces.
    """
    result = ConfigValidationResult()

    try:
        all_css(config)
    except InvalidConfigError as e:
        result.add_error(str(e))

    palettes = resolve_both(config.theme)
    for mode, palette in palettes.items():
        for fg, bg in _CONTRAST_PAIRS:
            ratio = contrast_ratio(palette[fg], palette[bg])
            if ratio is not None and ratio < WCAG_AA:
                result.add_warning(
                    f"{mode.value}: {fg.value} on {bg.value} contrast {ratio:.2f} is below {WCAG_AA}"
                )

    accent_ratio = contrast_ratio(palettes[ColorMode.LIGHT][PaletteRole.ACCENT], "#ffffff")
    if accent_ratio is not None and accent_ratio < WCAG_AA:
        result.add_warning(
            f"theme accent on white contrast {accent_ratio:.2f} is below {WCAG_AA}; "
            "white text on accent buttons may be hard to read"
        )

    if config.theme.accent_s == 0.0:
        result.add_warning("theme.accent_s is 0, the accent will be fully desaturated")

    return result


# =============================================================================
# Scaffolding
# =============================================================================


def create_default_config(
    mode: ColorMode = ColorMode.LIGHT,
    accent_h: float = 312.0,
    accent_s: float = 35.0,
    accent_l: float = 33.0,
) -> StylesheetConfig:
    return StylesheetConfig(
        theme=Theme(mode=mode, accent_h=accent_h, accent_s=accent_s, accent_l=accent_l)
    )


def scaffold_config(
    project_root: Path,
    *,
    mode: ColorMode = ColorMode.LIGHT,
    accent_h: float = 312.0,
    accent_s: float = 35.0,
    accent_l: float = 33.0,
    overwrite: bool = False,
) -> Path | None:
    """Create a default shallot.yaml.

    Returns:
        Path to the created file, or None if one exists and overwrite is False.
    """
    config_path = get_config_path(project_root)
    if config_path.exists() and not overwrite:
        logger.debug("Skipping existing config: %s", config_path)
        return None
    config = create_default_config(mode, accent_h, accent_s, accent_l)
    return save_config(project_root, config)
