"""Tests for shallot.yaml loading, saving and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from shallot.core.config_loader import (
    CONFIG_FILE,
    config_exists,
    create_default_config,
    get_config_path,
    load_config,
    save_config,
    scaffold_config,
    validate_config,
)
from shallot.core.errors import ConfigLoadError
from shallot.core.ir.config import AnimationSpec, StylesheetConfig
from shallot.core.ir.tokens import ColorMode, Theme


class TestLoadSave:
    def test_path(self, project_dir: Path):
        assert get_config_path(project_dir) == project_dir / CONFIG_FILE
        assert not config_exists(project_dir)

    def test_save_and_load(self, project_dir: Path):
        config = StylesheetConfig.model_validate(
            {
                "theme": {"mode": "dark", "accent_h": 200, "scheme": "triadic"},
                "tokens": {"density": "compact"},
                "grid": {"columns": {"base": 1, "md": 2}},
            }
        )
        save_config(project_dir, config)
        assert config_exists(project_dir)
        assert load_config(project_dir) == config

    def test_missing_uses_defaults(self, project_dir: Path):
        assert load_config(project_dir) == StylesheetConfig()

    def test_missing_without_defaults(self, project_dir: Path):
        with pytest.raises(ConfigLoadError, match="Config not found"):
            load_config(project_dir, use_defaults=False)

    def test_empty_file(self, project_dir: Path):
        get_config_path(project_dir).write_text("")
        assert load_config(project_dir) == StylesheetConfig()
        with pytest.raises(ConfigLoadError):
            load_config(project_dir, use_defaults=False)

    def test_invalid_yaml(self, project_dir: Path):
        get_config_path(project_dir).write_text("theme: [unclosed\n")
        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            load_config(project_dir)

    def test_schema_violation(self, project_dir: Path):
        get_config_path(project_dir).write_text("theme:\n  accent_h: 999\n")
        with pytest.raises(ConfigLoadError, match="Invalid config schema"):
            load_config(project_dir)

    @pytest.mark.parametrize(
        "keyframe",
        [
            "{offset: .nan, properties: {opacity: '0'}}",
            "{offset: .inf, properties: {opacity: '0'}}",
        ],
    )
    def test_non_finite_offset(self, project_dir: Path, keyframe: str):
        get_config_path(project_dir).write_text(
            f"animations:\n  - name: wiggle\n    keyframes:\n      - {keyframe}\n"
        )
        with pytest.raises(ConfigLoadError, match="Invalid config schema"):
            load_config(project_dir)

    def test_non_finite_easing(self, project_dir: Path):
        get_config_path(project_dir).write_text(
            "animations:\n"
            "  - name: wiggle\n"
            "    easing: cubic-bezier(nan, 0, 1, 1)\n"
            "    keyframes:\n"
            "      - {offset: 0, properties: {opacity: '0'}}\n"
        )
        with pytest.raises(ConfigLoadError, match="Invalid config schema"):
            load_config(project_dir)

    def test_top_level_must_be_mapping(self, project_dir: Path):
        get_config_path(project_dir).write_text("- a\n- b\n")
        with pytest.raises(ConfigLoadError, match="Expected a mapping"):
            load_config(project_dir)


class TestValidate:
    def test_default_is_clean(self, default_config: StylesheetConfig):
        result = validate_config(default_config)
        assert result.is_valid
        assert result.warnings == []
        assert repr(result) == "ConfigValidationResult(errors=0, warnings=0)"

    def test_generation_error_reported(self):
        config = StylesheetConfig(
            animations=[
                AnimationSpec(
                    name="sh-glow", keyframes=[{"offset": 0, "properties": {"opacity": "0"}}]
                )
            ]
        )
        result = validate_config(config)
        assert not result.is_valid
        assert "collides" in result.errors[0]

    def test_light_accent_warns(self):
        result = validate_config(StylesheetConfig(theme=Theme(accent_l=85)))
        assert result.is_valid
        assert any("accent on white" in warning for warning in result.warnings)

    def test_desaturated_accent_warns(self):
        result = validate_config(StylesheetConfig(theme=Theme(accent_s=0)))
        assert any("accent_s is 0" in warning for warning in result.warnings)


class TestScaffold:
    def test_create_default(self):
        config = create_default_config(ColorMode.DARK, accent_h=120)
        assert config.theme == Theme(mode=ColorMode.DARK, accent_h=120)

    def test_scaffold(self, project_dir: Path):
        path = scaffold_config(project_dir, accent_h=45)
        assert path == get_config_path(project_dir)
        assert load_config(project_dir).theme.accent_h == 45

    def test_scaffold_does_not_overwrite(self, project_dir: Path):
        scaffold_config(project_dir, accent_h=45)
        assert scaffold_config(project_dir, accent_h=90) is None
        assert load_config(project_dir).theme.accent_h == 45
        assert scaffold_config(project_dir, accent_h=90, overwrite=True) is not None
        assert load_config(project_dir).theme.accent_h == 90
