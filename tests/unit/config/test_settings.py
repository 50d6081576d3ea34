"""
Unit tests for Pydantic settings: loading from env, YAML, validation errors
for invalid fields, and the effect of the default label on validators.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from value_validation import validate
from value_validation.config.settings import (
    LoggingSettings,
    Settings,
    ValidationSettings,
    get_settings,
    get_validation_settings,
    reload_settings,
)
from value_validation.validators import Validators


# -----------------------------------------------------------------------------
# Pydantic settings loading from env
# -----------------------------------------------------------------------------


class TestSettingsLoadFromEnv:
    def test_default_settings_load_without_env(self) -> None:
        """With no .env, Settings() uses defaults."""
        s = Settings()
        assert s.validation.default_label == "value"
        assert s.logging.log_level == "INFO"
        assert s.logging.log_format == "console"

    def test_default_label_from_env(self) -> None:
        with patch.dict(os.environ, {"VALIDATION_DEFAULT_LABEL": "field"}):
            v = ValidationSettings()
        assert v.default_label == "field"

    def test_log_level_from_env_is_uppercased(self) -> None:
        with patch.dict(os.environ, {"LOG_LOG_LEVEL": "debug"}):
            lg = LoggingSettings()
        assert lg.log_level == "DEBUG"

    def test_log_format_from_env(self) -> None:
        with patch.dict(os.environ, {"LOG_LOG_FORMAT": "JSON"}):
            lg = LoggingSettings()
        assert lg.log_format == "json"

    def test_unprefixed_log_level_is_ignored(self) -> None:
        """LOG_LEVEL alone does not match the log_level field (it needs LOG_LOG_LEVEL)."""
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            lg = LoggingSettings()
        assert lg.log_level == "INFO"


# -----------------------------------------------------------------------------
# Validation errors
# -----------------------------------------------------------------------------


class TestSettingsValidation:
    def test_blank_label_rejected(self) -> None:
        with pytest.raises(ValueError):
            ValidationSettings(default_label="   ")

    def test_unknown_log_format_rejected(self) -> None:
        with pytest.raises(ValueError):
            LoggingSettings(log_format="xml")

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValueError):
            LoggingSettings(log_level="LOUD")


# -----------------------------------------------------------------------------
# YAML loading
# -----------------------------------------------------------------------------


class TestSettingsFromYaml:
    def test_from_yaml_sets_nested_models(self, tmp_path: Path) -> None:
        cfg = tmp_path / "config.yaml"
        cfg.write_text("validation:\n  default_label: input\nlogging:\n  log_format: json\n", encoding="utf-8")
        s = Settings.from_yaml(cfg)
        assert s.validation.default_label == "input"
        assert s.logging.log_format == "json"

    def test_from_yaml_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        cfg = tmp_path / "empty.yaml"
        cfg.write_text("", encoding="utf-8")
        s = Settings.from_yaml(cfg)
        assert s.validation.default_label == "value"

    def test_from_yaml_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "nope.yaml")


# -----------------------------------------------------------------------------
# Global instance and effect on validators
# -----------------------------------------------------------------------------


class TestGlobalSettings:
    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reload_settings_picks_up_env(self) -> None:
        with patch.dict(os.environ, {"VALIDATION_DEFAULT_LABEL": "amount"}):
            reload_settings()
            check = Validators.min(5)
        assert check(1)["min"].message == '"amount" must be greater than 5'

    def test_label_is_fixed_at_construction(self) -> None:
        check = Validators.max(1)
        with patch.dict(os.environ, {"VALIDATION_DEFAULT_LABEL": "later"}):
            reload_settings()
            assert check(2)["max"].message == '"value" must be less than 1'

    def test_explicit_label_overrides_default(self) -> None:
        with patch.dict(os.environ, {"VALIDATION_DEFAULT_LABEL": "amount"}):
            reload_settings()
            check = Validators.min_length(3, label="code")
        assert check("a")["minLength"].message.startswith('"code"')


# -----------------------------------------------------------------------------
# Validators are isolated from unrelated or broken configuration
# -----------------------------------------------------------------------------


class TestValidatorsIgnoreBrokenConfig:
    def test_bad_log_level_does_not_reach_validators(self) -> None:
        """Validators read only VALIDATION_* settings."""
        with patch.dict(os.environ, {"LOG_LOG_LEVEL": "TRACE"}):
            result = validate("x", [Validators.required])
            assert result.valid is True
            assert Validators.required("")["required"].message == '"value" is required'
            assert Validators.min(5)(1)["min"].message == '"value" must be greater than 5'

    def test_blank_default_label_falls_back(self) -> None:
        with patch.dict(os.environ, {"VALIDATION_DEFAULT_LABEL": "   "}):
            check = Validators.min(5)
            assert check(1)["min"].message == '"value" must be greater than 5'
            assert validate(None, [Validators.required]).errors["required"].message == '"value" is required'

    def test_validation_settings_are_cached_until_reload(self) -> None:
        first = get_validation_settings()
        assert get_validation_settings() is first
        reload_settings()
        assert get_validation_settings() is not first
