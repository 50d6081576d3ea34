"""
Value Validation Settings Configuration

This module provides centralized configuration management using Pydantic settings.
Configuration is loaded from .env by default; alternative YAML loading is supported.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_LABEL = "value"


class ValidationSettings(BaseSettings):
    """Validator defaults: the subject label quoted in error messages."""

    model_config = SettingsConfigDict(env_prefix="VALIDATION_", extra="ignore")

    default_label: str = Field(
        default=DEFAULT_LABEL,
        description='Subject quoted in messages, e.g. "value" must be greater than 5',
    )

    @field_validator("default_label")
    @classmethod
    def validate_default_label(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_label must not be blank")
        return v.strip()


class LoggingSettings(BaseSettings):
    """
    Logging configuration: level and format (json/console).

    Fields keep the log_ prefix, so with env_prefix LOG_ the variables are
    LOG_LOG_LEVEL and LOG_LOG_FORMAT.
    """

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_format: str = Field(default="console", description="Format: 'json' or 'console'")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = ("json", "console")
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        u = v.upper()
        if u not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return u


class Settings(BaseSettings):
    """
    Root settings class. Loads from .env by default; supports creation from YAML.

    Nested models: validation, logging.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    validation: ValidationSettings = Field(default_factory=ValidationSettings, description="Validator defaults")
    logging: LoggingSettings = Field(default_factory=LoggingSettings, description="Logging config")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """
        Create Settings from a YAML file. Top-level keys should match
        nested model names (validation, logging).
        Environment variables still override when present.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        kwargs: dict[str, Any] = {}
        for name, model_class in [
            ("validation", ValidationSettings),
            ("logging", LoggingSettings),
        ]:
            if name in data and isinstance(data[name], dict):
                kwargs[name] = model_class.model_validate(data[name])
        return cls(**kwargs)


# Global settings instances
_settings: Optional[Settings] = None
_validation_settings: Optional[ValidationSettings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance (loads from .env)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def get_validation_settings() -> ValidationSettings:
    """
    Get or create the validator defaults on their own.

    Reads only VALIDATION_* environment variables, so a bad LOG_* value or
    .env file never affects validators.
    """
    global _validation_settings
    if _validation_settings is None:
        _validation_settings = ValidationSettings()
    return _validation_settings


def reload_settings() -> Settings:
    """Force reload of settings from environment."""
    global _settings, _validation_settings
    _validation_settings = None
    _settings = Settings()
    return _settings
