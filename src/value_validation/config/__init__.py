"""Configuration for value_validation (pydantic-settings)."""

from value_validation.config.settings import (
    DEFAULT_LABEL,
    LoggingSettings,
    Settings,
    ValidationSettings,
    get_settings,
    get_validation_settings,
    reload_settings,
)

__all__ = [
    "DEFAULT_LABEL",
    "LoggingSettings",
    "Settings",
    "ValidationSettings",
    "get_settings",
    "get_validation_settings",
    "reload_settings",
]
