"""Shared utilities and helpers for the value-validation package."""

from value_validation.utils.logging import configure_logging

__all__ = ["configure_logging"]
