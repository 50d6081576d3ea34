"""Pytest configuration and shared fixtures."""

import pytest

from value_validation.config.settings import reload_settings


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "property: randomized property-style checks")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Each test sees settings rebuilt from the current environment."""
    reload_settings()
    yield
    reload_settings()
