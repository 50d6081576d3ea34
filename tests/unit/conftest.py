"""Pytest configuration and fixtures for unit tests."""

import random
import string

import pytest

from value_validation.validators import Validators

_SEED = string.ascii_letters + string.digits


def generate_random_int(start: int = 0, end: int = 100) -> int:
    """Random int in [start, end)."""
    return random.randrange(start, end)


def generate_random_string(length: int) -> str:
    """Random alphanumeric string of exactly ``length`` characters."""
    return "".join(random.choice(_SEED) for _ in range(length))


@pytest.fixture
def bounded_rules() -> list:
    """required + min(5) + max(10), the canonical combined rule set."""
    return [Validators.required, Validators.min(5), Validators.max(10)]


@pytest.fixture
def https_regex() -> str:
    return r"^https://.+"


@pytest.fixture
def random_int():
    """Factory fixture: random_int(start, end) -> int in [start, end)."""
    return generate_random_int


@pytest.fixture
def random_string():
    """Factory fixture: random_string(length) -> alphanumeric str."""
    return generate_random_string
