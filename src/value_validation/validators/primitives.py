"""
Validator primitives: presence, numeric bounds, length bounds, pattern.

Each primitive returns None when the value passes or a single-key
ValidationErrors mapping keyed by its rule name. Empty values (see
is_empty_value) pass every rule except ``required``, so ``required`` is the
only presence gate and the rest judge the format of present values.
"""

from __future__ import annotations

import math
import numbers
import re
from decimal import Decimal
from typing import Any, Optional, Union

import structlog
from pydantic import ValidationError

from value_validation.config.settings import DEFAULT_LABEL, get_validation_settings
from value_validation.validators.base import (
    ErrorDetail,
    InvalidPatternError,
    LengthReason,
    MaxReason,
    MinReason,
    PatternReason,
    ValidationErrors,
    ValidatorFn,
    is_empty_value,
    length_of,
)

logger = structlog.get_logger(__name__)


def _default_label() -> str:
    """Configured message subject; a bad VALIDATION_* value falls back to "value"."""
    try:
        return get_validation_settings().default_label
    except ValidationError as e:
        logger.warning("invalid_validation_settings", error=str(e), fallback=DEFAULT_LABEL)
        return DEFAULT_LABEL


def _is_numeric(value: Any) -> bool:
    """Real numbers and Decimals, excluding NaN."""
    if isinstance(value, Decimal):
        return not value.is_nan()
    if isinstance(value, numbers.Real):
        return not math.isnan(value)
    return False


def _compare(value: Any, threshold: Any, op: str) -> bool:
    """Compare without raising; incomparable pairs count as passing."""
    try:
        return value < threshold if op == "lt" else value > threshold
    except TypeError:
        return False


def _length_of(value: Any) -> int:
    length = length_of(value)
    return 0 if length is None else length


# -----------------------------------------------------------------------------
# Presence
# -----------------------------------------------------------------------------


def required_as(label: str) -> ValidatorFn:
    """Return a ``required`` validator whose message names ``label``."""

    def _required(value: Any) -> Optional[ValidationErrors]:
        if is_empty_value(value):
            return {"required": ErrorDetail(message=f'"{label}" is required')}
        return None

    return _required


def required(value: Any) -> Optional[ValidationErrors]:
    """
    Fail with key ``required`` when the value is empty.

    The label is looked up only on failure and comes from the cached
    ValidationSettings, so passing values cost one emptiness check.
    """
    if not is_empty_value(value):
        return None
    return {"required": ErrorDetail(message=f'"{_default_label()}" is required')}


# -----------------------------------------------------------------------------
# Numeric bounds
# -----------------------------------------------------------------------------


def min(threshold: Any, *, label: Optional[str] = None) -> ValidatorFn:  # noqa: A001
    """Fail with key ``min`` when a numeric value is below ``threshold``."""
    subject = label or _default_label()

    def _min(value: Any) -> Optional[ValidationErrors]:
        if is_empty_value(value) or is_empty_value(threshold):
            return None
        if _is_numeric(value) and _compare(value, threshold, "lt"):
            return {
                "min": ErrorDetail(
                    message=f'"{subject}" must be greater than {threshold}',
                    reason=MinReason(min=threshold, actual=value),
                )
            }
        return None

    return _min


def max(threshold: Any, *, label: Optional[str] = None) -> ValidatorFn:  # noqa: A001
    """Fail with key ``max`` when a numeric value is above ``threshold``."""
    subject = label or _default_label()

    def _max(value: Any) -> Optional[ValidationErrors]:
        if is_empty_value(value) or is_empty_value(threshold):
            return None
        if _is_numeric(value) and _compare(value, threshold, "gt"):
            return {
                "max": ErrorDetail(
                    message=f'"{subject}" must be less than {threshold}',
                    reason=MaxReason(max=threshold, actual=value),
                )
            }
        return None

    return _max


# -----------------------------------------------------------------------------
# Length bounds
# -----------------------------------------------------------------------------


def min_length(required_length: int, *, label: Optional[str] = None) -> ValidatorFn:
    """Fail with key ``minLength`` when the value is shorter than ``required_length``."""
    subject = label or _default_label()

    def _min_length(value: Any) -> Optional[ValidationErrors]:
        if is_empty_value(value):
            return None
        length = _length_of(value)
        if length < required_length:
            return {
                "minLength": ErrorDetail(
                    message=f'"{subject}" length must be at least {required_length} characters long',
                    reason=LengthReason(required_length=required_length, actual_length=length),
                )
            }
        return None

    return _min_length


def max_length(required_length: int, *, label: Optional[str] = None) -> ValidatorFn:
    """Fail with key ``maxLength`` when the value is longer than ``required_length``."""
    subject = label or _default_label()

    def _max_length(value: Any) -> Optional[ValidationErrors]:
        if is_empty_value(value):
            return None
        length = _length_of(value)
        if length > required_length:
            return {
                "maxLength": ErrorDetail(
                    message=f'"{subject}" length must be less than {required_length} characters long',
                    reason=LengthReason(required_length=required_length, actual_length=length),
                )
            }
        return None

    return _max_length


# -----------------------------------------------------------------------------
# Pattern
# -----------------------------------------------------------------------------


def pattern(regex: Union[str, "re.Pattern[str]", "re.Pattern[bytes]"], *, label: Optional[str] = None) -> ValidatorFn:
    """
    Fail with key ``pattern`` when ``regex`` finds no match in the value.

    A string regex is compiled once here. Matching uses ``search``, so anchor
    the expression (``^...$``) to require a full match. Non-string values are
    matched against ``str(value)``. A bytes regex matches bytes-like values
    directly and anything else as UTF-8 encoded ``str(value)``.
    """
    if isinstance(regex, str):
        try:
            compiled = re.compile(regex)
        except re.error as e:
            logger.warning("invalid_pattern", pattern=regex, error=str(e))
            raise InvalidPatternError(f"Invalid regular expression {regex!r}: {e}") from e
    elif isinstance(regex, re.Pattern):
        compiled = regex
    else:
        logger.warning("invalid_pattern", pattern_type=type(regex).__name__)
        raise InvalidPatternError(f"pattern() expects a str or compiled regex, got {type(regex).__name__}")
    subject = label or _default_label()
    is_bytes = isinstance(compiled.pattern, bytes)
    shown = compiled.pattern.decode("utf-8", "backslashreplace") if is_bytes else compiled.pattern

    def _pattern(value: Any) -> Optional[ValidationErrors]:
        if is_empty_value(value):
            return None
        if is_bytes:
            if isinstance(value, (bytes, bytearray, memoryview)):
                target = value
            else:
                target = str(value).encode("utf-8", "surrogatepass")
        else:
            target = value if isinstance(value, str) else str(value)
        if compiled.search(target) is not None:
            return None
        return {
            "pattern": ErrorDetail(
                message=f'"{subject}" fails to match the required pattern: {shown}',
                reason=PatternReason(required_pattern=compiled, actual_value=value),
            )
        }

    return _pattern
