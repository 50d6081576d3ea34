"""
Core types shared by validator primitives and the combinator.

A validator is a pure callable that maps a value to ``None`` (valid) or a
ValidationErrors mapping keyed by rule name. Reasons carry a typed payload
per built-in rule; custom validators may attach a plain mapping instead.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Dict, Literal, Optional, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field, SkipValidation, model_validator

# Rule keys emitted by the built-in validators
RuleKey = Literal["required", "min", "max", "minLength", "maxLength", "pattern"]

RULE_KEYS: tuple[str, ...] = ("required", "min", "max", "minLength", "maxLength", "pattern")


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------


class ValueValidationError(Exception):
    """Base class for misuse of the validation API (not for failed values)."""


class InvalidValidatorError(ValueValidationError, TypeError):
    """Something that is not callable was passed where a validator is expected."""


class InvalidPatternError(ValueValidationError, ValueError):
    """pattern() received a regex that cannot be compiled."""


# -----------------------------------------------------------------------------
# Reason payloads
# -----------------------------------------------------------------------------


class MinReason(BaseModel):
    """Context for a failed ``min`` rule."""

    min: Any = Field(..., description="Configured lower bound.")
    actual: Any = Field(..., description="Value that fell below the bound.")


class MaxReason(BaseModel):
    """Context for a failed ``max`` rule."""

    max: Any = Field(..., description="Configured upper bound.")
    actual: Any = Field(..., description="Value that exceeded the bound.")


class LengthReason(BaseModel):
    """Context for a failed ``minLength`` / ``maxLength`` rule."""

    model_config = ConfigDict(populate_by_name=True)

    required_length: int = Field(..., alias="requiredLength")
    actual_length: int = Field(..., alias="actualLength")


class PatternReason(BaseModel):
    """Context for a failed ``pattern`` rule."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    required_pattern: re.Pattern = Field(..., alias="requiredPattern")
    actual_value: Any = Field(..., alias="actualValue")


Reason = Union[MinReason, MaxReason, LengthReason, PatternReason, Dict[str, Any]]


# -----------------------------------------------------------------------------
# Errors and results
# -----------------------------------------------------------------------------


class ErrorDetail(BaseModel):
    """Detail for one failing rule."""

    message: str = Field(..., description="Human-readable summary.")
    # Stored as given; built-in validators pass the typed models above.
    reason: Optional[SkipValidation[Reason]] = Field(
        default=None,
        description="Structured context (e.g. bound and actual value).",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form; reason keys use their camelCase names."""
        data: Dict[str, Any] = {"message": self.message}
        if self.reason is not None:
            if isinstance(self.reason, BaseModel):
                fields = type(self.reason).model_fields
                data["reason"] = {
                    field.alias or name: getattr(self.reason, name) for name, field in fields.items()
                }
            else:
                data["reason"] = dict(self.reason)
        return data


ValidationErrors = Dict[str, ErrorDetail]


class ValidatorFn(Protocol):
    """Shape of a validator: value in, ``None`` or ValidationErrors out."""

    def __call__(self, value: Any) -> Optional[ValidationErrors]: ...


class ValidationResult(BaseModel):
    """Aggregate outcome of running one or more validators against a value."""

    errors: Optional[ValidationErrors] = Field(
        default=None,
        description="One entry per failing rule key; None when every validator passed.",
    )
    valid: bool = Field(..., description="True exactly when errors is None.")

    @model_validator(mode="after")
    def _check_valid_matches_errors(self) -> "ValidationResult":
        if self.valid != (self.errors is None):
            raise ValueError("valid must be True exactly when errors is None")
        if self.errors is not None and not self.errors:
            raise ValueError("errors must be None or non-empty")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to ``{"errors": {...} | None, "valid": bool}``."""
        errors = None
        if self.errors is not None:
            errors = {key: detail.to_dict() for key, detail in self.errors.items()}
        return {"errors": errors, "valid": self.valid}


# -----------------------------------------------------------------------------
# Emptiness
# -----------------------------------------------------------------------------


def length_of(value: Any) -> Optional[int]:
    """
    len(value), or None when the value has no usable length.

    Lengths too large for len() (e.g. range(10**20)) are reported as
    sys.maxsize. Any other failure, including one raised by a custom
    __len__, means "no length".
    """
    try:
        return len(value)
    except OverflowError:
        return sys.maxsize
    except Exception:  # noqa: BLE001
        return None


def is_empty_value(value: Any) -> bool:
    """
    True for None, the empty string, or anything with a length of zero.

    Numbers and booleans have no length, so 0 and False are not empty.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    return length_of(value) == 0
