"""
Value Validators Module

Composable validator primitives (presence, numeric bounds, length bounds,
pattern) and the combinator that runs them against one value.
"""

from value_validation.validators.base import (
    RULE_KEYS,
    ErrorDetail,
    InvalidPatternError,
    InvalidValidatorError,
    LengthReason,
    MaxReason,
    MinReason,
    PatternReason,
    RuleKey,
    ValidationErrors,
    ValidationResult,
    ValidatorFn,
    ValueValidationError,
    is_empty_value,
)
from value_validation.validators.combinator import (
    compose,
    execute_validators,
    merge_errors,
    validate,
)
from value_validation.validators import primitives as _primitives


class Validators:
    """Namespace for the built-in validators and validator factories."""

    required = staticmethod(_primitives.required)
    required_as = staticmethod(_primitives.required_as)
    min = staticmethod(_primitives.min)
    max = staticmethod(_primitives.max)
    min_length = staticmethod(_primitives.min_length)
    max_length = staticmethod(_primitives.max_length)
    pattern = staticmethod(_primitives.pattern)
    compose = staticmethod(compose)


__all__ = [
    "RULE_KEYS",
    "ErrorDetail",
    "InvalidPatternError",
    "InvalidValidatorError",
    "LengthReason",
    "MaxReason",
    "MinReason",
    "PatternReason",
    "RuleKey",
    "ValidationErrors",
    "ValidationResult",
    "ValidatorFn",
    "Validators",
    "ValueValidationError",
    "compose",
    "execute_validators",
    "is_empty_value",
    "merge_errors",
    "validate",
]
