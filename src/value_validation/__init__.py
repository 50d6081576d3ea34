"""
value_validation: composable validators for single values.

Build a list of validators (``Validators.required``, ``Validators.min(5)``, ...)
and pass it with a value to ``validate`` to get a ValidationResult holding
every failing rule.
"""

from value_validation.validators import (
    ErrorDetail,
    ValidationErrors,
    ValidationResult,
    ValidatorFn,
    Validators,
    compose,
    validate,
)

__all__ = [
    "ErrorDetail",
    "ValidationErrors",
    "ValidationResult",
    "ValidatorFn",
    "Validators",
    "compose",
    "validate",
]
