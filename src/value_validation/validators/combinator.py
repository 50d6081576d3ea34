"""
Run several validators against one value and merge their errors.

Every validator runs; there is no short-circuit, so all failing rule keys
surface together. Merging is a left fold in input order: when two validators
emit the same rule key, the later one wins.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Union

import structlog

from value_validation.validators.base import (
    InvalidValidatorError,
    ValidationErrors,
    ValidationResult,
    ValidatorFn,
)

logger = structlog.get_logger(__name__)

ValidatorsArg = Union[ValidatorFn, Sequence[ValidatorFn]]


def _normalize(validators: Any) -> List[ValidatorFn]:
    """Wrap a lone validator in a list and reject anything not callable."""
    if callable(validators):
        items: List[Any] = [validators]
    elif isinstance(validators, (list, tuple)):
        items = list(validators)
    else:
        logger.warning("invalid_validator", validator_type=type(validators).__name__)
        raise InvalidValidatorError(
            f"Expected a validator or a sequence of validators, got {type(validators).__name__}"
        )
    for index, item in enumerate(items):
        if not callable(item):
            logger.warning("invalid_validator", index=index, validator_type=type(item).__name__)
            raise InvalidValidatorError(f"Validator at index {index} is not callable: {item!r}")
    return items


def execute_validators(value: Any, validators: Sequence[ValidatorFn]) -> List[Optional[ValidationErrors]]:
    """Run each validator against ``value``, preserving input order."""
    return [validator(value) for validator in validators]


def merge_errors(results: Iterable[Optional[ValidationErrors]]) -> Optional[ValidationErrors]:
    """Fold results into one mapping; later keys overwrite earlier ones. Empty -> None."""
    merged: ValidationErrors = {}
    for result in results:
        if result is not None:
            merged.update(result)
    return merged or None


def validate(value: Any, validators: ValidatorsArg) -> ValidationResult:
    """
    Validate ``value`` against one validator or a sequence of validators.

    Returns a ValidationResult whose ``errors`` holds one entry per failing
    rule key, or None (and ``valid=True``) when nothing failed.
    """
    vs = _normalize(validators)
    errors = merge_errors(execute_validators(value, vs))
    logger.debug(
        "validation_complete",
        valid=errors is None,
        rule_keys=list(errors) if errors else [],
        validator_count=len(vs),
    )
    return ValidationResult(errors=errors, valid=errors is None)


def compose(*validators: ValidatorsArg) -> ValidatorFn:
    """
    Combine validators into a single validator returning their merged errors.

    Arguments may be validators or lists of validators; lists are flattened
    one level so an existing rule set can be passed as-is.
    """
    flat: List[ValidatorFn] = []
    for item in validators:
        flat.extend(_normalize(item))

    def _composed(value: Any) -> Optional[ValidationErrors]:
        return merge_errors(execute_validators(value, flat))

    return _composed
