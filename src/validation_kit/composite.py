"""CompositeValidator — runs several validators on one candidate, collects all errors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ports import Validator

T = TypeVar("T")


class CompositeValidator(Generic[T]):
    """Runs a list of validators and merges their results.

    Unlike fail-fast validation, this collects **all** errors across
    all validators before returning. A composite is itself a validator,
    so it can be nested inside the collection and presence validators.

    Usage::

        check_code = CompositeValidator(
            [
                lambda v: validate_not_null_or_empty(v, "code"),
                lambda v: validate_empty_or_matches(v, r"W\\d{3}", "code"),
            ]
        )
        result = validate_not_empty_each(codes, check_code, "codes missing")
    """

    def __init__(self, validators: Iterable[Validator[T]] | None = None) -> None:
        self._validators: list[Validator[T]] = list(validators or [])

    def add(self, validator: Validator[T]) -> CompositeValidator[T]:
        """Append a validator to the chain."""
        self._validators.append(validator)
        return self

    def validate(self, candidate: T) -> ValidationResult:
        """Run all validators against *candidate* and merge errors."""
        return ValidationResult.merge(
            validator(candidate) for validator in self._validators
        )

    def __call__(self, candidate: T) -> ValidationResult:
        return self.validate(candidate)

    def __len__(self) -> int:
        return len(self._validators)
