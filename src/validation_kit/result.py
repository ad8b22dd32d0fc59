"""ValidationResult — ordered, immutable collection of error messages."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .exceptions import ValidationFailure

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("validation_kit.result")

DESCRIBE_HEADER = "Validation errors:"
NO_ERRORS = "No errors"


@dataclass(frozen=True)
class ValidationResult:
    """Collects every error message produced by a set of checks.

    A result with no errors is *ok*; all ok results compare equal no
    matter how they were produced.

    Usage::

        result = ValidationResult.merge(
            [
                validate_not_null(user_id, "user_id"),
                validate_not_empty(tags, "tags should not be empty"),
            ]
        )
        result.raise_if_failing("Cannot load user")
    """

    errors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls()

    @classmethod
    def error(cls, message: str) -> ValidationResult:
        return cls(errors=(message,))

    # ── Merging ──────────────────────────────────────────────────

    @classmethod
    def merge(cls, results: Iterable[ValidationResult]) -> ValidationResult:
        """Concatenate the errors of *results* in the order given.

        Ok results contribute nothing; an empty input yields an ok result.
        """
        messages: list[str] = []
        for result in results:
            if result.has_error:
                messages.extend(result.errors)
        return cls(errors=tuple(messages))

    @classmethod
    def of(cls, *results: ValidationResult) -> ValidationResult:
        """Varargs shorthand for :meth:`merge`."""
        return cls.merge(results)

    # ── Queries ──────────────────────────────────────────────────

    @property
    def has_error(self) -> bool:
        return len(self.errors) > 0

    @property
    def is_valid(self) -> bool:
        return not self.has_error

    def __bool__(self) -> bool:
        return self.is_valid

    # ── Failure conversion ───────────────────────────────────────

    def raise_if_failing(self, context: str | None = None) -> ValidationResult:
        """Raise :class:`ValidationFailure` if this result carries errors.

        Returns ``self`` unchanged when ok so the call can be chained.
        """
        if self.has_error:
            logger.debug(
                "Raising validation failure (%s) with %d error(s)",
                context,
                len(self.errors),
            )
            raise ValidationFailure(self, context)
        return self

    # ── Rendering ────────────────────────────────────────────────

    def describe(self) -> str:
        if not self.has_error:
            return NO_ERRORS
        return "\n".join((DESCRIBE_HEADER, *self.errors))

    def __str__(self) -> str:
        return self.describe()

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.is_valid, "errors": list(self.errors)}
