"""Exception hierarchy for validation-kit.

All exceptions inherit from ``ValidationKitError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .result import ValidationResult


class ValidationKitError(Exception):
    """Root exception for the validation-kit package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationFailure(ValidationKitError):
    """A failing :class:`ValidationResult` promoted to an exception.

    Carries both the caller's *context* (what was being attempted) and
    the full *result*, so handlers can report every itemised error.

    Example::

        try:
            result.raise_if_failing("Error getting some data")
        except ValidationFailure as exc:
            exc.context  # "Error getting some data"
            exc.errors   # ("param1 should have a value", ...)
    """

    def __init__(self, result: ValidationResult, context: str | None = None) -> None:
        self.result = result
        self.context = context
        super().__init__(context if context is not None else result.describe())

    @property
    def errors(self) -> tuple[str, ...]:
        return self.result.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "message": self.context,
            "errors": list(self.result.errors),
        }
