"""Validator — callable validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .result import ValidationResult

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Validator(Protocol[T_contra]):
    """Protocol for anything that validates a single candidate.

    Plain functions and lambdas satisfy it. Validators are composable via
    :class:`~validation_kit.composite.CompositeValidator` and the nested
    forms in :mod:`validation_kit.validators`.
    """

    def __call__(self, value: T_contra, /) -> ValidationResult:
        """Validate *value* and return a
        :class:`~validation_kit.result.ValidationResult`.

        Must not raise for invalid input; failures are reported as errors
        on the returned result.
        """
        ...
