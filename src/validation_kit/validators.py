"""Validator functions.

Every function here is pure: it inspects its candidate, never raises for
bad input, and returns a fresh :class:`ValidationResult`. Names and
messages supplied by the caller are used verbatim.

The ``*_deep`` and ``*_each`` variants take a nested validator and apply
it to the candidate itself or to each element of a collection. Elements
are passed through unchanged (``None`` included); the nested validator is
responsible for its own absence checks.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sized
from typing import TYPE_CHECKING, Any, TypeVar

from .maybe import Maybe
from .result import ValidationResult

if TYPE_CHECKING:
    from .ports import Validator

T = TypeVar("T")


def _is_empty(value: Any) -> bool:
    return isinstance(value, Sized) and len(value) == 0


def _matches(pattern: str, value: str) -> bool:
    return re.fullmatch(pattern, value) is not None


# ── Scalars and strings ──────────────────────────────────────────


def validate_not_null(value: Any, name: str) -> ValidationResult:
    if value is None:
        return ValidationResult.error(f"{name} should not be null")
    return ValidationResult.ok()


def validate_not_empty(value: Sized | None, message: str) -> ValidationResult:
    """Fail with *message* if *value* is ``None`` or has no content.

    Works for strings and any sized collection.
    """
    if value is None or _is_empty(value):
        return ValidationResult.error(message)
    return ValidationResult.ok()


def validate_not_null_or_empty(value: Sized | None, name: str) -> ValidationResult:
    if value is None or _is_empty(value):
        return ValidationResult.error(f"{name} should have a value")
    return ValidationResult.ok()


def validate_not_null_and_matches(
    value: str | None, pattern: str, name: str
) -> ValidationResult:
    """Require a value that matches *pattern* as a whole string."""
    if value is None or not _matches(pattern, value):
        return ValidationResult.error(f"{name} should match {pattern}")
    return ValidationResult.ok()


def validate_empty_or_matches(
    value: str | Maybe[str] | None, pattern: str, name: str
) -> ValidationResult:
    """Accept an absent or empty value, otherwise require a whole-string match.

    *value* may also be a :class:`Maybe`; an empty one is accepted and a
    present one must match, even when its content is an empty string.
    """
    if isinstance(value, Maybe):
        if value.is_empty or _matches(pattern, value.get()):
            return ValidationResult.ok()
        return ValidationResult.error(f"{name} should match {pattern}")
    if value is None or value == "" or _matches(pattern, value):
        return ValidationResult.ok()
    return ValidationResult.error(f"{name} should match {pattern}")


# ── Optional values ──────────────────────────────────────────────


def validate_is_present(maybe: Maybe[Any] | None, name: str) -> ValidationResult:
    """Require a non-``None`` container that holds a value.

    A ``None`` container reports ``"<name> should not be null"``; an empty
    one reports ``"<name> should be present"``.
    """
    return validate_not_null_deep(
        maybe,
        lambda m: ValidationResult.ok()
        if m.is_present
        else ValidationResult.error(f"{name} should be present"),
        f"{name} should not be null",
    )


def validate_is_present_deep(
    maybe: Maybe[T] | None, validator: Validator[T], name: str
) -> ValidationResult:
    """Require a present value and return *validator*'s verdict on it.

    A ``None`` container reports ``"<name> should not be null"``.
    """
    if maybe is None:
        return ValidationResult.error(f"{name} should not be null")
    if maybe.is_empty:
        return ValidationResult.error(f"{name} should be present")
    return ValidationResult.of(validator(maybe.get()))


# ── Nested values and collections ────────────────────────────────


def validate_not_null_deep(
    value: T | None, validator: Validator[T], message: str
) -> ValidationResult:
    """Fail with *message* if *value* is ``None``, otherwise delegate to *validator*."""
    if value is None:
        return ValidationResult.error(message)
    return ValidationResult.of(validator(value))


def validate_not_empty_each(
    collection: Iterable[T] | None, validator: Validator[T], message: str
) -> ValidationResult:
    """Fail with *message* if *collection* is ``None`` or empty.

    Otherwise validate every element and merge the results in iteration
    order. *message* is not used when only an element fails.
    """
    if collection is None:
        return ValidationResult.error(message)
    items = list(collection)
    if not items:
        return ValidationResult.error(message)
    return ValidationResult.merge(validator(item) for item in items)


def validate_not_null_each(
    collection: Iterable[T] | None, validator: Validator[T], message: str
) -> ValidationResult:
    """Fail with *message* only if *collection* is ``None``.

    An empty collection is ok; otherwise per-element results are merged.
    """
    if collection is None:
        return ValidationResult.error(message)
    return ValidationResult.merge(validator(item) for item in collection)
