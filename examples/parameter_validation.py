"""
Parameter validation at a service boundary.

Shows the two caller patterns:

- ``get_some_data``: collect every problem, then raise once with context.
- ``get_some_other_data``: collect every problem, log it and carry on.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from validation_kit import (
    Maybe,
    ValidationResult,
    log_if_failing,
    validate_empty_or_matches,
    validate_is_present_deep,
    validate_not_empty,
    validate_not_empty_each,
    validate_not_null,
    validate_not_null_or_empty,
)

if TYPE_CHECKING:
    from collections.abc import Collection

logger = logging.getLogger("validation_kit.examples")


def get_some_data(
    param1: str | None,
    param2: int | None,
    param3: Maybe[str],
    param_collection: Collection[str] | None,
) -> list[str]:
    """Validate input parameters and raise ``ValidationFailure`` if any is invalid."""
    ValidationResult.of(
        validate_not_null_or_empty(param1, "param1"),
        validate_not_null(param2, "param2"),
        validate_is_present_deep(
            param3, lambda p: validate_empty_or_matches(p, r"\d{2}", "param3"), "param3"
        ),
        validate_not_empty_each(
            param_collection,
            lambda e: validate_not_empty(e, "collection element should not be empty"),
            "collection should not be empty",
        ),
    ).raise_if_failing("Error getting some data")

    return ["FOOs"]


def get_some_other_data(param1: str | None, param2: int | None) -> list[str]:
    """Validate input parameters and log the validation result."""
    log_if_failing(
        ValidationResult.of(
            validate_not_null_or_empty(param1, "param1"),
            validate_not_null(param2, "param2"),
        ),
        "Some parameters are not ok",
        log=logger,
    )

    return ["FOOs"]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    get_some_other_data(None, None)
    get_some_data("value", 5, Maybe.of("42"), ["x"])
