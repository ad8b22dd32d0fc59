"""Soft-failure reporting: log a failing result and carry on."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .result import ValidationResult

logger = logging.getLogger("validation_kit.reporting")


def log_if_failing(
    result: ValidationResult,
    context: str,
    *,
    log: logging.Logger | None = None,
    level: int = logging.INFO,
) -> ValidationResult:
    """Log *result* under *context* when it carries errors.

    The counterpart of :meth:`ValidationResult.raise_if_failing` for
    callers that only want to record problems. Returns *result* unchanged.
    """
    if result.has_error:
        (log or logger).log(level, "%s: %s", context, result.describe())
    return result
