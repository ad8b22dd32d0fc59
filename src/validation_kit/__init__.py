"""validation-kit — accumulate every validation error, then inspect or raise.

Pure, synchronous and stateless. Pydantic bridge in ``validation_kit.pydantic``.
"""

from __future__ import annotations

# ── Composition ─────────────────────────────────────────────────
from .composite import CompositeValidator

# ── Exceptions ──────────────────────────────────────────────────
from .exceptions import ValidationFailure, ValidationKitError

# ── Optional values ─────────────────────────────────────────────
from .maybe import Maybe

# ── Ports ───────────────────────────────────────────────────────
from .ports import Validator

# ── Results ─────────────────────────────────────────────────────
from .reporting import log_if_failing
from .result import DESCRIBE_HEADER, NO_ERRORS, ValidationResult

# ── Validators ──────────────────────────────────────────────────
from .validators import (
    validate_empty_or_matches,
    validate_is_present,
    validate_is_present_deep,
    validate_not_empty,
    validate_not_empty_each,
    validate_not_null,
    validate_not_null_and_matches,
    validate_not_null_deep,
    validate_not_null_each,
    validate_not_null_or_empty,
)

__all__ = [
    # Results
    "ValidationResult",
    "DESCRIBE_HEADER",
    "NO_ERRORS",
    "log_if_failing",
    # Exceptions
    "ValidationKitError",
    "ValidationFailure",
    # Optional values
    "Maybe",
    # Composition
    "Validator",
    "CompositeValidator",
    # Validators
    "validate_not_null",
    "validate_not_null_deep",
    "validate_not_null_each",
    "validate_not_empty",
    "validate_not_empty_each",
    "validate_not_null_or_empty",
    "validate_not_null_and_matches",
    "validate_empty_or_matches",
    "validate_is_present",
    "validate_is_present_deep",
]
