"""Shared fixtures for validation-kit tests."""

from __future__ import annotations

import pytest

from validation_kit import ValidationResult

ERROR_MESSAGE = "Error message"


@pytest.fixture
def failing() -> ValidationResult:
    """A result carrying a single error."""
    return ValidationResult.error(ERROR_MESSAGE)
