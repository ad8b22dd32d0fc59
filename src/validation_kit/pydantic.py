"""Bridge from pydantic model validation to :class:`ValidationResult`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from .result import ValidationResult

if TYPE_CHECKING:
    from pydantic import BaseModel


def from_pydantic_error(exc: PydanticValidationError) -> ValidationResult:
    """Convert each pydantic error entry into a ``"<loc> <msg>"`` message.

    Entries keep pydantic's order; a missing location is reported as
    ``__root__``.
    """
    messages: list[str] = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
        msg = error.get("msg", "validation error")
        messages.append(f"{loc} {msg}")
    return ValidationResult(errors=tuple(messages))


def validate_model(model: type[BaseModel], data: Any) -> ValidationResult:
    """Run ``model.model_validate(data)`` and report failures as a result."""
    try:
        model.model_validate(data)
    except PydanticValidationError as exc:
        return from_pydantic_error(exc)
    return ValidationResult.ok()
