"""Maybe — explicit present/absent container for optional values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """Tagged optional value.

    ``Maybe.empty()`` is a container that holds nothing, which is not the
    same thing as a ``None`` container. Presence validators report the two
    cases with different messages.
    """

    _value: Any = None
    _present: bool = False

    def __post_init__(self) -> None:
        if self._present is (self._value is None):
            raise ValueError("Use Maybe.of(), Maybe.empty() or Maybe.of_nullable()")

    @classmethod
    def of(cls, value: T) -> Maybe[T]:
        if value is None:
            raise ValueError("Maybe.of() requires a value; use of_nullable() for None")
        return cls(value, True)

    @classmethod
    def empty(cls) -> Maybe[T]:
        return cls()

    @classmethod
    def of_nullable(cls, value: T | None) -> Maybe[T]:
        return cls.empty() if value is None else cls.of(value)

    @property
    def is_present(self) -> bool:
        return self._present

    @property
    def is_empty(self) -> bool:
        return not self._present

    def get(self) -> T:
        if not self._present:
            raise ValueError("No value present")
        return self._value  # type: ignore[no-any-return]

    def map(self, fn: Callable[[T], U]) -> Maybe[U]:
        if not self._present:
            return Maybe.empty()
        return Maybe.of_nullable(fn(self._value))

    def or_else(self, default: T) -> T:
        return self._value if self._present else default  # type: ignore[no-any-return]

    def __repr__(self) -> str:
        if self._present:
            return f"Maybe.of({self._value!r})"
        return "Maybe.empty()"
