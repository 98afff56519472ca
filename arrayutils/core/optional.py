"""Present-or-absent result container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ArrayUtilsError(Exception):
    """Base class for errors raised by arrayutils."""


class EmptyValueError(ArrayUtilsError, ValueError):
    """Raised when unwrapping an absent :class:`OptionalValue`."""


@dataclass(frozen=True, slots=True)
class OptionalValue(Generic[T]):
    """Result of a query that may legitimately find nothing.

    Presence is tracked by ``_has_value`` rather than by the payload, so a
    present ``None`` is distinct from an absent result. Build instances with
    :meth:`present` or :meth:`absent`; the fields are keyword-only.
    """

    _value: Any = field(default=None, kw_only=True)
    _has_value: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if not self._has_value and self._value is not None:
            msg = "An absent OptionalValue cannot carry a value"
            raise TypeError(msg)

    @classmethod
    def present(cls, value: T) -> OptionalValue[T]:
        return cls(_value=value, _has_value=True)

    @classmethod
    def absent(cls) -> OptionalValue[T]:
        return cls()

    @property
    def is_present(self) -> bool:
        return self._has_value

    @property
    def is_absent(self) -> bool:
        return not self._has_value

    def unwrap(self) -> T:
        """Return the wrapped value or raise :class:`EmptyValueError`."""
        if self._has_value:
            return self._value
        msg = "Unwrapping of result with no value"
        raise EmptyValueError(msg)

    def or_else(self, default: T) -> T:
        """Return the wrapped value, or ``default`` when absent."""
        if self._has_value:
            return self._value
        return default

    def __bool__(self) -> bool:
        return self._has_value

    def __repr__(self) -> str:
        if self._has_value:
            return f"OptionalValue.present({self._value!r})"
        return "OptionalValue.absent()"


def present(value: T) -> OptionalValue[T]:
    return OptionalValue.present(value)


def absent() -> OptionalValue[Any]:
    return OptionalValue.absent()


__all__ = ["ArrayUtilsError", "EmptyValueError", "OptionalValue", "present", "absent"]
