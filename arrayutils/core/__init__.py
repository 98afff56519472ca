"""Core primitives shared by every operation."""

from .optional import ArrayUtilsError, EmptyValueError, OptionalValue, absent, present
from .types import Comparator, KeyFn, Predicate

__all__ = [
    "ArrayUtilsError",
    "EmptyValueError",
    "OptionalValue",
    "absent",
    "present",
    "Comparator",
    "KeyFn",
    "Predicate",
]
