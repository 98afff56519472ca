"""Shared callback aliases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]
Comparator = Callable[[T, T], int]
KeyFn = Callable[[T], Any]

__all__ = ["T", "Predicate", "Comparator", "KeyFn"]
