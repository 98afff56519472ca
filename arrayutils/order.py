"""Order statistics driven by a three-way comparator."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from arrayutils.core.optional import OptionalValue
from arrayutils.core.types import Comparator, KeyFn
from arrayutils.utils.validation import ensure_callable

T = TypeVar("T")


def natural_order(a: Any, b: Any) -> int:
    """Compare two values with ``<``/``>``, returning -1, 0 or 1."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def reverse_order(comparator: Comparator[T] = natural_order) -> Comparator[T]:
    def _reversed(a: T, b: T) -> int:
        return comparator(b, a)

    return _reversed


def comparing(key: KeyFn[T]) -> Comparator[T]:
    """Build a comparator that orders elements by ``key(element)``."""
    ensure_callable(key, "key")

    def _by_key(a: T, b: T) -> int:
        return natural_order(key(a), key(b))

    return _by_key


def min(seq: Sequence[T], comparator: Comparator[T] | None = None) -> OptionalValue[T]:
    """Return the smallest element of ``seq``, absent when ``seq`` is empty.

    Only a strictly smaller element replaces the running candidate, so the
    earliest of several equal minima wins.
    """
    compare = natural_order if comparator is None else comparator
    ensure_callable(compare, "comparator")
    if len(seq) == 0:
        return OptionalValue.absent()

    candidate = seq[0]
    for idx in range(1, len(seq)):
        if compare(seq[idx], candidate) < 0:
            candidate = seq[idx]
    return OptionalValue.present(candidate)


def max(seq: Sequence[T], comparator: Comparator[T] | None = None) -> OptionalValue[T]:
    """Return the largest element of ``seq``; ties keep the earliest one."""
    compare = natural_order if comparator is None else comparator
    ensure_callable(compare, "comparator")
    if len(seq) == 0:
        return OptionalValue.absent()

    candidate = seq[0]
    for idx in range(1, len(seq)):
        if compare(seq[idx], candidate) > 0:
            candidate = seq[idx]
    return OptionalValue.present(candidate)


__all__ = ["natural_order", "reverse_order", "comparing", "min", "max"]
