"""Predicate-driven single-pass queries over a sequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from arrayutils.core.optional import OptionalValue
from arrayutils.core.types import Predicate
from arrayutils.utils.logging import get_logger
from arrayutils.utils.validation import ensure_callable, like_input

T = TypeVar("T")

_LOGGER = get_logger("scans")


def any_match(seq: Sequence[T], predicate: Predicate[T]) -> bool:
    """Return True if at least one element of ``seq`` satisfies ``predicate``.

    Stops at the first match. An empty sequence yields False.
    """
    ensure_callable(predicate, "predicate")
    for item in seq:
        if predicate(item):
            return True
    return False


def all_match(seq: Sequence[T], predicate: Predicate[T]) -> bool:
    """Return True if every element satisfies ``predicate`` (True when empty)."""
    ensure_callable(predicate, "predicate")
    for item in seq:
        if not predicate(item):
            return False
    return True


def count(seq: Sequence[T], predicate: Predicate[T]) -> int:
    ensure_callable(predicate, "predicate")
    matches = 0
    for item in seq:
        if predicate(item):
            matches += 1
    return matches


def find(seq: Sequence[T], predicate: Predicate[T]) -> OptionalValue[T]:
    """Return the first element satisfying ``predicate``, or an absent value."""
    ensure_callable(predicate, "predicate")
    for item in seq:
        if predicate(item):
            return OptionalValue.present(item)
    return OptionalValue.absent()


def filter(seq: Sequence[T], predicate: Predicate[T]) -> OptionalValue[Sequence[T]]:
    """Collect the elements of ``seq`` that satisfy ``predicate``.

    The first pass records one match flag per element and counts them; the
    second pass fills a buffer of exactly that size. ``predicate`` is called
    once per element.

    Returns:
        Absent when nothing matches, otherwise the matches in their original
        order, in a container of the same kind as ``seq`` (see
        :func:`arrayutils.utils.like_input`).
    """
    ensure_callable(predicate, "predicate")
    mask = [bool(predicate(item)) for item in seq]
    matches = count(mask, bool)
    _LOGGER.debug("filter matched %d of %d elements", matches, len(mask))
    if matches == 0:
        return OptionalValue.absent()

    buffer: list[T | None] = [None] * matches
    write_index = 0
    for item, matched in zip(seq, mask):
        if matched:
            buffer[write_index] = item
            write_index += 1
    return OptionalValue.present(like_input(seq, buffer))


__all__ = ["any_match", "all_match", "count", "find", "filter"]
