"""Structural transforms: round-robin interleave and circular rotation."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from functools import reduce
from typing import Any, TypeVar

import numpy as np

from arrayutils.scans import any_match
from arrayutils.utils.logging import get_logger
from arrayutils.utils.validation import ensure_mutable, like_input

T = TypeVar("T")

_LOGGER = get_logger("transforms")
_EXHAUSTED = -1


def combined_lengths(arrays: Sequence[Sequence[Any]]) -> int:
    total = 0
    for arr in arrays:
        total += len(arr)
    return total


def zip_many(arrays: Sequence[Sequence[T]]) -> Any:
    """Interleave ``arrays`` round-robin into a single sequence.

    One element is taken from each array in turn, wrapping back to the first
    and skipping arrays that have run out, until all are drained:
    ``zip_many([[1, 2, 3], [4, 5], [6]]) == [1, 4, 6, 2, 5, 3]``.

    The result is a numpy array when every input is one and they share the
    same row shape, otherwise a list.
    """
    total = combined_lengths(arrays)
    read_indices = [0] * len(arrays)
    result: list[T | None] = [None] * total
    write_index = 0

    idx = 0
    while any_match(read_indices, lambda index: index >= 0):
        if idx == len(arrays):
            idx = 0
        current = read_indices[idx]
        if current == _EXHAUSTED:
            idx += 1
            continue
        if current == len(arrays[idx]):
            read_indices[idx] = _EXHAUSTED
            idx += 1
            continue
        result[write_index] = arrays[idx][current]
        read_indices[idx] = current + 1
        write_index += 1
        idx += 1

    _LOGGER.debug("zip_many interleaved %d arrays into %d elements", len(arrays), total)
    if arrays and all(isinstance(arr, np.ndarray) for arr in arrays):
        row_shapes = {arr.shape[1:] for arr in arrays}
        if len(row_shapes) != 1:
            return result
        dtype = reduce(np.promote_types, (arr.dtype for arr in arrays))
        out = np.empty((total,) + row_shapes.pop(), dtype=dtype)
        for pos, item in enumerate(result):
            out[pos] = item
        return out
    return result


def rotate(array: MutableSequence[T], amount: int) -> None:
    """Rotate ``array`` right by ``amount`` positions, in place.

    ``amount`` may be negative or exceed the length; the effective shift is
    ``amount % len(array)``. Elements are copied into a fresh buffer starting
    at the circular read position and then written back over ``array``.

    Raises:
        TypeError: if ``array`` cannot be modified in place.
    """
    ensure_mutable(array)
    length = len(array)
    if amount == 0 or length <= 1:
        return

    read_index = (length - amount % length) % length
    _LOGGER.debug("rotate length=%d amount=%d read_start=%d", length, amount, read_index)
    buffer = _rotated_buffer(array, read_index)
    for write_index, item in enumerate(buffer):
        array[write_index] = item


def rotated(seq: Sequence[T], amount: int) -> Any:
    """Return a right-rotated copy of ``seq``; ``seq`` itself is left untouched."""
    length = len(seq)
    if amount == 0 or length <= 1:
        return like_input(seq, list(seq))
    read_index = (length - amount % length) % length
    return like_input(seq, _rotated_buffer(seq, read_index))


def _rotated_buffer(seq: Sequence[T], read_index: int) -> list[T]:
    length = len(seq)
    buffer: list[T] = []
    for _ in range(length):
        item = seq[read_index]
        if isinstance(item, np.ndarray):
            # rows of a 2-D array are views into the storage being rewritten
            item = item.copy()
        buffer.append(item)
        read_index = (read_index + 1) % length
    return buffer


__all__ = ["combined_lengths", "zip_many", "rotate", "rotated"]
