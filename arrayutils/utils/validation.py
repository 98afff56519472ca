"""Validation and container helpers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from arrayutils.utils.config import get_config

_IMMUTABLE = (tuple, str, bytes, range)


def ensure_callable(fn: object, role: str) -> None:
    """Raise ``TypeError`` when ``fn`` is not callable (unless validation is off)."""
    if not get_config().validate_callables:
        return
    if not callable(fn):
        msg = f"{role} must be callable, got {type(fn).__name__}"
        raise TypeError(msg)


def ensure_mutable(array: object) -> None:
    """Reject sequences that cannot be overwritten in place."""
    if isinstance(array, np.ndarray):
        if not array.flags.writeable:
            msg = "Cannot modify a read-only numpy array in place"
            raise TypeError(msg)
        return
    if isinstance(array, _IMMUTABLE) or not hasattr(type(array), "__setitem__"):
        msg = f"Expected a mutable sequence, got {type(array).__name__}"
        raise TypeError(msg)


def like_input(source: object, items: Sequence[Any]) -> Any:
    """Return ``items`` in a container following the type of ``source``.

    numpy arrays keep their dtype and row shape, tuples stay tuples,
    everything else becomes a list.
    """
    if isinstance(source, np.ndarray):
        out = np.empty((len(items),) + source.shape[1:], dtype=source.dtype)
        for idx, item in enumerate(items):
            out[idx] = item
        return out
    if isinstance(source, tuple):
        return tuple(items)
    return list(items)
