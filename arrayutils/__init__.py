"""arrayutils public interface.

Predicate scans live in ``arrayutils.scans``, comparator-driven order
statistics in ``arrayutils.order`` and the interleave/rotate transforms in
``arrayutils.transforms``. Queries that can find nothing return an
:class:`OptionalValue`.
"""

from __future__ import annotations

from .core import ArrayUtilsError, EmptyValueError, OptionalValue, absent, present
from .order import comparing, max, min, natural_order, reverse_order
from .scans import all_match, any_match, count, filter, find
from .transforms import combined_lengths, rotate, rotated, zip_many

__all__ = [
    "ArrayUtilsError",
    "EmptyValueError",
    "OptionalValue",
    "absent",
    "present",
    "any_match",
    "all_match",
    "count",
    "find",
    "filter",
    "min",
    "max",
    "natural_order",
    "reverse_order",
    "comparing",
    "combined_lengths",
    "zip_many",
    "rotate",
    "rotated",
]

__version__ = "0.1.0"
