"""Normalization of raw cells returned by the query engine.

Integer columns can hold values wider than a float mantissa, so integral
values are converted to their decimal string form. Everything else passes
through untouched, which keeps normalization idempotent.
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable, Mapping, Set
from typing import Any


def is_integral(cell: Any) -> bool:
    """Return True for 64-bit-integer-like values (excluding bool)."""
    return isinstance(cell, numbers.Integral) and not isinstance(cell, bool)


def is_scalar_cell(cell: Any) -> bool:
    """Check a cell against the raw cell contract.

    Strings and bytes are scalars; mappings, sequences and sets are not.
    """
    if cell is None or isinstance(cell, (str, bytes, numbers.Number)):
        return True
    return not isinstance(cell, (Mapping, Set, list, tuple))


def normalize_cell(cell: Any) -> Any:
    """Convert a raw cell to a display-safe value.

    Args:
        cell: Raw scalar from the query engine

    Returns:
        The decimal string for integral values, otherwise the cell unchanged
        (``None`` stays ``None`` and marks a missing value)

    """
    if is_integral(cell):
        # str() on an int is exact; int -> float would round above 2**53
        return str(cell)
    return cell


def normalize_column(cells: Iterable[Any]) -> tuple[Any, ...]:
    """Normalize a column of cells, preserving order."""
    return tuple(normalize_cell(cell) for cell in cells)


def display_value(value: Any) -> str | None:
    """Key used to compare categorical values; ``None`` stays distinct."""
    if value is None or isinstance(value, str):
        return value
    return str(normalize_cell(value))
