"""Categorical frequency tables for non-numeric columns."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from tableprofile.normalize import display_value
from tableprofile.profiling.types import FrequencyEntry

logger = logging.getLogger(__name__)

DEFAULT_NULL_LABEL = "null"


def format_percentage(count: int, total: int) -> str:
    """Format ``count / total`` as a percentage with two decimals."""
    return f"{count / total * 100:.2f}%"


def analyze_frequencies(
    values: Sequence[Any], null_label: str = DEFAULT_NULL_LABEL
) -> list[FrequencyEntry]:
    """Count occurrences of each distinct value.

    Values compare by exact, case-sensitive text. Nulls form their own bucket
    displayed as ``null_label``; a text value equal to the label is counted
    separately.

    Args:
    ----
        values: Normalized column values in row order
        null_label: Display value for the null bucket

    Returns:
    -------
        Frequency entries in first-seen order; empty for empty input

    """
    total = len(values)
    if total == 0:
        return []

    # dicts keep insertion order, which gives first-seen ordering
    counts: dict[str | None, int] = {}
    for value in values:
        key = display_value(value)
        counts[key] = counts.get(key, 0) + 1

    entries = [
        FrequencyEntry(
            value=null_label if key is None else key,
            count=count,
            percentage=format_percentage(count, total),
            is_null=key is None,
        )
        for key, count in counts.items()
    ]
    logger.debug(f"Counted {len(entries)} distinct values over {total} rows")
    return entries


def distinct_count(values: Sequence[Any]) -> int:
    """Exact number of distinct values, null counted once."""
    return len({display_value(value) for value in values})


class CategoricalFrequencyAnalyzer:
    """Builds frequency tables with a configured null label."""

    def __init__(self, null_label: str = DEFAULT_NULL_LABEL) -> None:
        self.null_label = null_label

    def analyze(self, values: Sequence[Any]) -> list[FrequencyEntry]:
        return analyze_frequencies(values, null_label=self.null_label)
