"""Profiling data types for column analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tableprofile.normalize import display_value
from tableprofile.type_mappings import ColumnKind

# A normalized cell: decimal string for integers, text, native number, or None.
NormalizedValue = Any


class IssueKind(str, Enum):
    """Non-fatal findings recorded during a profiling pass."""

    MISSING_STATS = "missing_stats"
    SCHEMA_MISMATCH = "schema_mismatch"
    NO_DATA = "no_data"
    DEGENERATE_RANGE = "degenerate_range"


@dataclass(frozen=True)
class ProfilingIssue:
    """A non-fatal problem found while profiling."""

    kind: IssueKind
    message: str
    column: str | None = None


@dataclass(frozen=True)
class ColumnProfile:
    """Profile statistics and normalized values for a single column."""

    label: str
    kind: ColumnKind
    values: tuple[NormalizedValue, ...] = ()
    declared_type: str | None = None
    maximum: str | None = None
    minimum: str | None = None
    approx_distinct: int | None = None
    null_count: int | None = None
    has_stats: bool = False

    @property
    def is_numeric_type(self) -> bool:
        return self.kind is ColumnKind.NUMERIC

    @property
    def row_count(self) -> int:
        return len(self.values)

    @property
    def exact_distinct(self) -> int:
        """Size of the distinct-value set, with null counted as one value."""
        return len({display_value(value) for value in self.values})


@dataclass(frozen=True)
class DatasetProfile:
    """Column profiles for one profiling pass."""

    columns: tuple[ColumnProfile, ...]
    row_count: int
    issues: tuple[ProfilingIssue, ...] = ()

    def column(self, label: str) -> ColumnProfile:
        """Look up a column profile by label.

        Raises:
            KeyError: If no column has that label

        """
        for profile in self.columns:
            if profile.label == label:
                return profile
        raise KeyError(label)

    @property
    def labels(self) -> list[str]:
        return [profile.label for profile in self.columns]


@dataclass(frozen=True)
class FrequencyEntry:
    """Occurrence count of one distinct categorical value."""

    value: str
    count: int
    percentage: str
    is_null: bool = False


@dataclass(frozen=True)
class HistogramBin:
    """A contiguous bin of a histogram."""

    range_start: float
    range_end: float
    count: int = 0


@dataclass(frozen=True)
class Histogram:
    """Equal-width bins over the valid numeric values of a column."""

    bins: tuple[HistogramBin, ...]
    bar_width: float
    min_value: float
    max_value: float
    bin_width: float
    degenerate: bool = False

    @property
    def bin_count(self) -> int:
        return len(self.bins)

    @property
    def counts(self) -> list[int]:
        return [b.count for b in self.bins]

    @property
    def edges(self) -> list[float]:
        """Bin boundaries, ``bin_count + 1`` values."""
        if not self.bins:
            return []
        return [b.range_start for b in self.bins] + [self.bins[-1].range_end]

    @property
    def total(self) -> int:
        return sum(self.counts)

    @property
    def max_frequency(self) -> int:
        """Largest bin count, used by renderers to scale the y-axis."""
        return max(self.counts, default=0)


@dataclass(frozen=True)
class NoData:
    """Sentinel returned when a column has no valid numeric values."""

    reason: str = field(default="no valid numeric values")
