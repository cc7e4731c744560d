"""Adaptive equal-width histograms for numeric columns.

The bin count follows a cube-root rule (``ceil(2 * n ** (1/3))``) so it grows
sub-linearly with the number of values, then is clamped to a small range that
keeps compact renderings legible. Callers can override the bin count.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Sequence
from typing import Any

from tableprofile.models.settings import ProfilerSettings
from tableprofile.profiling.types import Histogram, HistogramBin, NoData

logger = logging.getLogger(__name__)

# Bin width used when every value is identical.
DEGENERATE_BIN_WIDTH = 1.0


def parse_number(value: Any) -> float | None:
    """Parse a value as a finite float.

    Returns:
        The parsed number, or None for nulls, booleans, unparseable text,
        NaN and infinities

    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, numbers.Real):
            number = float(value)
        else:
            number = float(str(value).strip())
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def suggest_bin_count(n: int, min_bins: int = 5, max_bins: int = 15) -> int:
    """Cube-root bin count for ``n`` values, clamped to ``[min_bins, max_bins]``."""
    calculated = math.ceil(2 * math.pow(n, 1 / 3)) if n > 0 else min_bins
    return min(max(calculated, min_bins), max_bins)


class AdaptiveHistogramBinner:
    """Bins numeric column values for histogram rendering."""

    def __init__(self, settings: ProfilerSettings | None = None) -> None:
        self.settings = settings or ProfilerSettings()

    def bin(
        self,
        values: Sequence[Any],
        bin_count: int | None = None,
        display_width: float | None = None,
    ) -> Histogram | NoData:
        """Build a histogram from column values.

        Args:
        ----
            values: Column values; entries that do not parse as numbers are skipped
            bin_count: Explicit number of bins, bypassing the automatic rule
            display_width: Width available to the renderer, used for bar width

        Returns:
        -------
            Histogram, or NoData when no value parses as a number

        Raises:
        ------
            ValueError: If ``bin_count`` is less than 1

        """
        if bin_count is not None and bin_count < 1:
            msg = f"bin_count must be at least 1, got {bin_count}"
            raise ValueError(msg)

        valid = [n for n in (parse_number(v) for v in values) if n is not None]
        if not valid:
            reason = "empty column" if not values else "no valid numeric values"
            logger.debug(f"No histogram data: {reason} ({len(values)} values)")
            return NoData(reason=reason)

        if bin_count is None:
            bin_count = suggest_bin_count(
                len(valid), self.settings.min_bins, self.settings.max_bins
            )

        min_value = min(valid)
        max_value = max(valid)
        bin_width = self._bin_width(min_value, max_value, bin_count)
        degenerate = bin_width is None
        if degenerate:
            logger.debug(
                f"Range [{min_value}, {max_value}] cannot be split into "
                f"{bin_count} bins; all values in one bin"
            )
            bin_width = DEGENERATE_BIN_WIDTH
            bins = (
                HistogramBin(
                    range_start=min_value,
                    range_end=min_value + bin_width,
                    count=len(valid),
                ),
            )
        else:
            counts = [0] * bin_count
            for x in valid:
                index = self._bin_index(x, min_value, bin_width)
                # the maximum lands exactly on the right edge of the last bin
                counts[min(max(index, 0), bin_count - 1)] += 1
            edges = [
                self._edge(i, bin_count, min_value, max_value, bin_width)
                for i in range(bin_count)
            ] + [max_value]
            bins = tuple(
                HistogramBin(range_start=edges[i], range_end=edges[i + 1], count=count)
                for i, count in enumerate(counts)
            )

        return Histogram(
            bins=bins,
            bar_width=self.bar_width(len(bins), display_width),
            min_value=min_value,
            max_value=max_value,
            bin_width=bin_width,
            degenerate=degenerate,
        )

    @staticmethod
    def _bin_width(min_value: float, max_value: float, bin_count: int) -> float | None:
        """Equal bin width, or None when the range has no usable width.

        That covers a single distinct value, ranges so narrow that the width
        underflows to zero, and a single bin wider than the largest float.
        Ranges wider than the largest float are measured on halved values.
        """
        if max_value == min_value:
            return None
        span = max_value - min_value
        if math.isfinite(span):
            width = span / bin_count
        else:
            width = (max_value / 2 - min_value / 2) / bin_count * 2
        if width == 0 or not math.isfinite(width):
            return None
        return width

    @staticmethod
    def _bin_index(x: float, min_value: float, bin_width: float) -> int:
        offset = x - min_value
        if math.isfinite(offset):
            return math.floor(offset / bin_width)
        return math.floor((x / 2 - min_value / 2) / (bin_width / 2))

    @staticmethod
    def _edge(
        i: int, bin_count: int, min_value: float, max_value: float, bin_width: float
    ) -> float:
        edge = min_value + i * bin_width
        if math.isfinite(edge):
            return edge
        t = i / bin_count
        return min_value * (1 - t) + max_value * t

    def bar_width(self, bin_count: int, display_width: float | None = None) -> float:
        """Suggested bar width; fewer bins get wider bars."""
        floor_width = self.settings.min_bar_width
        if display_width is None:
            return floor_width
        if bin_count <= self.settings.few_bins_threshold:
            divisor = self.settings.few_bins_divisor
        else:
            divisor = self.settings.many_bins_divisor
        return max(floor_width, display_width / bin_count / divisor)


def bin_values(
    values: Sequence[Any],
    bin_count: int | None = None,
    display_width: float | None = None,
) -> Histogram | NoData:
    """Bin values with the default settings."""
    return AdaptiveHistogramBinner().bin(values, bin_count, display_width)
