"""Column profiling, frequency tables and adaptive histograms."""

from tableprofile.profiling.frequency import (
    CategoricalFrequencyAnalyzer,
    analyze_frequencies,
    distinct_count,
)
from tableprofile.profiling.histogram import (
    AdaptiveHistogramBinner,
    bin_values,
    parse_number,
    suggest_bin_count,
)
from tableprofile.profiling.profiler import (
    ColumnProfiler,
    ProfilingError,
    profile_columns,
)
from tableprofile.profiling.types import (
    ColumnProfile,
    DatasetProfile,
    FrequencyEntry,
    Histogram,
    HistogramBin,
    IssueKind,
    NoData,
    ProfilingIssue,
)

__all__ = [
    "AdaptiveHistogramBinner",
    "CategoricalFrequencyAnalyzer",
    "ColumnProfile",
    "ColumnProfiler",
    "DatasetProfile",
    "FrequencyEntry",
    "Histogram",
    "HistogramBin",
    "IssueKind",
    "NoData",
    "ProfilingError",
    "ProfilingIssue",
    "analyze_frequencies",
    "bin_values",
    "distinct_count",
    "parse_number",
    "profile_columns",
    "suggest_bin_count",
]
