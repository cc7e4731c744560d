"""Column profiling and adaptive histograms for tabular query results."""

from tableprofile.models import (
    ColumnStats,
    ProfilerSettings,
    load_settings_from_yaml,
    save_settings_to_yaml,
)
from tableprofile.normalize import normalize_cell, normalize_column
from tableprofile.passes import (
    ProfilingPass,
    QueryEngine,
    QueryResult,
    run_profiling_pass,
)
from tableprofile.profiling import (
    AdaptiveHistogramBinner,
    CategoricalFrequencyAnalyzer,
    ColumnProfile,
    ColumnProfiler,
    DatasetProfile,
    FrequencyEntry,
    Histogram,
    HistogramBin,
    IssueKind,
    NoData,
    ProfilingError,
    ProfilingIssue,
    analyze_frequencies,
    bin_values,
    distinct_count,
    profile_columns,
)
from tableprofile.report import (
    ProfileReportBuilder,
    load_report_from_yaml,
    save_report_to_yaml,
)
from tableprofile.report_validator import (
    PROFILE_REPORT_SCHEMA,
    ReportValidationError,
    ReportValidator,
)
from tableprofile.type_mappings import (
    ColumnKind,
    classify_declared_type,
    is_numeric_declared_type,
    map_to_json_type,
)

__version__ = "0.1.0"

__all__ = [
    "PROFILE_REPORT_SCHEMA",
    "AdaptiveHistogramBinner",
    "CategoricalFrequencyAnalyzer",
    "ColumnKind",
    "ColumnProfile",
    "ColumnProfiler",
    "ColumnStats",
    "DatasetProfile",
    "FrequencyEntry",
    "Histogram",
    "HistogramBin",
    "IssueKind",
    "NoData",
    "ProfileReportBuilder",
    "ProfilerSettings",
    "ProfilingError",
    "ProfilingIssue",
    "ProfilingPass",
    "QueryEngine",
    "QueryResult",
    "ReportValidationError",
    "ReportValidator",
    "analyze_frequencies",
    "bin_values",
    "classify_declared_type",
    "distinct_count",
    "is_numeric_declared_type",
    "load_report_from_yaml",
    "load_settings_from_yaml",
    "map_to_json_type",
    "normalize_cell",
    "normalize_column",
    "profile_columns",
    "run_profiling_pass",
    "save_report_to_yaml",
    "save_settings_to_yaml",
]
