"""Assemble JSON-serializable profiling reports from column profiles."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tableprofile.models.settings import ProfilerSettings
from tableprofile.profiling.frequency import CategoricalFrequencyAnalyzer
from tableprofile.profiling.histogram import AdaptiveHistogramBinner
from tableprofile.profiling.types import Histogram, IssueKind, ProfilingIssue
from tableprofile.type_mappings import map_to_json_type

if TYPE_CHECKING:
    from tableprofile.passes import ProfilingPass
    from tableprofile.profiling.types import ColumnProfile, DatasetProfile

logger = logging.getLogger(__name__)

REPORT_TOOL = "tableprofile"
REPORT_VERSION = "1.0"


class ProfileReportBuilder:
    """Routes each column profile to a histogram or a frequency table."""

    def __init__(self, settings: ProfilerSettings | None = None) -> None:
        self.settings = settings or ProfilerSettings()
        self.binner = AdaptiveHistogramBinner(self.settings)
        self.analyzer = CategoricalFrequencyAnalyzer(self.settings.null_label)

    def build_report(
        self,
        dataset: DatasetProfile,
        display_width: float | None = None,
        profiling_pass: ProfilingPass | None = None,
    ) -> dict[str, Any]:
        """Build a report for every column of a profiling pass.

        Args:
        ----
            dataset: Profiles from ColumnProfiler.profile_dataset
            display_width: Width available per histogram, for bar widths
            profiling_pass: Pass the profiles came from, for its fingerprint

        Returns:
        -------
            Report dictionary with metadata, per-column sections and issues

        """
        issues = list(dataset.issues)
        columns = [
            self._build_column_section(profile, display_width, issues)
            for profile in dataset.columns
        ]

        report = {
            "profiling_metadata": {
                "profiled_at": datetime.now(UTC).isoformat(),
                "tool": REPORT_TOOL,
                "version": REPORT_VERSION,
                "row_count": dataset.row_count,
                "column_count": len(columns),
                "fingerprint": profiling_pass.fingerprint if profiling_pass else None,
            },
            "columns": columns,
            "issues": [
                {"kind": issue.kind.value, "column": issue.column, "message": issue.message}
                for issue in issues
            ],
        }

        logger.info(
            f"Built profiling report for {len(columns)} columns "
            f"({len(issues)} issues)"
        )
        return report

    def _build_column_section(
        self,
        profile: ColumnProfile,
        display_width: float | None,
        issues: list[ProfilingIssue],
    ) -> dict[str, Any]:
        """Build the report section for a single column.

        Numeric columns get a ``histogram`` (or ``no_data``), the rest get
        ``frequencies``. Histogram findings are appended to ``issues``.
        """
        section: dict[str, Any] = {
            "label": profile.label,
            "kind": profile.kind.value,
            "declared_type": profile.declared_type,
            "json_type": map_to_json_type(profile.declared_type),
            "row_count": profile.row_count,
            "exact_distinct": profile.exact_distinct,
        }

        statistics = self._build_statistics(profile)
        if statistics:
            section["statistics"] = statistics

        if not profile.is_numeric_type:
            section["frequencies"] = [
                {
                    "value": entry.value,
                    "count": entry.count,
                    "percentage": entry.percentage,
                    "is_null": entry.is_null,
                }
                for entry in self.analyzer.analyze(profile.values)
            ]
            return section

        result = self.binner.bin(profile.values, display_width=display_width)
        if not isinstance(result, Histogram):
            section["no_data"] = result.reason
            issues.append(
                ProfilingIssue(
                    IssueKind.NO_DATA,
                    f"Column '{profile.label}': {result.reason}",
                    profile.label,
                )
            )
            return section

        if result.degenerate:
            issues.append(
                ProfilingIssue(
                    IssueKind.DEGENERATE_RANGE,
                    f"Column '{profile.label}' collapses to a single bin "
                    f"at {result.min_value}",
                    profile.label,
                )
            )
        section["histogram"] = {
            "bin_count": result.bin_count,
            "bin_width": result.bin_width,
            "bar_width": result.bar_width,
            "min": result.min_value,
            "max": result.max_value,
            "max_frequency": result.max_frequency,
            "total": result.total,
            "degenerate": result.degenerate,
            "bins": [
                {"range_start": b.range_start, "range_end": b.range_end, "count": b.count}
                for b in result.bins
            ],
        }
        return section

    def _build_statistics(self, profile: ColumnProfile) -> dict[str, Any]:
        """Statistics sub-section holding only the fields that are known."""
        statistics: dict[str, Any] = {}

        if profile.minimum is not None:
            statistics["min"] = profile.minimum

        if profile.maximum is not None:
            statistics["max"] = profile.maximum

        if profile.approx_distinct is not None:
            statistics["approx_distinct"] = profile.approx_distinct

        if profile.null_count is not None:
            statistics["null_count"] = profile.null_count

        return statistics


def save_report_to_yaml(report: dict[str, Any], yaml_path: str | Path) -> None:
    """Save a profiling report to a YAML file.

    Args:
        report: Report from ProfileReportBuilder.build_report
        yaml_path: Output YAML file path

    """
    import yaml

    yaml_file = Path(yaml_path)
    yaml_file.parent.mkdir(parents=True, exist_ok=True)

    with yaml_file.open("w", encoding="utf-8") as f:
        yaml.dump(
            report, f, default_flow_style=False, allow_unicode=True, sort_keys=False
        )


def load_report_from_yaml(yaml_path: str | Path) -> dict[str, Any]:
    """Load a profiling report from a YAML file.

    Raises:
        FileNotFoundError: If file doesn't exist

    """
    import yaml

    yaml_file = Path(yaml_path)
    if not yaml_file.exists():
        msg = f"Report file not found: {yaml_file}"
        raise FileNotFoundError(msg)

    with yaml_file.open(encoding="utf-8") as f:
        return yaml.safe_load(f)
