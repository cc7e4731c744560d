"""Build column profiles from a materialized query result and its statistics."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from tableprofile.models.settings import ProfilerSettings
from tableprofile.models.stats import ColumnStats
from tableprofile.normalize import is_scalar_cell, normalize_cell
from tableprofile.profiling.types import (
    ColumnProfile,
    DatasetProfile,
    IssueKind,
    ProfilingIssue,
)
from tableprofile.type_mappings import classify_declared_type


class ProfilingError(Exception):
    """Raised when inputs violate the result set or statistics contract."""

    def __init__(self, message: str, column: str | None = None) -> None:
        super().__init__(message)
        self.column = column


class ColumnProfiler:
    """Profiles every column of a result set.

    Statistics come from the external statistics query and are matched to
    result columns by exact name. Missing or mismatched statistics never stop
    profiling; they are reported as ProfilingIssue records instead.
    """

    def __init__(self, settings: ProfilerSettings | None = None) -> None:
        """Initialize the profiler.

        Args:
        ----
            settings: Profiler settings. If None, uses defaults.

        """
        self.settings = settings or ProfilerSettings()
        self.logger = logging.getLogger(self.__class__.__name__)

    def profile(
        self,
        result_rows: Sequence[Mapping[str, Any]],
        stats_rows: Iterable[Mapping[str, Any]],
        schema: Sequence[Mapping[str, Any] | str] | None = None,
    ) -> list[ColumnProfile]:
        """Profile each result column in column order.

        Args:
        ----
            result_rows: Row mappings from column name to raw cell
            stats_rows: One statistics mapping per source column
            schema: Result columns in order, as ``{"name": ...}`` mappings or
                names. Defaults to the key order of the first row.

        Returns:
        -------
            One ColumnProfile per column; empty when there are no rows

        Raises:
        ------
            ProfilingError: If a row, cell or statistics row is malformed

        """
        return list(self.profile_dataset(result_rows, stats_rows, schema).columns)

    def profile_dataset(
        self,
        result_rows: Sequence[Mapping[str, Any]],
        stats_rows: Iterable[Mapping[str, Any]],
        schema: Sequence[Mapping[str, Any] | str] | None = None,
        expected_row_count: int | None = None,
    ) -> DatasetProfile:
        """Profile a result set and collect non-fatal issues.

        Args:
        ----
            result_rows: Row mappings from column name to raw cell
            stats_rows: One statistics mapping per source column
            schema: Result columns in order (see ``profile``)
            expected_row_count: Row count reported by the engine, if known

        Returns:
        -------
            DatasetProfile with the column profiles and recorded issues

        Raises:
        ------
            ProfilingError: If a row, cell or statistics row is malformed

        """
        stats = self._index_stats(stats_rows)

        if not result_rows:
            self.logger.info("Result set is empty; no columns profiled")
            return DatasetProfile(columns=(), row_count=0)

        for position, row in enumerate(result_rows):
            if not isinstance(row, Mapping):
                msg = f"Row {position} is not a mapping: {type(row).__name__}"
                raise ProfilingError(msg)

        columns = self._column_names(result_rows, schema)
        issues: list[ProfilingIssue] = []

        if len(stats) != len(columns):
            message = (
                f"Statistics cover {len(stats)} columns but the result has "
                f"{len(columns)}"
            )
            self.logger.warning(message)
            issues.append(ProfilingIssue(IssueKind.SCHEMA_MISMATCH, message))

        if expected_row_count is not None and expected_row_count != len(result_rows):
            message = (
                f"Engine reported {expected_row_count} rows but the result has "
                f"{len(result_rows)}"
            )
            self.logger.warning(message)
            issues.append(ProfilingIssue(IssueKind.SCHEMA_MISMATCH, message))

        profiles = []
        for name in columns:
            column_stats = stats.get(name)
            if column_stats is None:
                message = f"No statistics for column '{name}'"
                self.logger.warning(message)
                issues.append(ProfilingIssue(IssueKind.MISSING_STATS, message, name))
            profiles.append(
                self._build_profile(name, result_rows, column_stats)
            )

        self.logger.info(
            f"Profiled {len(profiles)} columns over {len(result_rows)} rows "
            f"({len(issues)} issues)"
        )
        return DatasetProfile(
            columns=tuple(profiles),
            row_count=len(result_rows),
            issues=tuple(issues),
        )

    def _build_profile(
        self,
        name: str,
        result_rows: Sequence[Mapping[str, Any]],
        column_stats: ColumnStats | None,
    ) -> ColumnProfile:
        """Build the profile for a single column.

        Args:
        ----
            name: Column name
            result_rows: Row mappings
            column_stats: Matched statistics, or None

        Returns:
        -------
            ColumnProfile with normalized values in row order

        """
        values = []
        for position, row in enumerate(result_rows):
            cell = row.get(name)
            if not is_scalar_cell(cell):
                msg = (
                    f"Column '{name}' row {position} holds a non-scalar "
                    f"{type(cell).__name__}"
                )
                raise ProfilingError(msg, column=name)
            values.append(normalize_cell(cell))

        if column_stats is None:
            return ColumnProfile(
                label=name,
                kind=classify_declared_type(None, self.settings.numeric_types),
                values=tuple(values),
            )

        profile = ColumnProfile(
            label=name,
            kind=classify_declared_type(
                column_stats.column_type, self.settings.numeric_types
            ),
            values=tuple(values),
            declared_type=column_stats.column_type,
            maximum=column_stats.maximum,
            minimum=column_stats.minimum,
            approx_distinct=column_stats.approx_distinct,
            null_count=column_stats.null_count,
            has_stats=True,
        )
        self.logger.debug(
            f"Column {name}: {profile.kind.value} "
            f"(type={profile.declared_type}, nulls={profile.null_count})"
        )
        return profile

    def _index_stats(
        self, stats_rows: Iterable[Mapping[str, Any]]
    ) -> dict[str, ColumnStats]:
        """Validate statistics rows and index them by column name."""
        stats: dict[str, ColumnStats] = {}
        for position, row in enumerate(stats_rows):
            try:
                column_stats = ColumnStats.model_validate(row)
            except ValidationError as e:
                msg = f"Invalid statistics row {position}: {e}"
                raise ProfilingError(msg) from e
            if column_stats.name in stats:
                self.logger.debug(
                    f"Duplicate statistics for column '{column_stats.name}'; "
                    "keeping the first"
                )
                continue
            stats[column_stats.name] = column_stats
        return stats

    def _column_names(
        self,
        result_rows: Sequence[Mapping[str, Any]],
        schema: Sequence[Mapping[str, Any] | str] | None,
    ) -> list[str]:
        """Resolve result column names in order."""
        if schema is None:
            return list(result_rows[0].keys())

        names = []
        for field in schema:
            name = field if isinstance(field, str) else field.get("name")
            if not isinstance(name, str):
                msg = f"Schema field without a name: {field!r}"
                raise ProfilingError(msg)
            if name in names:
                self.logger.debug(f"Skipping repeated schema field '{name}'")
                continue
            names.append(name)
        return names


def profile_columns(
    result_rows: Sequence[Mapping[str, Any]],
    stats_rows: Iterable[Mapping[str, Any]],
    schema: Sequence[Mapping[str, Any] | str] | None = None,
) -> list[ColumnProfile]:
    """Profile a result set with the default settings."""
    return ColumnProfiler().profile(result_rows, stats_rows, schema)
