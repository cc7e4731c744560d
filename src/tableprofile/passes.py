"""Profiling passes against an injected query engine.

A profiling pass is keyed by a fingerprint of the query text and dataset
identity. Callers use the fingerprint to drop redundant passes; the engine
handle is passed in explicitly and its lifecycle stays with the caller.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from tableprofile.profiling.profiler import ColumnProfiler
from tableprofile.profiling.types import DatasetProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    """Materialized result set returned by the query engine."""

    schema: Sequence[Mapping[str, Any]]
    rows: Sequence[Mapping[str, Any]] = field(default_factory=tuple)


class QueryEngine(Protocol):
    """External query engine used to materialize profiling inputs."""

    def fetch_result(self, query: str) -> QueryResult: ...

    def fetch_statistics(self, query: str) -> Sequence[Mapping[str, Any]]: ...

    def count_rows(self, query: str) -> int: ...


@dataclass(frozen=True)
class ProfilingPass:
    """One profiling request for a query over a dataset."""

    query: str
    dataset_id: str

    @property
    def fingerprint(self) -> str:
        """Stable SHA-256 of the dataset identity and trimmed query text."""
        content = f"{self.dataset_id}\x00{self.query.strip()}"
        return hashlib.sha256(content.encode("utf-8")).hexdigest()


def run_profiling_pass(
    engine: QueryEngine,
    profiling_pass: ProfilingPass,
    profiler: ColumnProfiler | None = None,
) -> DatasetProfile:
    """Fetch result, statistics and row count, then profile the result.

    Args:
        engine: Query engine handle
        profiling_pass: Query and dataset to profile
        profiler: Profiler to use; a default one if None

    Returns:
        DatasetProfile for the query result

    """
    profiler = profiler or ColumnProfiler()
    logger.info(
        f"Running profiling pass {profiling_pass.fingerprint[:12]} "
        f"on dataset {profiling_pass.dataset_id}"
    )

    result = engine.fetch_result(profiling_pass.query)
    stats_rows = engine.fetch_statistics(profiling_pass.query)
    row_count = engine.count_rows(profiling_pass.query)

    return profiler.profile_dataset(
        result.rows,
        stats_rows,
        schema=result.schema,
        expected_row_count=row_count,
    )
