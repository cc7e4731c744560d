"""Type mapping utilities for declared column types."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

# Declared type names that route a column to the histogram path.
DEFAULT_NUMERIC_TYPES: frozenset[str] = frozenset({"BIGINT"})


class ColumnKind(str, Enum):
    """Rendering path for a profiled column."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


def is_numeric_declared_type(
    declared_type: str | None,
    numeric_types: Iterable[str] = DEFAULT_NUMERIC_TYPES,
) -> bool:
    """Check a declared type against the numeric type names.

    Matching is exact and case-sensitive. The declared type is authoritative,
    the column's values are never inspected.

    Args:
    ----
        declared_type: Type name reported by the query engine (e.g., "BIGINT")
        numeric_types: Type names treated as numeric

    Returns:
    -------
        True if the declared type is one of ``numeric_types``

    """
    if declared_type is None:
        return False
    return declared_type in frozenset(numeric_types)


def classify_declared_type(
    declared_type: str | None,
    numeric_types: Iterable[str] = DEFAULT_NUMERIC_TYPES,
) -> ColumnKind:
    """Map a declared type to its ColumnKind."""
    if is_numeric_declared_type(declared_type, numeric_types):
        return ColumnKind.NUMERIC
    return ColumnKind.CATEGORICAL


def map_to_json_type(declared_type: str | None) -> str:
    """Map a query engine type name to a JSON schema type.

    Args:
    ----
        declared_type: Engine type name (e.g., "VARCHAR", "BIGINT", "DOUBLE")

    Returns:
    -------
        JSON schema type (e.g., "string", "integer", "number")

    """
    if not declared_type:
        return "string"

    mapping = {
        "VARCHAR": "string",
        "TEXT": "string",
        "BIGINT": "integer",
        "HUGEINT": "integer",
        "INTEGER": "integer",
        "SMALLINT": "integer",
        "TINYINT": "integer",
        "UBIGINT": "integer",
        "DECIMAL": "number",
        "FLOAT": "number",
        "DOUBLE": "number",
        "BOOLEAN": "boolean",
        "DATE": "string",
        "TIMESTAMP": "string",
    }
    # DECIMAL(18,3) and similar carry parameters
    base_type = declared_type.split("(", 1)[0].strip().upper()
    return mapping.get(base_type, "string")
