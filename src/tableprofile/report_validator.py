"""Profiling Report Validation

Validates profiling reports against a JSON Schema so that rendering
consumers can rely on their structure.
"""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema import ValidationError

_BIN_SCHEMA = {
    "type": "object",
    "required": ["range_start", "range_end", "count"],
    "properties": {
        "range_start": {"type": "number"},
        "range_end": {"type": "number"},
        "count": {"type": "integer", "minimum": 0},
    },
}

_HISTOGRAM_SCHEMA = {
    "type": "object",
    "required": ["bin_count", "bar_width", "min", "max", "total", "bins"],
    "properties": {
        "bin_count": {"type": "integer", "minimum": 1},
        "bin_width": {"type": "number", "exclusiveMinimum": 0},
        "bar_width": {"type": "number", "exclusiveMinimum": 0},
        "min": {"type": "number"},
        "max": {"type": "number"},
        "max_frequency": {"type": "integer", "minimum": 0},
        "total": {"type": "integer", "minimum": 1},
        "degenerate": {"type": "boolean"},
        "bins": {"type": "array", "minItems": 1, "items": _BIN_SCHEMA},
    },
}

_FREQUENCY_SCHEMA = {
    "type": "object",
    "required": ["value", "count", "percentage"],
    "properties": {
        "value": {"type": "string"},
        "count": {"type": "integer", "minimum": 1},
        "percentage": {"type": "string", "pattern": r"^\d+\.\d{2}%$"},
        "is_null": {"type": "boolean"},
    },
}

_COLUMN_SCHEMA = {
    "type": "object",
    "required": ["label", "kind", "row_count", "exact_distinct"],
    "properties": {
        "label": {"type": "string"},
        "kind": {"enum": ["numeric", "categorical"]},
        "declared_type": {"type": ["string", "null"]},
        "json_type": {"type": "string"},
        "row_count": {"type": "integer", "minimum": 0},
        "exact_distinct": {"type": "integer", "minimum": 0},
        "statistics": {
            "type": "object",
            "properties": {
                "min": {"type": "string"},
                "max": {"type": "string"},
                "approx_distinct": {"type": "integer", "minimum": 0},
                "null_count": {"type": "integer", "minimum": 0},
            },
            "additionalProperties": False,
        },
        "frequencies": {"type": "array", "items": _FREQUENCY_SCHEMA},
        "histogram": _HISTOGRAM_SCHEMA,
        "no_data": {"type": "string"},
    },
}

PROFILE_REPORT_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Profiling report",
    "type": "object",
    "required": ["profiling_metadata", "columns", "issues"],
    "properties": {
        "profiling_metadata": {
            "type": "object",
            "required": ["profiled_at", "tool", "version", "row_count"],
            "properties": {
                "profiled_at": {"type": "string"},
                "tool": {"type": "string"},
                "version": {"type": "string"},
                "row_count": {"type": "integer", "minimum": 0},
                "column_count": {"type": "integer", "minimum": 0},
                "fingerprint": {"type": ["string", "null"]},
            },
        },
        "columns": {"type": "array", "items": _COLUMN_SCHEMA},
        "issues": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["kind", "message"],
                "properties": {
                    "kind": {
                        "enum": [
                            "missing_stats",
                            "schema_mismatch",
                            "no_data",
                            "degenerate_range",
                        ]
                    },
                    "column": {"type": ["string", "null"]},
                    "message": {"type": "string"},
                },
            },
        },
    },
}


class ReportValidationError(Exception):
    """Custom exception for profiling report validation errors."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ReportValidator:
    """Validates profiling reports against the report JSON Schema."""

    def __init__(self, schema: dict[str, Any] | None = None) -> None:
        """Initialize validator with schema.

        Args:
        ----
            schema: JSON Schema dictionary. If None, uses PROFILE_REPORT_SCHEMA.

        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.schema = schema or PROFILE_REPORT_SCHEMA
        self.validator = jsonschema.Draft7Validator(self.schema)

    def validate_data(
        self,
        report: dict[str, Any],
        raise_on_error: bool = True,
        source_name: str = "profiling report",
    ) -> bool:
        """Validate a report dictionary.

        Args:
        ----
            report: Report as dictionary
            raise_on_error: Whether to raise exception on validation errors
            source_name: Name/path for error messages

        Returns:
        -------
            True if valid, False if invalid (when raise_on_error=False)

        Raises:
        ------
            ReportValidationError: If validation fails and raise_on_error=True

        """
        errors = []
        for error in sorted(self.validator.iter_errors(report), key=str):
            message = error.message
            if error.absolute_path:
                message += f" at path: {'.'.join(str(p) for p in error.absolute_path)}"
            errors.append(message)

        if not errors:
            try:
                self._validate_consistency(report)
            except ValidationError as e:
                errors.append(e.message)

        if not errors:
            self.logger.debug(f"Report validation passed for {source_name}")
            return True

        error_msg = f"Schema validation failed for {source_name}: {errors[0]}"
        if raise_on_error:
            raise ReportValidationError(error_msg, errors)
        self.logger.error(error_msg)
        return False

    def validate_file(self, report_path: Path, raise_on_error: bool = True) -> bool:
        """Validate a report stored as YAML or JSON.

        Raises:
        ------
            ReportValidationError: If the file cannot be parsed or is invalid
                and raise_on_error=True
            FileNotFoundError: If file doesn't exist

        """
        if not report_path.exists():
            msg = f"Report file not found: {report_path}"
            raise FileNotFoundError(msg)

        try:
            with report_path.open(encoding="utf-8") as f:
                if report_path.suffix == ".json":
                    report = json.load(f)
                else:
                    report = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            error_msg = f"Unreadable report {report_path}: {e}"
            if raise_on_error:
                raise ReportValidationError(error_msg) from e
            self.logger.exception(error_msg)
            return False

        return self.validate_data(report, raise_on_error, str(report_path))

    def _validate_consistency(self, report: dict[str, Any]) -> None:
        """Cross-field checks the schema cannot express."""
        for column in report["columns"]:
            label = column.get("label")
            row_count = column.get("row_count")

            frequencies = column.get("frequencies")
            if frequencies is not None and isinstance(row_count, int):
                total = sum(entry.get("count", 0) for entry in frequencies)
                if total != row_count:
                    msg = (
                        f"Frequencies of column '{label}' sum to {total}, "
                        f"expected {row_count}"
                    )
                    raise ValidationError(msg)

            histogram = column.get("histogram")
            if histogram is not None:
                bins = histogram.get("bins") or []
                if len(bins) != histogram.get("bin_count"):
                    msg = f"Histogram of column '{label}' has {len(bins)} bins"
                    raise ValidationError(msg)
                counted = sum(b.get("count", 0) for b in bins)
                if counted != histogram.get("total"):
                    msg = (
                        f"Histogram of column '{label}' counts {counted} values, "
                        f"expected {histogram.get('total')}"
                    )
                    raise ValidationError(msg)
