"""Statistics row model.

One row per source column, as produced by the external statistics query
(e.g. a SUMMARIZE or unpivot aggregate).
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from tableprofile.normalize import normalize_cell


class ColumnStats(BaseModel):
    """Statistics reported by the query engine for one column."""

    name: str = Field(
        validation_alias=AliasChoices("name", "column_name"),
        description="Column name, matched case-sensitively",
    )
    column_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("type", "column_type"),
        description="Declared column type (e.g., BIGINT, VARCHAR)",
    )
    maximum: str | None = Field(
        default=None,
        validation_alias=AliasChoices("max", "maximum"),
        description="Maximum value as displayed text",
    )
    minimum: str | None = Field(
        default=None,
        validation_alias=AliasChoices("min", "minimum"),
        description="Minimum value as displayed text",
    )
    approx_distinct: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices(
            "approx_unique", "approxDistinct", "approx_distinct"
        ),
        description="Approximate distinct value count",
    )
    null_count: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("nulls", "nullCount", "null_count"),
        description="Number of null values",
    )

    @field_validator("maximum", "minimum", mode="before")
    @classmethod
    def stringify_bound(cls, v: Any) -> str | None:
        """Render min/max as text; integers never pass through float."""
        if v is None or isinstance(v, str):
            return v
        return str(normalize_cell(v))

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "price",
                "type": "BIGINT",
                "max": "7700000",
                "min": "1750000",
                "approx_unique": 219,
                "nulls": 0,
            }
        },
    )


__all__ = ["ColumnStats"]
