"""Profiler settings model with YAML persistence."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tableprofile.type_mappings import DEFAULT_NUMERIC_TYPES


class ProfilerSettings(BaseModel):
    """Tunable constants for profiling and histogram binning."""

    numeric_types: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_NUMERIC_TYPES),
        min_length=1,
        description="Declared type names rendered as histograms (exact match)",
    )
    min_bins: int = Field(default=5, ge=1, description="Lower bound on bin count")
    max_bins: int = Field(default=15, ge=1, description="Upper bound on bin count")
    min_bar_width: float = Field(
        default=5.0, gt=0, description="Smallest bar width in display units"
    )
    few_bins_threshold: int = Field(
        default=5,
        ge=1,
        description="Bin counts at or below this use the wider bar divisor",
    )
    few_bins_divisor: float = Field(
        default=1.5, gt=0, description="Bar width divisor for few bins"
    )
    many_bins_divisor: float = Field(
        default=2.0, gt=0, description="Bar width divisor for many bins"
    )
    null_label: str = Field(
        default="null", description="Display value of the null frequency bucket"
    )

    @field_validator("numeric_types")
    @classmethod
    def reject_blank_types(cls, v) -> list[str]:
        """Reject blank type names."""
        if any(not name.strip() for name in v):
            msg = "numeric_types must not contain blank names"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def bins_in_order(self) -> "ProfilerSettings":
        """Validate that min_bins does not exceed max_bins."""
        if self.min_bins > self.max_bins:
            msg = f"min_bins ({self.min_bins}) exceeds max_bins ({self.max_bins})"
            raise ValueError(msg)
        return self

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )


def load_settings_from_yaml(yaml_path: str | Path) -> ProfilerSettings:
    """Load and validate profiler settings from a YAML file.

    An empty file yields the defaults.

    Args:
        yaml_path: Path to settings YAML file

    Returns:
        Validated ProfilerSettings

    Raises:
        ValidationError: If the settings are invalid
        FileNotFoundError: If file doesn't exist

    """
    import yaml

    yaml_file = Path(yaml_path)
    if not yaml_file.exists():
        msg = f"Settings file not found: {yaml_file}"
        raise FileNotFoundError(msg)

    with yaml_file.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return ProfilerSettings(**data)


def save_settings_to_yaml(settings: ProfilerSettings, yaml_path: str | Path) -> None:
    """Save profiler settings to a YAML file.

    Args:
        settings: Settings to save
        yaml_path: Output YAML file path

    """
    import yaml

    yaml_file = Path(yaml_path)
    yaml_file.parent.mkdir(parents=True, exist_ok=True)

    with yaml_file.open("w", encoding="utf-8") as f:
        yaml.dump(
            settings.model_dump(),
            f,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )


__all__ = ["ProfilerSettings", "load_settings_from_yaml", "save_settings_to_yaml"]
