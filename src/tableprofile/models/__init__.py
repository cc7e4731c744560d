"""Pydantic models for tableprofile."""

from tableprofile.models.settings import (
    ProfilerSettings,
    load_settings_from_yaml,
    save_settings_to_yaml,
)
from tableprofile.models.stats import ColumnStats

__all__ = [
    "ColumnStats",
    "ProfilerSettings",
    "load_settings_from_yaml",
    "save_settings_to_yaml",
]
