"""Pytest configuration for tableprofile tests."""

import pytest


@pytest.fixture
def house_schema():
    """Result schema of a small house price dataset."""
    return [{"name": "price"}, {"name": "area"}, {"name": "furnishing"}]


@pytest.fixture
def house_rows():
    """Result rows with a BIGINT, a DOUBLE and a VARCHAR column."""
    return [
        {"price": 13300000, "area": 7420.0, "furnishing": "furnished"},
        {"price": 12250000, "area": 8960.0, "furnishing": "furnished"},
        {"price": 12250000, "area": 9960.0, "furnishing": "semi-furnished"},
        {"price": 12215000, "area": 7500.0, "furnishing": "furnished"},
        {"price": 11410000, "area": None, "furnishing": None},
    ]


@pytest.fixture
def house_stats():
    """Statistics rows matching house_rows."""
    return [
        {
            "name": "price",
            "type": "BIGINT",
            "max": 13300000,
            "min": 11410000,
            "approx_unique": 4,
            "nulls": 0,
        },
        {
            "name": "area",
            "type": "DOUBLE",
            "max": "9960.0",
            "min": "7420.0",
            "approx_unique": 4,
            "nulls": 1,
        },
        {
            "name": "furnishing",
            "type": "VARCHAR",
            "max": "semi-furnished",
            "min": "furnished",
            "approx_unique": 2,
            "nulls": 1,
        },
    ]
