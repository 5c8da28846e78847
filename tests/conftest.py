"""Shared pytest fixtures for the Map Point Mapper test suite."""

from __future__ import annotations

import pytest

from map_point_mapper.core.config import MapperConfig
from map_point_mapper.models.coordinate import Coordinate

# ---------------------------------------------------------------------------
# Sample geometry strings
# ---------------------------------------------------------------------------

POINT_WKT = "POINT(15 32)"
POLYGON_WKT = "POLYGON((10 20, 30 40, 50 60))"
MULTIPOLYGON_WKT = "MULTIPOLYGON(((1 2, 3 4)),((5 6, 7 8)))"

# Portland-ish city block, pasted over several lines with a trailing newline
MULTILINE_POLYGON_WKT = """
POLYGON ((
    -122.6765 45.5231,
    -122.6750 45.5231,
    -122.6750 45.5240,
    -122.6765 45.5240,
    -122.6765 45.5231
))
"""


@pytest.fixture()
def point_wkt() -> str:
    return POINT_WKT


@pytest.fixture()
def polygon_wkt() -> str:
    return POLYGON_WKT


@pytest.fixture()
def multipolygon_wkt() -> str:
    return MULTIPOLYGON_WKT


@pytest.fixture()
def multiline_polygon_wkt() -> str:
    return MULTILINE_POLYGON_WKT


# ---------------------------------------------------------------------------
# Parsed sequences
# ---------------------------------------------------------------------------


@pytest.fixture()
def two_lines() -> list[list[Coordinate]]:
    """Two lines: one near Seattle, one near Denver."""
    return [
        [
            Coordinate(latitude=47.60, longitude=-122.33),
            Coordinate(latitude=47.62, longitude=-122.35),
        ],
        [
            Coordinate(latitude=39.74, longitude=-104.99),
            Coordinate(latitude=39.70, longitude=-105.02),
            Coordinate(latitude=39.68, longitude=-104.95),
        ],
    ]


@pytest.fixture()
def default_config() -> MapperConfig:
    """Config with padding disabled so regions are exact."""
    return MapperConfig(region_padding_pct=0.0)
