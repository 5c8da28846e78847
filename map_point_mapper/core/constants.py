"""Shared constants used across the package.

Centralises the order labels, map framing presets and projection codes
used by the parser, the rendering helpers and the HTTP entry point.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Coordinate order labels
# ---------------------------------------------------------------------------

LAT_LNG_LABEL: str = "Lat/Lng"
"""Display label when the first value of a pair is latitude (the default)."""

LNG_LAT_LABEL: str = "Lng/Lat"
"""Display label when the first value of a pair is longitude."""

# ---------------------------------------------------------------------------
# Continental US framing preset
# ---------------------------------------------------------------------------

US_CENTER: tuple[float, float] = (37.09024, -95.712891)
"""``(lat, lon)`` centre of the continental United States."""

US_NORTHEAST: tuple[float, float] = (49.38, -66.94)
"""``(lat, lon)`` north-east corner of the continental US framing."""

US_SOUTHWEST: tuple[float, float] = (25.82, -124.39)
"""``(lat, lon)`` south-west corner of the continental US framing."""

# ---------------------------------------------------------------------------
# Projections
# ---------------------------------------------------------------------------

WGS84_CRS: str = "EPSG:4326"
WEB_MERCATOR_CRS: str = "EPSG:3857"

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

DEFAULT_REGION_PADDING_PCT: float = 0.05
DEFAULT_MAX_INPUT_CHARS: int = 1_000_000
