"""Framing regions for parsed lines.

Computes what a map display must show so that every parsed line is
visible:

- ``compute_region``: lat/lon bounding region across all coordinates,
  optionally padded by a fraction of its span on each side
- ``compute_map_rect``: Web Mercator rectangle that is the union of each
  line's own projected bounding rectangle
- ``us_region``: fixed continental-US framing preset

Latitudes are clamped to the Web Mercator limit before projecting, as
the projection is undefined at the poles.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from map_point_mapper.core.constants import (
    US_CENTER,
    US_NORTHEAST,
    US_SOUTHWEST,
    WEB_MERCATOR_CRS,
    WGS84_CRS,
)
from map_point_mapper.models.region import MapRect, MapRegion
from map_point_mapper.rendering._errors import RegionError
from map_point_mapper.rendering.polylines import build_polylines

if TYPE_CHECKING:
    from map_point_mapper.models.coordinate import CoordinateSequence

logger = logging.getLogger("map_point_mapper.rendering.region")

# Web Mercator latitude limit in degrees
MAX_MERCATOR_LAT = 85.05112878


def compute_region(
    sequences: list[CoordinateSequence],
    *,
    padding_pct: float = 0.0,
) -> MapRegion:
    """Compute the lat/lon region that contains every coordinate.

    Args:
        sequences: Parsed coordinate sequences.
        padding_pct: Fraction of the span to add on every side.

    Returns:
        A ``MapRegion`` (padded when *padding_pct* > 0).

    Raises:
        RegionError: If there are no coordinates to frame, or the
            (padded) bounds or spans are not finite.
    """
    coords = [c for seq in sequences for c in seq]
    if not coords:
        msg = "Cannot compute a region without coordinates"
        raise RegionError(msg)

    lats = [c.latitude for c in coords]
    lons = [c.longitude for c in coords]
    region = MapRegion(
        min_lat=min(lats),
        min_lon=min(lons),
        max_lat=max(lats),
        max_lon=max(lons),
    )
    if padding_pct:
        region = region.padded(padding_pct)

    _ensure_finite(
        "region",
        region.min_lat,
        region.min_lon,
        region.max_lat,
        region.max_lon,
        region.lat_span,
        region.lon_span,
    )

    logger.debug(
        "Region computed | lat=[%.6f, %.6f] | lon=[%.6f, %.6f] | padding=%.2f",
        region.min_lat,
        region.max_lat,
        region.min_lon,
        region.max_lon,
        padding_pct,
    )
    return region


def compute_map_rect(sequences: list[CoordinateSequence]) -> MapRect:
    """Compute the Web Mercator rectangle framing every line.

    Each line is projected and bounded on its own; the result spans
    from the smallest line origin to the largest line extent.

    Raises:
        RegionError: If *sequences* is empty, or a projected bound or
            extent is not finite.
    """
    if not sequences:
        msg = "Cannot compute a map rect without lines"
        raise RegionError(msg)

    from pyproj import Transformer

    to_mercator = Transformer.from_crs(WGS84_CRS, WEB_MERCATOR_CRS, always_xy=True)

    min_x = min_y = float("inf")
    max_x = max_y = float("-inf")
    for line in build_polylines(sequences):
        lons, lats = line.xy
        xs, ys = to_mercator.transform(list(lons), [_clamp_lat(lat) for lat in lats])
        min_x = min(min_x, *xs)
        min_y = min(min_y, *ys)
        max_x = max(max_x, *xs)
        max_y = max(max_y, *ys)

    width = max_x - min_x
    height = max_y - min_y
    _ensure_finite("map rect", min_x, min_y, width, height)
    return MapRect(x=min_x, y=min_y, width=width, height=height)


def us_region() -> MapRegion:
    """Return the continental-US framing preset.

    Centred on ``US_CENTER`` with the span between ``US_SOUTHWEST`` and
    ``US_NORTHEAST``.
    """
    lat_delta = US_NORTHEAST[0] - US_SOUTHWEST[0]
    lon_delta = US_NORTHEAST[1] - US_SOUTHWEST[1]
    center_lat, center_lon = US_CENTER
    return MapRegion(
        min_lat=center_lat - lat_delta / 2,
        min_lon=center_lon - lon_delta / 2,
        max_lat=center_lat + lat_delta / 2,
        max_lon=center_lon + lon_delta / 2,
    )


def _clamp_lat(lat: float) -> float:
    return max(-MAX_MERCATOR_LAT, min(MAX_MERCATOR_LAT, lat))


def _ensure_finite(what: str, *values: float) -> None:
    if not all(math.isfinite(v) for v in values):
        msg = f"Cannot frame lines: {what} is not finite"
        raise RegionError(msg)
