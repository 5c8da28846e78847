"""Polyline construction for parsed coordinate sequences.

Each coordinate sequence becomes one shapely ``LineString`` in ``(lon,
lat)`` axis order, which is what a map overlay draws: a connected line
through the points in sequence order.  Degenerate sequences (a single
point doubled by the parser) are kept; they draw as a dot.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from map_point_mapper.rendering._errors import RegionError

if TYPE_CHECKING:
    from shapely.geometry import LineString

    from map_point_mapper.models.coordinate import CoordinateSequence

logger = logging.getLogger("map_point_mapper.rendering.polylines")


def build_polyline(sequence: CoordinateSequence) -> LineString:
    """Build a ``LineString`` for one coordinate sequence.

    Raises:
        RegionError: If the sequence has fewer than two points.
    """
    from shapely.geometry import LineString

    if len(sequence) < 2:
        msg = f"A polyline needs at least 2 points, got {len(sequence)}"
        raise RegionError(msg)
    return LineString([c.to_lon_lat() for c in sequence])


def build_polylines(sequences: list[CoordinateSequence]) -> list[LineString]:
    """Build one ``LineString`` per sequence, in order."""
    polylines = [build_polyline(seq) for seq in sequences]
    logger.debug("Built %d polyline(s)", len(polylines))
    return polylines
