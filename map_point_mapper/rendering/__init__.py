"""Rendering support for parsed coordinate sequences.

- polylines: one shapely ``LineString`` per sequence
- region: framing region (lat/lon and Web Mercator) and the US preset
- serialization: WKT re-serialisation that parses back identically
"""

from map_point_mapper.rendering._errors import RegionError
from map_point_mapper.rendering.polylines import build_polyline, build_polylines
from map_point_mapper.rendering.region import compute_map_rect, compute_region, us_region
from map_point_mapper.rendering.serialization import to_wkt

__all__ = [
    "RegionError",
    "build_polyline",
    "build_polylines",
    "compute_map_rect",
    "compute_region",
    "to_wkt",
    "us_region",
]
