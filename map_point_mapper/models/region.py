"""Framing regions for parsed lines.

- ``MapRegion``: a latitude/longitude bounding region with centre and span
- ``MapRect``: a projected (Web Mercator) bounding rectangle in metres

Both are the output of ``map_point_mapper.rendering.region`` and tell a
map display what to show so that every parsed line is visible.
"""

from __future__ import annotations

from dataclasses import dataclass

from map_point_mapper.models.coordinate import Coordinate, ModelValidationError


@dataclass(frozen=True, slots=True)
class MapRegion:
    """Latitude/longitude bounding region.

    Attributes:
        min_lat: Southern edge in degrees.
        min_lon: Western edge in degrees.
        max_lat: Northern edge in degrees.
        max_lon: Eastern edge in degrees.
    """

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    def __post_init__(self) -> None:
        if self.min_lat > self.max_lat:
            raise ModelValidationError("MapRegion", "min_lat", self.min_lat, "must be <= max_lat")
        if self.min_lon > self.max_lon:
            raise ModelValidationError("MapRegion", "min_lon", self.min_lon, "must be <= max_lon")

    @property
    def center(self) -> Coordinate:
        # min + half-span stays finite where (min + max) / 2 would overflow
        return Coordinate(
            latitude=self.min_lat + self.lat_span / 2,
            longitude=self.min_lon + self.lon_span / 2,
        )

    @property
    def lat_span(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lon_span(self) -> float:
        return self.max_lon - self.min_lon

    def padded(self, pct: float) -> MapRegion:
        """Return a region grown by *pct* of each span on every side.

        Raises:
            ModelValidationError: If *pct* is negative.
        """
        if pct < 0:
            raise ModelValidationError("MapRegion", "padding", pct, "must be >= 0")
        dlat = self.lat_span * pct
        dlon = self.lon_span * pct
        return MapRegion(
            min_lat=self.min_lat - dlat,
            min_lon=self.min_lon - dlon,
            max_lat=self.max_lat + dlat,
            max_lon=self.max_lon + dlon,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise for JSON transport."""
        return {
            "min_lat": self.min_lat,
            "min_lon": self.min_lon,
            "max_lat": self.max_lat,
            "max_lon": self.max_lon,
            "center": self.center.to_lat_lon(),
            "lat_span": self.lat_span,
            "lon_span": self.lon_span,
        }


@dataclass(frozen=True, slots=True)
class MapRect:
    """Projected bounding rectangle (Web Mercator, metres).

    Attributes:
        x: Origin easting (minimum x).
        y: Origin northing (minimum y).
        width: Extent along x.
        height: Extent along y.
    """

    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> dict[str, float]:
        """Serialise for JSON transport."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}
