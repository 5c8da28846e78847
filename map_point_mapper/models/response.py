"""Pydantic response schema for the parse endpoint.

The response carries everything a map display needs to draw the parsed
input: the coordinate sequences, the region that frames them (both in
degrees and as a projected Web Mercator rectangle), and a WKT
re-serialisation that parses back to the same coordinates.

All coordinate pairs are ``[lat, lon]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from map_point_mapper.models.coordinate import CoordinateSequence
    from map_point_mapper.models.region import MapRect, MapRegion

SCHEMA_VERSION = "parse-geometry-v1"


class RegionPayload(BaseModel):
    """Latitude/longitude framing region.

    Attributes:
        min_lat: Southern edge in degrees.
        min_lon: Western edge in degrees.
        max_lat: Northern edge in degrees.
        max_lon: Eastern edge in degrees.
        center: Region centre as ``[lat, lon]``.
        lat_span: Latitude extent in degrees.
        lon_span: Longitude extent in degrees.
    """

    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float
    center: list[float] = Field(default_factory=list)
    lat_span: float = 0.0
    lon_span: float = 0.0


class MapRectPayload(BaseModel):
    """Projected bounding rectangle in Web Mercator metres."""

    x: float
    y: float
    width: float
    height: float


class ParseResponse(BaseModel):
    """Successful parse result.

    Attributes:
        schema_version: Response schema identifier.
        order_label: Order preference the caller sent (``"Lat/Lng"`` or
            ``"Lng/Lat"``).  Tagged input is always read longitude-first
            regardless of this value.
        sequences: One ``[[lat, lon], ...]`` list per drawable line.
        sequence_count: Number of sequences.
        point_count: Number of coordinates across all sequences.
        region: Padded lat/lon region framing every sequence.
        map_rect: Unpadded Web Mercator rectangle framing every sequence.
        wkt: WKT re-serialisation of the sequences.
    """

    schema_version: str = SCHEMA_VERSION
    order_label: str
    sequences: list[list[list[float]]] = Field(default_factory=list)
    sequence_count: int = 0
    point_count: int = 0
    region: RegionPayload
    map_rect: MapRectPayload
    wkt: str = ""

    @classmethod
    def build(
        cls,
        sequences: list[CoordinateSequence],
        *,
        region: MapRegion,
        map_rect: MapRect,
        wkt: str,
        order_label: str,
    ) -> ParseResponse:
        """Assemble a response from parser and rendering outputs."""
        return cls(
            order_label=order_label,
            sequences=[[c.to_lat_lon() for c in seq] for seq in sequences],
            sequence_count=len(sequences),
            point_count=sum(len(seq) for seq in sequences),
            region=RegionPayload(**region.to_dict()),
            map_rect=MapRectPayload(**map_rect.to_dict()),
            wkt=wkt,
        )
