"""Data models and schemas.

Defines the data structures used throughout the mapper:
- Coordinate / CoordinateSequence: parsed points and lines
- OrderPreference: caller's lat/lng order toggle
- ParseOutcome: success-or-failure parse result
- MapRegion / MapRect: framing regions for parsed lines
- ParseResponse: HTTP response schema
"""

from map_point_mapper.models.coordinate import (
    Coordinate,
    CoordinateSequence,
    ModelValidationError,
    OrderPreference,
)
from map_point_mapper.models.outcome import ParseOutcome
from map_point_mapper.models.region import MapRect, MapRegion

__all__ = [
    "Coordinate",
    "CoordinateSequence",
    "MapRect",
    "MapRegion",
    "ModelValidationError",
    "OrderPreference",
    "ParseOutcome",
]
