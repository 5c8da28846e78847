"""Coordinate value types produced by the geometry string parser.

- ``Coordinate``: a single geographic point in degrees
- ``CoordinateSequence``: ordered points of one drawable line or ring
- ``OrderPreference``: which value of a pair the caller expects first

Design notes:
- All models are frozen dataclasses; each parse builds fresh values and
  hands them to the caller.
- No range clamping: malformed input may yield latitudes outside
  [-90, 90] or longitudes outside [-180, 180].  Only finiteness is
  enforced.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from map_point_mapper.core.constants import LAT_LNG_LABEL, LNG_LAT_LABEL
from map_point_mapper.core.exceptions import MapperError

# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ModelValidationError(ValueError, MapperError):
    """Raised when a domain model is constructed with invalid field values.

    Attributes:
        model: Name of the model class that failed validation.
        field_name: The field that violated the invariant.
        value: The invalid value.
    """

    default_stage = "model_validation"
    default_code = "MODEL_VALIDATION_FAILED"

    def __init__(self, model: str, field_name: str, value: object, message: str) -> None:
        self.model = model
        self.field_name = field_name
        self.value = value
        formatted = f"{model}.{field_name}={value!r}: {message}"
        MapperError.__init__(self, formatted)


# ---------------------------------------------------------------------------
# Coordinate
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A single geographic point.

    Attributes:
        latitude: Latitude in degrees (not clamped).
        longitude: Longitude in degrees (not clamped).
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        for name in ("latitude", "longitude"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ModelValidationError("Coordinate", name, value, "must be finite")

    def to_lat_lon(self) -> list[float]:
        """Return ``[lat, lon]`` for JSON transport."""
        return [self.latitude, self.longitude]

    def to_lon_lat(self) -> tuple[float, float]:
        """Return ``(lon, lat)``, the x/y axis order used by shapely and WKT."""
        return (self.longitude, self.latitude)


CoordinateSequence = list[Coordinate]
"""One drawable line or ring; order defines how points are connected."""


# ---------------------------------------------------------------------------
# Order preference
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class OrderPreference:
    """Caller-chosen order of values inside a coordinate pair.

    Only consulted for input that is not geometry-tagged; tagged input
    always parses longitude-first.

    Attributes:
        longitude_first: ``True`` when the first value of a pair is longitude.
    """

    longitude_first: bool = False

    @property
    def label(self) -> str:
        """``"Lng/Lat"`` when longitude-first, otherwise ``"Lat/Lng"``."""
        return LNG_LAT_LABEL if self.longitude_first else LAT_LNG_LABEL

    def toggled(self) -> OrderPreference:
        """Return the opposite preference."""
        return OrderPreference(longitude_first=not self.longitude_first)

    @classmethod
    def from_label(cls, label: str) -> OrderPreference:
        """Build from a display label (case-insensitive).

        Raises:
            ModelValidationError: If *label* is not a known order label.
        """
        normalised = label.strip().lower()
        if normalised == LNG_LAT_LABEL.lower():
            return cls(longitude_first=True)
        if normalised == LAT_LNG_LABEL.lower():
            return cls(longitude_first=False)
        raise ModelValidationError(
            "OrderPreference",
            "label",
            label,
            f"must be {LAT_LNG_LABEL!r} or {LNG_LAT_LABEL!r}",
        )
