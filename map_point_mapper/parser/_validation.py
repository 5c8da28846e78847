"""Result validation for geometry parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_point_mapper.core.exceptions import ValidationError
from map_point_mapper.parser._constants import INVALID_GEOMETRY_MESSAGE

if TYPE_CHECKING:
    from map_point_mapper.models.coordinate import CoordinateSequence


class InvalidGeometryStringError(ValidationError):
    """Raised when an input string yields no coordinate sequences."""

    default_stage = "parse_geometry"
    default_code = "INVALID_GEOMETRY_STRING"

    def __init__(self, message: str = INVALID_GEOMETRY_MESSAGE, **kwargs: object) -> None:
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


def drop_empty_sequences(sequences: list[CoordinateSequence]) -> list[CoordinateSequence]:
    """Return *sequences* without the empty ones, order preserved."""
    return [seq for seq in sequences if seq]


def ensure_sequences(sequences: list[CoordinateSequence]) -> list[CoordinateSequence]:
    """Return *sequences* unchanged if non-empty.

    Raises:
        InvalidGeometryStringError: If there is nothing to draw.
    """
    if not sequences:
        raise InvalidGeometryStringError()
    return sequences
