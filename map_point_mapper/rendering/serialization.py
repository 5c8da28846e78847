"""WKT re-serialisation of parsed coordinate sequences.

Writes sequences back out in the same shape the parser reads, so that
parsing the output again yields the same coordinates point for point:

- one sequence   -> ``LINESTRING(lon lat, lon lat, ...)``
- several        -> ``MULTILINESTRING((lon lat, ...),(lon lat, ...))``

Floats are written with ``repr`` so they round-trip exactly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from map_point_mapper.rendering._errors import RegionError

if TYPE_CHECKING:
    from map_point_mapper.models.coordinate import CoordinateSequence

LINESTRING_TAG = "LINESTRING"
MULTILINESTRING_TAG = "MULTILINESTRING"


def format_sequence(sequence: CoordinateSequence) -> str:
    """Format one sequence as ``lon lat, lon lat, ...``."""
    return ", ".join(f"{c.longitude!r} {c.latitude!r}" for c in sequence)


def to_wkt(sequences: list[CoordinateSequence], *, tag: str | None = None) -> str:
    """Serialise sequences to WKT-like text.

    Args:
        sequences: Parsed coordinate sequences.
        tag: Geometry keyword to use.  Defaults to ``LINESTRING`` for one
            sequence and ``MULTILINESTRING`` for several.  A tag
            containing ``MULTI`` always produces the nested form.

    Raises:
        RegionError: If *sequences* is empty.
    """
    if not sequences:
        msg = "Cannot serialise an empty set of sequences"
        raise RegionError(msg, stage="serialize", code="NOTHING_TO_SERIALIZE")

    if tag is None:
        tag = LINESTRING_TAG if len(sequences) == 1 else MULTILINESTRING_TAG

    if "MULTI" in tag:
        body = ",".join(f"({format_sequence(seq)})" for seq in sequences)
        return f"{tag}({body})"

    if len(sequences) > 1:
        msg = f"Tag {tag!r} cannot hold {len(sequences)} sequences; use a MULTI* tag"
        raise RegionError(msg, stage="serialize", code="TAG_MISMATCH")
    return f"{tag}({format_sequence(sequences[0])})"
