"""Geometry string parser as a composable pipeline.

Converts loosely formatted, WKT-like text into ordered coordinate
sequences suitable for drawing as polylines.  There is no formal
grammar: every stage is a permissive heuristic that degrades to fewer
points instead of raising, and the only failure is "nothing to draw".

The parsing pipeline is split into focused stages:
- **_detection**: tagged/untagged classification, MULTI detection, order
- **_normalization**: wrapper stripping, chunk splitting, tokenising
- **_coercion**: permissive float coercion, pairing, coordinate building
- **_validation**: empty-result filtering and the single error kind

Behaviour worth knowing:
- Tagged input (starting with a word character) is always read
  longitude-first; the caller's order preference only applies to
  untagged input, which currently never yields coordinates.  A bare
  ``"32 15, 33 16"`` list therefore fails: it has no ``KEYWORD(...)``
  body.  This looks unintended but is kept as-is.
- An odd trailing token is silently dropped.
- A chunk with exactly one point is doubled into a two-point line.
- Non-numeric tokens read as ``0.0``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from map_point_mapper.models.outcome import ParseOutcome
from map_point_mapper.parser._coercion import coerce_float, pair_tokens, pairs_to_coordinates
from map_point_mapper.parser._constants import COERCION_FALLBACK, MIN_SEQUENCE_POINTS
from map_point_mapper.parser._detection import (
    InputFormat,
    classify_input,
    effective_longitude_first,
    is_multi_geometry,
)
from map_point_mapper.parser._normalization import split_chunks, strip_wrapper, tokenize_chunk
from map_point_mapper.parser._validation import (
    InvalidGeometryStringError,
    drop_empty_sequences,
    ensure_sequences,
)

if TYPE_CHECKING:
    from map_point_mapper.models.coordinate import CoordinateSequence

logger = logging.getLogger("map_point_mapper.parser")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "COERCION_FALLBACK",
    "MIN_SEQUENCE_POINTS",
    "InputFormat",
    "InvalidGeometryStringError",
    "classify_input",
    "coerce_float",
    "effective_longitude_first",
    "extract_token_chunks",
    "is_multi_geometry",
    "pair_tokens",
    "pairs_to_coordinates",
    "parse_geometry_string",
    "parse_outcome",
    "split_chunks",
    "strip_wrapper",
    "tokenize_chunk",
]


def extract_token_chunks(text: str) -> tuple[InputFormat, list[list[str]]]:
    """Run detection and normalisation, returning one token list per chunk.

    Untagged input yields no chunks at all.
    """
    input_format = classify_input(text)
    if input_format is InputFormat.UNTAGGED:
        logger.debug("Input not recognised as tagged geometry; no tokens extracted")
        return input_format, []

    multi = is_multi_geometry(text)
    body = strip_wrapper(text)
    chunks = split_chunks(body, multi=multi)
    logger.debug(
        "Tagged input | multi=%s | body_chars=%d | chunks=%d",
        multi,
        len(body),
        len(chunks),
    )
    return input_format, [tokenize_chunk(chunk) for chunk in chunks]


def parse_geometry_string(text: str, *, longitude_first: bool = False) -> list[CoordinateSequence]:
    """Parse *text* into ordered coordinate sequences.

    Args:
        text: Raw input, any length, may span several lines.
        longitude_first: Order preference used only for untagged input.

    Returns:
        Non-empty list of non-empty coordinate sequences, in input order.

    Raises:
        InvalidGeometryStringError: If no coordinates could be extracted.
    """
    input_format, token_chunks = extract_token_chunks(text)
    lon_first = effective_longitude_first(input_format, longitude_first)

    sequences = [
        pairs_to_coordinates(pair_tokens(tokens), longitude_first=lon_first)
        for tokens in token_chunks
    ]
    sequences = drop_empty_sequences(sequences)

    logger.debug(
        "Parsed geometry string | format=%s | longitude_first=%s | sequences=%d",
        input_format.value,
        lon_first,
        len(sequences),
    )
    return ensure_sequences(sequences)


def parse_outcome(text: str, *, longitude_first: bool = False) -> ParseOutcome:
    """Parse *text* without raising, returning a ``ParseOutcome``."""
    try:
        return ParseOutcome.success(parse_geometry_string(text, longitude_first=longitude_first))
    except InvalidGeometryStringError as exc:
        return ParseOutcome.failure(exc)
