"""Token pairing and permissive numeric coercion.

Responsibilities:
- Coerce value tokens to floats without ever raising
- Pair tokens two at a time, dropping an odd trailing token
- Convert token pairs to ``Coordinate`` values in the effective order
"""

from __future__ import annotations

import logging
import math

from map_point_mapper.models.coordinate import Coordinate
from map_point_mapper.parser._constants import (
    COERCION_FALLBACK,
    MIN_SEQUENCE_POINTS,
    NUMERIC_PREFIX_PATTERN,
)

logger = logging.getLogger("map_point_mapper.parser")


def coerce_float(token: str) -> float:
    """Coerce a token to a float, falling back to ``COERCION_FALLBACK``.

    Leading whitespace is skipped and the longest leading numeric prefix
    is used, so ``"12.5abc"`` reads as ``12.5`` and ``"abc"`` as ``0.0``.
    A prefix that overflows to infinity also reads as ``0.0`` so that
    every coordinate stays finite.  Never raises.
    """
    match = NUMERIC_PREFIX_PATTERN.match(token.lstrip())
    if match is None:
        logger.debug("Non-numeric token %r coerced to %s", token, COERCION_FALLBACK)
        return COERCION_FALLBACK
    value = float(match.group(0))
    if not math.isfinite(value):
        logger.debug("Overflowing token %r coerced to %s", token, COERCION_FALLBACK)
        return COERCION_FALLBACK
    return value


def pair_tokens(tokens: list[str]) -> list[tuple[str, str]]:
    """Pair tokens in order: ``(t0, t1), (t2, t3), ...``.

    An odd trailing token is dropped.  A single pair is duplicated so a
    lone point still forms a two-point line.
    """
    pairs = [(tokens[i], tokens[i + 1]) for i in range(0, len(tokens) - 1, 2)]
    if len(tokens) % 2:
        logger.debug("Dropping unpaired trailing token %r", tokens[-1])
    if len(pairs) == 1:
        pairs = pairs * MIN_SEQUENCE_POINTS
    return pairs


def pairs_to_coordinates(
    pairs: list[tuple[str, str]], *, longitude_first: bool
) -> list[Coordinate]:
    """Convert token pairs to coordinates.

    When *longitude_first* is set the first token of each pair is the
    longitude, otherwise it is the latitude.
    """
    coordinates: list[Coordinate] = []
    for first, second in pairs:
        a = coerce_float(first)
        b = coerce_float(second)
        if longitude_first:
            coordinates.append(Coordinate(latitude=b, longitude=a))
        else:
            coordinates.append(Coordinate(latitude=a, longitude=b))
    return coordinates
