"""Format detection for geometry strings.

Responsibilities:
- Classify input as geometry-tagged or untagged
- Detect MULTI* geometries
- Resolve the effective coordinate order
"""

from __future__ import annotations

import enum
import logging

from map_point_mapper.parser._constants import MULTI_MARKER, TAG_PATTERN

logger = logging.getLogger("map_point_mapper.parser")


class InputFormat(enum.Enum):
    """Outcome of format detection.

    Values:
        TAGGED:   Text starts with a word-like keyword (``POLYGON(...)``,
                  ``LINESTRING ...``); parsed as WKT-like and always
                  longitude-first.
        UNTAGGED: Anything else; contributes no tokens at all.
    """

    TAGGED = "tagged"
    UNTAGGED = "untagged"


def classify_input(text: str) -> InputFormat:
    """Classify *text* after stripping surrounding whitespace.

    A bare numeric list such as ``"32 15, 33 16"`` starts with digits,
    which are word characters, so it is TAGGED too; it still yields no
    coordinates because it has no parenthesised body for the wrapper
    stage to capture.  Only text starting with punctuation (``"(1 2)"``,
    ``"-12 3"``) or blank text is UNTAGGED.
    """
    stripped = text.strip()
    if TAG_PATTERN.match(stripped):
        return InputFormat.TAGGED
    return InputFormat.UNTAGGED


def is_multi_geometry(text: str) -> bool:
    """Return ``True`` if *text* contains ``MULTI`` anywhere (case-sensitive)."""
    return MULTI_MARKER in text


def effective_longitude_first(input_format: InputFormat, longitude_first: bool) -> bool:
    """Resolve the pair order for a parse.

    Tagged input forces longitude-first (WKT is ``x y`` = ``lon lat``);
    otherwise the caller's preference stands.
    """
    if input_format is InputFormat.TAGGED:
        if not longitude_first:
            logger.debug("Tagged input: overriding lat/lng preference with lng/lat")
        return True
    return longitude_first
