"""String normalisation stages for geometry parsing.

Responsibilities:
- Strip the outer ``KEYWORD( ... )`` wrapper
- Split MULTI* bodies into one chunk per sub-geometry
- Flatten a chunk into numeric-looking tokens
"""

from __future__ import annotations

from map_point_mapper.parser._constants import (
    CHUNK_DELIMITER,
    POINT_GROUP_DELIMITER,
    WRAPPER_PATTERN,
)


def strip_wrapper(text: str) -> str:
    """Return the body inside the first ``KEYWORD(`` and the last ``)``.

    Example::

        "POLYGON(( 15 32 ))"          -> "( 15 32 )"
        "MULTIPOLYGON((( 15 32 )))"   -> "(( 15 32 ))"

    Returns an empty string when no wrapper is found.
    """
    match = WRAPPER_PATTERN.search(text)
    if match is None:
        return ""
    return match.group(1)


def split_chunks(body: str, *, multi: bool) -> list[str]:
    """Split a wrapper-stripped body into per-geometry chunks.

    MULTI* bodies are split on ``"),"``; anything else is one chunk.
    """
    if multi:
        return body.split(CHUNK_DELIMITER)
    return [body]


def tokenize_chunk(chunk: str) -> list[str]:
    """Flatten a chunk into an ordered list of value tokens.

    Removes every parenthesis, breaks on ``,`` into point groups, then
    breaks each group on whitespace and drops empty fragments.
    """
    stripped = chunk.replace("(", "").replace(")", "")
    tokens: list[str] = []
    for group in stripped.split(POINT_GROUP_DELIMITER):
        tokens.extend(group.split())
    return tokens
