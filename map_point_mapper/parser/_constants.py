"""Shared constants for geometry string parsing."""

from __future__ import annotations

import re

# Leading keyword that marks text as geometry-tagged (e.g. ``POLYGON``)
TAG_PATTERN = re.compile(r"^\w+")

# Keyword followed by a parenthesised body, greedy to the LAST ``)`` so
# nested MULTI* bodies are captured as one block.  DOTALL lets bodies
# span newlines in pasted or file-loaded text.
WRAPPER_PATTERN = re.compile(r"\w+\s*\((.*)\)", re.IGNORECASE | re.DOTALL)

# Substring that marks a multi-part geometry (case-sensitive)
MULTI_MARKER = "MULTI"

# Separator between sub-geometries once the outer wrapper is removed
CHUNK_DELIMITER = "),"

# Separator between point groups inside a chunk
POINT_GROUP_DELIMITER = ","

# Leading numeric prefix accepted by the permissive coercion
NUMERIC_PREFIX_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Value used for tokens with no numeric prefix
COERCION_FALLBACK = 0.0

# Renderers need at least two points to draw a line
MIN_SEQUENCE_POINTS = 2

INVALID_GEOMETRY_MESSAGE = "Unable to parse input string"
