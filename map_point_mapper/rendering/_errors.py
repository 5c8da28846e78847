"""Exceptions raised by the rendering helpers."""

from __future__ import annotations

from map_point_mapper.core.exceptions import ValidationError


class RegionError(ValidationError):
    """Raised when lines cannot be framed or drawn (e.g. nothing to frame)."""

    default_stage = "region"
    default_code = "REGION_UNAVAILABLE"
