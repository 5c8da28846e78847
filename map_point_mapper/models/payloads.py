"""Typed request payload schemas for the HTTP entry point.

The parse endpoint accepts a JSON object.  These ``TypedDict``
definitions make the contract explicit so that pyright catches key
mismatches at analysis time and ``validate_payload`` catches them at
runtime.

Usage::

    from map_point_mapper.models.payloads import ParseGeometryRequest, validate_payload

    validate_payload(body, ParseGeometryRequest, endpoint="parse_geometry")
"""

from __future__ import annotations

from typing import Any, NotRequired, TypedDict

from map_point_mapper.core.exceptions import ContractError


class ParseGeometryRequest(TypedDict):
    """Client → ``parse_geometry`` endpoint.

    ``order`` (a display label such as ``"Lng/Lat"``) is accepted as an
    alternative to ``longitude_first``; when both are sent,
    ``longitude_first`` wins.
    """

    text: str
    longitude_first: NotRequired[bool]
    order: NotRequired[str]
    padding_pct: NotRequired[float]


# Response is ``ParseResponse``, see map_point_mapper.models.response.

# ---------------------------------------------------------------------------
# Required-key registrations (used by validate_payload)
# ---------------------------------------------------------------------------

_REQUIRED_KEYS: dict[type, frozenset[str]] = {
    ParseGeometryRequest: frozenset({"text"}),
}

_FIELD_TYPES: dict[type, dict[str, type | tuple[type, ...]]] = {
    ParseGeometryRequest: {
        "text": str,
        "longitude_first": bool,
        "order": str,
        "padding_pct": (int, float),
    },
}


def validate_payload(
    raw: dict[str, Any],
    schema: type,
    *,
    endpoint: str,
) -> None:
    """Validate that *raw* has the required keys and field types for *schema*.

    Raises:
        ContractError: If required keys are missing or a field has the
            wrong JSON type.
    """
    required = _REQUIRED_KEYS.get(schema)
    if required is None:
        return

    missing = required - raw.keys()
    if missing:
        msg = f"{endpoint}: missing required payload key(s): {', '.join(sorted(missing))}"
        raise ContractError(msg, stage=endpoint, code="PAYLOAD_MISSING_KEYS")

    for key, expected in _FIELD_TYPES.get(schema, {}).items():
        if key not in raw:
            continue
        value = raw[key]
        # bool is an int subclass; never accept it as a number
        if not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool):
            msg = f"{endpoint}: payload key {key!r} has unexpected type {type(value).__name__}"
            raise ContractError(msg, stage=endpoint, code="PAYLOAD_INVALID_TYPE")
