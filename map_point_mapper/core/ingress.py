"""Thin ingress boundary helpers for the HTTP entry point.

Centralises the transport concerns so that ``function_app.py`` contains
only trigger bindings and handoff:

- **deserialize_request_body**: turns a raw request body (JSON object
  or plain UTF-8 text) into a ``ParseGeometryRequest`` dict.
- **resolve_longitude_first**: picks the order preference from the
  payload, falling back to the configured default.
- **resolve_padding_pct**: picks the region padding from the payload,
  falling back to the configured default.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from map_point_mapper.core.exceptions import ContractError
from map_point_mapper.models.coordinate import ModelValidationError, OrderPreference
from map_point_mapper.models.payloads import ParseGeometryRequest, validate_payload

if TYPE_CHECKING:
    from map_point_mapper.core.config import MapperConfig

logger = logging.getLogger("map_point_mapper.core.ingress")

_ENDPOINT = "parse_geometry"


def deserialize_request_body(
    body: bytes | str,
    *,
    content_type: str = "",
    max_chars: int | None = None,
) -> ParseGeometryRequest:
    """Normalise a raw request body into a ``ParseGeometryRequest``.

    ``application/json`` bodies must be a JSON object with a ``text``
    key.  Any other content type is treated as the raw input text, the
    way a whole file would be read.

    Args:
        body: Raw request body.
        content_type: Value of the ``Content-Type`` header.
        max_chars: Reject input text longer than this many characters.

    Raises:
        ContractError: If the body is not UTF-8, is malformed JSON, is
            missing required keys, or exceeds *max_chars*.
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Request body is not valid UTF-8: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_ENCODING") from exc

    if "json" in content_type.lower():
        try:
            parsed: Any = json.loads(body)
        except (json.JSONDecodeError, ValueError) as exc:
            msg = f"Request body is not valid JSON: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_JSON") from exc
        if not isinstance(parsed, dict):
            msg = f"Request JSON must be an object, got {type(parsed).__name__}"
            raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")
        validate_payload(parsed, ParseGeometryRequest, endpoint=_ENDPOINT)
        payload: ParseGeometryRequest = parsed  # type: ignore[assignment]
    else:
        payload = {"text": body}

    if max_chars is not None and len(payload["text"]) > max_chars:
        msg = f"Input text has {len(payload['text'])} characters, limit is {max_chars}"
        raise ContractError(msg, stage="ingress", code="INPUT_TOO_LARGE")

    logger.debug(
        "Deserialised request | content_type=%s | text_chars=%d",
        content_type or "<none>",
        len(payload["text"]),
    )
    return payload


def resolve_longitude_first(payload: ParseGeometryRequest, config: MapperConfig) -> bool:
    """Return the order preference for *payload*.

    ``longitude_first`` wins over ``order``; with neither, the configured
    default applies.

    Raises:
        ContractError: If ``order`` is not a known order label.
    """
    if "longitude_first" in payload:
        return payload["longitude_first"]
    if "order" in payload:
        try:
            return OrderPreference.from_label(payload["order"]).longitude_first
        except ModelValidationError as exc:
            raise ContractError(str(exc), stage="ingress", code="INVALID_ORDER") from exc
    return config.longitude_first


def resolve_padding_pct(payload: ParseGeometryRequest, config: MapperConfig) -> float:
    """Return the region padding for *payload*.

    Raises:
        ContractError: If ``padding_pct`` is outside ``[0, 1]``.
    """
    padding = float(payload.get("padding_pct", config.region_padding_pct))
    if not 0.0 <= padding <= 1.0:
        msg = f"padding_pct={padding!r} must be between 0 and 1"
        raise ContractError(msg, stage="ingress", code="INVALID_PADDING")
    return padding
