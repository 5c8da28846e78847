"""Request handlers behind the HTTP entry point.

Each handler takes plain values (body, headers, config) and returns a
``(status_code, json_body)`` tuple, so ``function_app.py`` stays a
wiring layer and the handlers can be tested without the Azure Functions
runtime.

Status codes:
- 200: parsed; body is a ``ParseResponse``
- 400: malformed request (bad JSON, missing ``text``, bad field types)
- 413: input text exceeds ``MapperConfig.max_input_chars``
- 422: input parsed to nothing, or the parsed lines cannot be framed
  (e.g. spans beyond float range); body is the structured error dict
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from map_point_mapper.core.exceptions import ContractError, MapperError
from map_point_mapper.core.ingress import (
    deserialize_request_body,
    resolve_longitude_first,
    resolve_padding_pct,
)
from map_point_mapper.models.coordinate import OrderPreference
from map_point_mapper.models.response import ParseResponse
from map_point_mapper.parser import parse_outcome
from map_point_mapper.rendering import compute_map_rect, compute_region, to_wkt, us_region

if TYPE_CHECKING:
    from map_point_mapper.core.config import MapperConfig

logger = logging.getLogger("map_point_mapper.handlers")

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_PAYLOAD_TOO_LARGE = 413
HTTP_UNPROCESSABLE = 422


def handle_parse_geometry(
    body: bytes | str,
    *,
    content_type: str,
    config: MapperConfig,
    correlation_id: str = "",
) -> tuple[int, dict[str, Any]]:
    """Parse the text in a request body and frame the resulting lines."""
    try:
        payload = deserialize_request_body(
            body, content_type=content_type, max_chars=config.max_input_chars
        )
        longitude_first = resolve_longitude_first(payload, config)
        padding_pct = resolve_padding_pct(payload, config)
    except ContractError as exc:
        status = HTTP_PAYLOAD_TOO_LARGE if exc.code == "INPUT_TOO_LARGE" else HTTP_BAD_REQUEST
        logger.warning(
            "parse_geometry rejected request | code=%s | correlation_id=%s | %s",
            exc.code,
            correlation_id,
            exc.message,
        )
        return status, _error_body(exc, correlation_id)

    order = OrderPreference(longitude_first=longitude_first)
    logger.info(
        "parse_geometry started | text_chars=%d | order=%s | correlation_id=%s",
        len(payload["text"]),
        order.label,
        correlation_id,
    )

    outcome = parse_outcome(payload["text"], longitude_first=order.longitude_first)
    if outcome.error is not None:
        logger.warning(
            "parse_geometry found nothing to draw | correlation_id=%s",
            correlation_id,
        )
        return HTTP_UNPROCESSABLE, _error_body(outcome.error, correlation_id)

    sequences = outcome.sequences
    try:
        response = ParseResponse.build(
            sequences,
            region=compute_region(sequences, padding_pct=padding_pct),
            map_rect=compute_map_rect(sequences),
            wkt=to_wkt(sequences),
            order_label=order.label,
        )
    except MapperError as exc:
        logger.warning(
            "parse_geometry could not frame lines | code=%s | correlation_id=%s | %s",
            exc.code,
            correlation_id,
            exc.message,
        )
        return HTTP_UNPROCESSABLE, _error_body(exc, correlation_id)

    logger.info(
        "parse_geometry completed | sequences=%d | points=%d | correlation_id=%s",
        response.sequence_count,
        response.point_count,
        correlation_id,
    )
    return HTTP_OK, response.model_dump()


def handle_us_region() -> tuple[int, dict[str, Any]]:
    """Return the continental-US framing preset."""
    return HTTP_OK, us_region().to_dict()


def _error_body(exc: MapperError, correlation_id: str) -> dict[str, Any]:
    if correlation_id and not exc.correlation_id:
        exc.correlation_id = correlation_id
    return {"error": exc.to_error_dict()}
