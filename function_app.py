"""Azure Functions entry point for Map Point Mapper.

This module registers the HTTP functions using the Python v2
programming model.

All business logic lives in the map_point_mapper package. This file is
purely the wiring layer between Azure Functions bindings and
application code.
"""

from __future__ import annotations

import json
import logging

import azure.functions as func

from map_point_mapper.core.config import MapperConfig
from map_point_mapper.handlers import handle_parse_geometry, handle_us_region

app = func.FunctionApp()

logger = logging.getLogger("map_point_mapper.function_app")

# Loaded once at import so a bad app setting fails the host at startup
config = MapperConfig.from_env()


# ---------------------------------------------------------------------------
# HTTP: Parse geometry text
# ---------------------------------------------------------------------------


@app.function_name("parse_geometry")
@app.route(route="geometry/parse", methods=["POST"])
def parse_geometry(req: func.HttpRequest) -> func.HttpResponse:
    """Parse WKT-like text into coordinate sequences and a framing region.

    Body:
        ``application/json`` with ``{"text": ..., "longitude_first": ...,
        "order": ..., "padding_pct": ...}``, or any other content type
        carrying the raw text (e.g. an uploaded file).

    Returns:
        200 with a ``ParseResponse``; 400/413/422 with ``{"error": {...}}``.
    """
    correlation_id = req.headers.get("x-correlation-id", "")

    status, body = handle_parse_geometry(
        req.get_body(),
        content_type=req.headers.get("content-type", ""),
        config=config,
        correlation_id=correlation_id,
    )
    return _json_response(body, status)


# ---------------------------------------------------------------------------
# HTTP: Framing presets
# ---------------------------------------------------------------------------


@app.function_name("us_region")
@app.route(route="regions/us", methods=["GET"])
def us_region(req: func.HttpRequest) -> func.HttpResponse:  # noqa: ARG001
    """Return the continental-US framing region."""
    status, body = handle_us_region()
    return _json_response(body, status)


def _json_response(body: dict[str, object], status: int) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(body),
        status_code=status,
        mimetype="application/json",
    )
