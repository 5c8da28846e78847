"""Tests for the HTTP request handlers.

The handlers are exercised directly with plain bodies and config, so
no Azure Functions runtime is needed.
"""

from __future__ import annotations

import json

import pytest

from map_point_mapper.core.config import MapperConfig
from map_point_mapper.handlers import (
    HTTP_BAD_REQUEST,
    HTTP_OK,
    HTTP_PAYLOAD_TOO_LARGE,
    HTTP_UNPROCESSABLE,
    handle_parse_geometry,
    handle_us_region,
)
from map_point_mapper.models.response import SCHEMA_VERSION

_JSON = "application/json"


def _json_body(**payload: object) -> bytes:
    return json.dumps(payload).encode()


class TestParseGeometrySuccess:
    """200 responses."""

    def test_polygon(self, polygon_wkt: str, default_config: MapperConfig) -> None:
        status, body = handle_parse_geometry(
            _json_body(text=polygon_wkt), content_type=_JSON, config=default_config
        )
        assert status == HTTP_OK
        assert body["schema_version"] == SCHEMA_VERSION
        assert body["sequences"] == [[[20.0, 10.0], [40.0, 30.0], [60.0, 50.0]]]
        assert body["sequence_count"] == 1
        assert body["point_count"] == 3
        assert body["region"]["min_lat"] == 20.0
        assert body["region"]["max_lon"] == 50.0
        assert body["wkt"] == "LINESTRING(10.0 20.0, 30.0 40.0, 50.0 60.0)"
        assert set(body["map_rect"]) == {"x", "y", "width", "height"}

    def test_plain_text_body(self, multipolygon_wkt: str, default_config: MapperConfig) -> None:
        status, body = handle_parse_geometry(
            multipolygon_wkt.encode(), content_type="text/plain", config=default_config
        )
        assert status == HTTP_OK
        assert body["sequence_count"] == 2
        assert body["wkt"].startswith("MULTILINESTRING(")

    def test_order_label_echoed(self, point_wkt: str, default_config: MapperConfig) -> None:
        status, body = handle_parse_geometry(
            _json_body(text=point_wkt, order="Lng/Lat"), content_type=_JSON, config=default_config
        )
        assert status == HTTP_OK
        assert body["order_label"] == "Lng/Lat"
        assert body["sequences"] == [[[32.0, 15.0], [32.0, 15.0]]]

    def test_default_order_from_config(self, point_wkt: str) -> None:
        cfg = MapperConfig(longitude_first=True)
        _, body = handle_parse_geometry(point_wkt.encode(), content_type="", config=cfg)
        assert body["order_label"] == "Lng/Lat"

    def test_padding_applies_to_region_only(self, polygon_wkt: str) -> None:
        cfg = MapperConfig(region_padding_pct=0.0)
        _, unpadded = handle_parse_geometry(
            _json_body(text=polygon_wkt), content_type=_JSON, config=cfg
        )
        _, padded = handle_parse_geometry(
            _json_body(text=polygon_wkt, padding_pct=0.5), content_type=_JSON, config=cfg
        )
        assert padded["region"]["min_lat"] == pytest.approx(0.0)
        assert padded["region"]["max_lat"] == pytest.approx(80.0)
        assert padded["map_rect"] == unpadded["map_rect"]


class TestParseGeometryErrors:
    """400 / 413 / 422 responses."""

    def test_nothing_to_draw(self, default_config: MapperConfig) -> None:
        status, body = handle_parse_geometry(
            _json_body(text="   "),
            content_type=_JSON,
            config=default_config,
            correlation_id="corr-1",
        )
        assert status == HTTP_UNPROCESSABLE
        assert body["error"]["code"] == "INVALID_GEOMETRY_STRING"
        assert body["error"]["message"] == "Unable to parse input string"
        assert body["error"]["category"] == "validation"
        assert body["error"]["correlation_id"] == "corr-1"

    def test_malformed_json(self, default_config: MapperConfig) -> None:
        status, body = handle_parse_geometry(
            b"{oops", content_type=_JSON, config=default_config
        )
        assert status == HTTP_BAD_REQUEST
        assert body["error"]["code"] == "INVALID_JSON"
        assert body["error"]["category"] == "contract"

    def test_missing_text(self, default_config: MapperConfig) -> None:
        status, body = handle_parse_geometry(
            _json_body(order="Lat/Lng"), content_type=_JSON, config=default_config
        )
        assert status == HTTP_BAD_REQUEST
        assert body["error"]["code"] == "PAYLOAD_MISSING_KEYS"

    def test_bad_order_label(self, point_wkt: str, default_config: MapperConfig) -> None:
        status, body = handle_parse_geometry(
            _json_body(text=point_wkt, order="up/down"), content_type=_JSON, config=default_config
        )
        assert status == HTTP_BAD_REQUEST
        assert body["error"]["code"] == "INVALID_ORDER"

    def test_input_too_large(self, polygon_wkt: str) -> None:
        cfg = MapperConfig(max_input_chars=5)
        status, body = handle_parse_geometry(
            polygon_wkt.encode(), content_type="text/plain", config=cfg, correlation_id="c-2"
        )
        assert status == HTTP_PAYLOAD_TOO_LARGE
        assert body["error"]["code"] == "INPUT_TOO_LARGE"
        assert body["error"]["correlation_id"] == "c-2"


class TestUsRegionHandler:
    def test_us_region(self) -> None:
        status, body = handle_us_region()
        assert status == HTTP_OK
        assert body["center"] == pytest.approx([37.09024, -95.712891])
        assert body["lat_span"] == pytest.approx(23.56)


class TestParseGeometryUnframeable:
    """Coordinates are never clamped, so framing can overflow float range."""

    def test_span_overflow_is_unprocessable(self) -> None:
        status, body = handle_parse_geometry(
            b"LINESTRING(-1e308 0, 1e308 0)",
            content_type="text/plain",
            config=MapperConfig(),
            correlation_id="c-3",
        )
        assert status == HTTP_UNPROCESSABLE
        assert body["error"]["code"] == "REGION_UNAVAILABLE"
        assert body["error"]["stage"] == "region"
        assert body["error"]["correlation_id"] == "c-3"

    def test_values_near_float_limit_never_crash(self) -> None:
        status, body = handle_parse_geometry(
            b"LINESTRING(1e308 1e308, 1.5e308 1.5e308)",
            content_type="text/plain",
            config=MapperConfig(),
        )
        assert status in (HTTP_OK, HTTP_UNPROCESSABLE)
        # Strict JSON: no Infinity/NaN may reach the wire
        json.dumps(body, allow_nan=False)
        if status == HTTP_OK:
            assert body["region"]["center"] == pytest.approx([1.25e308, 1.25e308])
        else:
            assert body["error"]["code"] == "REGION_UNAVAILABLE"
