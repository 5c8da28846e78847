"""Tests for WKT re-serialisation."""

from __future__ import annotations

import pytest

from map_point_mapper.models.coordinate import Coordinate
from map_point_mapper.parser import parse_geometry_string
from map_point_mapper.rendering import RegionError, to_wkt
from map_point_mapper.rendering.serialization import format_sequence


class TestToWkt:
    def test_single_sequence_is_linestring(self) -> None:
        seq = [Coordinate(latitude=2.0, longitude=1.0), Coordinate(latitude=4.0, longitude=3.0)]
        assert to_wkt([seq]) == "LINESTRING(1.0 2.0, 3.0 4.0)"

    def test_several_sequences_are_multilinestring(self) -> None:
        a = [Coordinate(latitude=2.0, longitude=1.0)] * 2
        b = [Coordinate(latitude=4.0, longitude=3.0)] * 2
        assert to_wkt([a, b]) == "MULTILINESTRING((1.0 2.0, 1.0 2.0),(3.0 4.0, 3.0 4.0))"

    def test_explicit_multi_tag_with_one_sequence(self) -> None:
        seq = [Coordinate(latitude=2.0, longitude=1.0)] * 2
        assert to_wkt([seq], tag="MULTIPOINT") == "MULTIPOINT((1.0 2.0, 1.0 2.0))"

    def test_single_tag_with_several_sequences(self) -> None:
        seq = [Coordinate(latitude=2.0, longitude=1.0)] * 2
        with pytest.raises(RegionError) as exc_info:
            to_wkt([seq, seq], tag="POLYGON")
        assert exc_info.value.code == "TAG_MISMATCH"

    def test_empty(self) -> None:
        with pytest.raises(RegionError) as exc_info:
            to_wkt([])
        assert exc_info.value.code == "NOTHING_TO_SERIALIZE"
        assert exc_info.value.stage == "serialize"

    def test_format_sequence_keeps_precision(self) -> None:
        seq = [Coordinate(latitude=45.52310000000001, longitude=-122.6765)]
        assert format_sequence(seq) == "-122.6765 45.52310000000001"


class TestParseBack:
    """Serialised output parses back to the same coordinates."""

    @pytest.mark.parametrize(
        "text",
        [
            "POINT(15 32)",
            "POLYGON((10 20, 30 40, 50 60))",
            "MULTIPOLYGON(((1 2, 3 4)),((5 6, 7 8)))",
            "LINESTRING(-122.6765 45.5231, -0.000012 1e-7, 179.999999 -89.5)",
        ],
    )
    def test_parse_serialise_parse(self, text: str) -> None:
        sequences = parse_geometry_string(text)
        assert parse_geometry_string(to_wkt(sequences)) == sequences

    def test_serialise_is_stable(self) -> None:
        sequences = parse_geometry_string("MULTIPOLYGON(((1 2, 3 4)),((5 6, 7 8)))")
        once = to_wkt(sequences)
        assert to_wkt(parse_geometry_string(once)) == once
