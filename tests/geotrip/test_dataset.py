"""Tests for layer metadata and the command line inspector."""

import csv
import json

import pytest
from loguru import logger

from geotrip.__main__ import main
from geotrip.dataset import build_layer_meta
from geotrip.feature import Field

T0 = 1451606400000
FIELD = Field(name="geojson", table_field_index=2)


def _trip(times):
    coords = [[-74.0 - i * 0.1, 40.7 + i * 0.1, 0, t] for i, t in enumerate(times)]
    return json.dumps({"type": "LineString", "coordinates": coords})


TRIP_ROWS = [
    ["a", _trip(["2016-01-01T00:00", "2016-01-01T00:05", "2016-01-01T00:10"])],
    ["b", "not a geometry"],
    ["c", _trip(["2016-01-01T01:00", "2016-01-01T01:30"])],
]


@pytest.fixture
def reset_logger():
    yield
    logger.remove()


class TestBuildLayerMeta:
    """End to end summary of a geometry column."""

    def test_trip_column(self):
        meta = build_layer_meta(TRIP_ROWS, FIELD)
        assert meta.feature_types == {"line": True}
        assert meta.feature_map[1] is None
        assert meta.feature_map[2]["properties"]["index"] == 2
        assert meta.bounds == pytest.approx([-74.2, 40.7, -74.0, 40.9])
        assert meta.is_trip is True
        assert meta.timeline.domain == (T0, T0 + 5400000)
        assert meta.timeline.timestamps[1] is None

    def test_polygon_column(self):
        rows = [["a", "POLYGON ((0 0, 1 0, 1 1, 0 0))"]]
        meta = build_layer_meta(rows, FIELD)
        assert meta.feature_types == {"polygon": True}
        assert meta.is_trip is False
        assert meta.timeline is None
        assert meta.bounds == pytest.approx([0, 0, 1, 1])

    def test_to_dict(self):
        summary = build_layer_meta(TRIP_ROWS, FIELD).to_dict()
        assert summary["rows"] == 3
        assert summary["features"] == 2
        assert summary["feature_types"] == ["line"]
        assert summary["domain"] == [T0, T0 + 5400000]

    def test_short_row_is_a_hole(self):
        meta = build_layer_meta([["x"]] + TRIP_ROWS, FIELD)
        assert len(meta.feature_map) == 4
        assert meta.feature_map[0] is None
        assert meta.is_trip is True
        assert meta.timeline.timestamps[0] is None

    def test_field_value_of(self):
        assert FIELD.value_of(["a", "b", "c"]) == "b"
        assert FIELD.value_of(["a"]) is None
        assert FIELD.value_of([]) is None

    def test_empty_rows(self):
        summary = build_layer_meta([], FIELD).to_dict()
        assert summary["features"] == 0
        assert summary["bounds"] is None
        assert summary["is_trip"] is False
        assert summary["domain"] is None


class TestCli:
    """python -m geotrip <file> --field <name>."""

    def test_prints_summary(self, tmp_path, capsys, reset_logger):
        path = tmp_path / "trips.csv"
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["id", "geojson"])
            w.writerows(TRIP_ROWS)

        assert main([str(path), "--field", "geojson"]) == 0
        summary = json.loads(capsys.readouterr().out)
        assert summary["is_trip"] is True
        assert summary["domain"] == [T0, T0 + 5400000]

    def test_unknown_field(self, tmp_path, reset_logger):
        path = tmp_path / "trips.csv"
        path.write_text("id,wkt\n1,POINT (1 2)\n", encoding="utf-8")
        assert main([str(path), "--field", "geojson"]) == 2

    def test_missing_file(self, tmp_path, reset_logger):
        assert main([str(tmp_path / "nope.csv"), "--field", "geojson"]) == 2
