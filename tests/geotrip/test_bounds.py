"""Tests for feature bounds."""

import pytest

from geotrip.bounds import compute_bounds


def _feature(geom_type, coords):
    return {"type": "Feature", "geometry": {"type": geom_type, "coordinates": coords}, "properties": {}}


class TestComputeBounds:
    """Envelope via shapely, None on failure."""

    def test_empty_is_none(self):
        assert compute_bounds([]) is None

    def test_points(self):
        features = [_feature("Point", [-122.4, 37.7]), _feature("Point", [-122.5, 37.8])]
        assert compute_bounds(features) == pytest.approx([-122.5, 37.7, -122.4, 37.8])

    def test_mixed_geometries(self):
        features = [
            _feature("LineString", [[0, 0], [2, 1]]),
            _feature("Polygon", [[[-1, -1], [1, -1], [1, 3], [-1, -1]]]),
        ]
        assert compute_bounds(features) == pytest.approx([-1, -1, 2, 3])

    def test_trip_coordinates_with_time(self):
        """Only x/y take part; the 4th coordinate may be a string."""
        features = [_feature("LineString", [[-74.0, 40.7, 0, "2016-01-01T00:00"], [-74.1, 40.8, 0, "2016-01-01T00:10"]])]
        assert compute_bounds(features) == pytest.approx([-74.1, 40.7, -74.0, 40.8])

    def test_holes_and_empty_coordinates_filtered(self):
        features = [None, _feature("LineString", []), {"type": "Feature", "geometry": None}, _feature("Point", [1, 2])]
        assert compute_bounds(features) == pytest.approx([1, 2, 1, 2])

    def test_only_empty_features_is_none(self):
        assert compute_bounds([None, _feature("LineString", [])]) is None

    def test_bad_coordinates_is_none(self):
        assert compute_bounds([_feature("Point", ["a", "b"])]) is None

    def test_sampling_cap(self):
        features = [_feature("Point", [i, i]) for i in range(100)]
        bounds = compute_bounds(features, cap=10)
        # stride 10 picks 0, 10, ..., 90
        assert bounds == pytest.approx([0, 0, 90, 90])
