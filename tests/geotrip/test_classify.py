"""Tests for geometry type classification."""

import pytest

from geotrip.classify import FEATURE_TO_GEO_TYPE, classify_feature_types, geo_type_of


def _feature(geom_type):
    return {"type": "Feature", "geometry": {"type": geom_type, "coordinates": []}, "properties": {}}


class TestGeoTypeMapping:
    """Static geometry type → category mapping."""

    @pytest.mark.parametrize(
        "geom_type,expected",
        [
            ("Point", "point"),
            ("MultiPoint", "point"),
            ("LineString", "line"),
            ("MultiLineString", "line"),
            ("Polygon", "polygon"),
            ("MultiPolygon", "polygon"),
        ],
    )
    def test_mapping(self, geom_type, expected):
        assert FEATURE_TO_GEO_TYPE[geom_type] == expected
        assert geo_type_of(_feature(geom_type)) == expected

    def test_geometry_collection_has_no_category(self):
        assert geo_type_of(_feature("GeometryCollection")) is None


class TestClassifyFeatureTypes:
    """Presence map over a dataset."""

    def test_empty(self):
        assert classify_feature_types([]) == {}

    def test_polygon_only(self):
        features = [_feature("Polygon"), _feature("MultiPolygon")]
        assert classify_feature_types(features) == {"polygon": True}

    def test_mixed(self):
        features = [_feature("Point"), _feature("LineString"), _feature("Polygon")]
        assert classify_feature_types(features) == {"point": True, "line": True, "polygon": True}

    def test_skips_holes_and_missing_geometry(self):
        features = [None, {"type": "Feature", "geometry": None}, _feature("Unknown"), _feature("Point")]
        assert classify_feature_types(features) == {"point": True}
