"""Map GeoJSON geometry types to coarse rendering categories."""

from __future__ import annotations

from typing import Iterable

FEATURE_TO_GEO_TYPE = {
    "Point": "point",
    "MultiPoint": "point",
    "LineString": "line",
    "MultiLineString": "line",
    "Polygon": "polygon",
    "MultiPolygon": "polygon",
}


def geo_type_of(feature: dict | None) -> str | None:
    """Rendering category of a single feature, or None."""
    if not feature:
        return None
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict):
        return None
    return FEATURE_TO_GEO_TYPE.get(geometry.get("type"))


def classify_feature_types(features: Iterable[dict | None]) -> dict[str, bool]:
    """Which rendering categories are present among ``features``.

    Returns:
        Presence map such as ``{"line": True, "point": True}``. Empty for an
        empty input.
    """
    feature_types: dict[str, bool] = {}
    for feature in features:
        geo_type = geo_type_of(feature)
        if geo_type:
            feature_types[geo_type] = True
    return feature_types
