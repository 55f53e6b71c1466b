"""Normalize any GeoJSON object into a FeatureCollection dict.

Accepts a FeatureCollection (returned as-is), a Feature (wrapped) or a bare
geometry (wrapped in a Feature with empty properties). Anything else yields
None.
"""

from __future__ import annotations

from typing import Any

from geotrip.feature import ACCEPTABLE_TYPES


def _wrap_feature_collection(features: list) -> dict:
    return {"type": "FeatureCollection", "features": features}


def normalize_geojson(obj: Any) -> dict | None:
    """Normalize a GeoJSON object to a FeatureCollection.

    Args:
        obj: Parsed GeoJSON (dict).

    Returns:
        FeatureCollection dict, or None if obj is not recognisable GeoJSON.
    """
    if not isinstance(obj, dict):
        return None

    gj_type = obj.get("type")
    if gj_type == "FeatureCollection":
        if not isinstance(obj.get("features"), list):
            return None
        return obj
    if gj_type == "Feature":
        return _wrap_feature_collection([obj])
    if gj_type in ACCEPTABLE_TYPES:
        return _wrap_feature_collection(
            [{"type": "Feature", "properties": {}, "geometry": obj}]
        )
    return None
