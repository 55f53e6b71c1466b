"""GeoJSON feature parsing and trip layer timestamp extraction.

Turns raw geometry values (GeoJSON dicts or strings, WKT, [lat, lng] arrays)
into GeoJSON Features, classifies their geometry types and extracts vertex
timestamps from line geometries carrying a 4th time coordinate.
"""

from geotrip.bounds import compute_bounds
from geotrip.classify import FEATURE_TO_GEO_TYPE, classify_feature_types
from geotrip.dataset import LayerMeta, build_layer_meta
from geotrip.feature import ColumnMeta, Field, TripTimeline
from geotrip.feature_map import build_feature_map
from geotrip.parsers import parse_geometry_from_string, parse_raw_feature
from geotrip.trip import (
    all_coords_have_at_least_4,
    compute_time_domain,
    extract_trip_timestamps,
    is_trip_field,
    is_valid_time_column,
)

__all__ = [
    "ColumnMeta",
    "FEATURE_TO_GEO_TYPE",
    "Field",
    "LayerMeta",
    "TripTimeline",
    "all_coords_have_at_least_4",
    "build_feature_map",
    "build_layer_meta",
    "classify_feature_types",
    "compute_bounds",
    "compute_time_domain",
    "extract_trip_timestamps",
    "is_trip_field",
    "is_valid_time_column",
    "parse_geometry_from_string",
    "parse_raw_feature",
]
