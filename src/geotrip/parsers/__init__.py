"""Raw value parsers: GeoJSON objects, JSON strings, WKT and coordinate arrays."""

from geotrip.parsers.normalize import normalize_geojson
from geotrip.parsers.raw_feature import (
    classify_raw_input,
    parse_geometry_from_string,
    parse_raw_feature,
)

__all__ = [
    "classify_raw_input",
    "normalize_geojson",
    "parse_geometry_from_string",
    "parse_raw_feature",
]
