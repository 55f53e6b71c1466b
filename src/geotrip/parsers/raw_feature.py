"""Parse one raw row value into a GeoJSON Feature.

A raw value may be a GeoJSON dict, a GeoJSON string, a WKT string or a list of
[lat, lng] pairs. The value is first classified into one of the input kinds in
``geotrip.feature`` and then converted; JSON is always tried before WKT.
"""

from __future__ import annotations

import json
from typing import Any

from loguru import logger
from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import mapping

from geotrip.feature import CoordArray, GeoObject, JsonText, RawInput, WktText
from geotrip.parsers.normalize import normalize_geojson


def classify_raw_input(raw: Any) -> RawInput | None:
    """Decide which kind of raw geometry value ``raw`` is.

    Returns:
        The tagged input, or None for unsupported types.
    """
    if isinstance(raw, dict):
        return GeoObject(raw)
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except ValueError:
            parsed = None
        except RecursionError:
            logger.debug("JSON value nested too deeply")
            return None
        if parsed:
            return JsonText(parsed)
        return WktText(raw)
    if isinstance(raw, (list, tuple)):
        return CoordArray(list(raw))
    return None


def parse_raw_feature(raw: Any) -> dict | None:
    """Parse a raw value into a single GeoJSON Feature.

    Args:
        raw: GeoJSON dict, JSON/WKT string, or list of [lat, lng] pairs.

    Returns:
        Feature dict, or None if the value cannot be parsed.
    """
    kind = classify_raw_input(raw)
    if isinstance(kind, GeoObject):
        return _first_feature(kind.value)
    if isinstance(kind, JsonText):
        return _first_feature(kind.value)
    if isinstance(kind, WktText):
        return _parse_wkt(kind.text)
    if isinstance(kind, CoordArray):
        return _line_from_pairs(kind.pairs)
    return None


def parse_geometry_from_string(geo_string: str) -> dict | None:
    """Parse a GeoJSON or WKT string into a Feature.

    Examples of accepted input:
        '{"type":"Polygon","coordinates":[[[-74.158491,40.83594]]]}'
        'LINESTRING (30 10, 10 30, 40 40)'
    """
    if not isinstance(geo_string, str):
        return None
    return parse_raw_feature(geo_string)


def _first_feature(obj: Any) -> dict | None:
    normalized = normalize_geojson(obj)
    if not normalized or not normalized["features"]:
        logger.debug(f"GeoJSON normalization failed for {type(obj).__name__} value")
        return None

    first = normalized["features"][0]
    return first if isinstance(first, dict) else None


def _parse_wkt(text: str) -> dict | None:
    try:
        geom = wkt.loads(text)
    except (ShapelyError, ValueError, TypeError) as e:
        logger.debug(f"Not JSON or WKT: {text[:40]!r} ({e})")
        return None
    if geom is None:
        return None
    return _first_feature(_as_lists(mapping(geom)))


def _line_from_pairs(pairs: list) -> dict | None:
    coordinates = []
    for pts in pairs:
        if not isinstance(pts, (list, tuple)) or len(pts) < 2:
            logger.debug(f"Coordinate array entry is not a pair: {pts!r}")
            return None
        # Arrays arrive as [lat, lng]; GeoJSON wants [lng, lat]
        coordinates.append([pts[1], pts[0]])

    return {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": coordinates},
        "properties": {},
    }


def _as_lists(value: Any) -> Any:
    """Convert the tuples produced by shapely's mapping() into lists."""
    if isinstance(value, dict):
        return {k: _as_lists(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_as_lists(v) for v in value]
    return value
