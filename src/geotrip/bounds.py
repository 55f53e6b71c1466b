"""Bounding box of a set of GeoJSON features."""

from __future__ import annotations

from typing import Sequence

from loguru import logger
from shapely.errors import ShapelyError
from shapely.geometry import MultiPoint

from geotrip.config import settings
from geotrip.data_utils import get_sample_data
from geotrip.feature import iter_positions


def compute_bounds(
    features: Sequence[dict | None], cap: int | None = None
) -> list[float] | None:
    """Envelope of ``features`` as ``[min_x, min_y, max_x, max_y]``.

    Args:
        features: Features, None entries allowed.
        cap: Sample down to about this many features first. Defaults to
            ``settings.bounds_sample_cap``.

    Returns:
        The bounds, or None if no feature has usable coordinates.
    """
    max_count = cap if cap is not None else settings.bounds_sample_cap
    samples = (
        get_sample_data(features, max_count) if len(features) > max_count else features
    )

    non_empty = [
        f for f in samples
        if f and isinstance(f.get("geometry"), dict) and f["geometry"].get("coordinates")
    ]

    try:
        return _bbox({"type": "FeatureCollection", "features": non_empty})
    except (ShapelyError, ValueError, TypeError, IndexError) as e:
        logger.debug(f"Bounds computation failed: {e}")
        return None


def _bbox(collection: dict) -> list[float]:
    points = [
        (float(pos[0]), float(pos[1]))
        for feature in collection["features"]
        for pos in iter_positions(feature["geometry"]["coordinates"])
    ]
    if not points:
        raise ValueError("No coordinates to compute bounds from")
    return list(MultiPoint(points).bounds)
