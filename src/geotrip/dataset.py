"""Summarize a geometry column: feature types, extent and trip timeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from loguru import logger

from geotrip.bounds import compute_bounds
from geotrip.classify import classify_feature_types
from geotrip.feature import Field, TripTimeline
from geotrip.feature_map import build_feature_map
from geotrip.trip import extract_trip_timestamps, is_trip_field


@dataclass
class LayerMeta:
    """Derived metadata for one geometry column.

    Attributes:
        field: The geometry column.
        feature_map: Index-aligned features, None for unusable rows.
        feature_types: Presence map of "point", "line", "polygon".
        bounds: ``[min_x, min_y, max_x, max_y]`` or None if unknown.
        is_trip: Whether the column can be animated as trips.
        timeline: Trip timestamps, only set when ``is_trip``.
    """

    field: Field
    feature_map: list
    feature_types: dict
    bounds: list | None
    is_trip: bool
    timeline: TripTimeline | None = None

    def to_dict(self) -> dict:
        """JSON-friendly summary without the per-row data."""
        return {
            "field": self.field.name,
            "rows": len(self.feature_map),
            "features": sum(1 for f in self.feature_map if f is not None),
            "feature_types": sorted(self.feature_types),
            "bounds": self.bounds,
            "is_trip": self.is_trip,
            "domain": list(self.timeline.domain)
            if self.timeline and self.timeline.domain
            else None,
        }


def build_layer_meta(rows: Sequence[Sequence[Any]], field: Field) -> LayerMeta:
    """Parse a geometry column and compute its layer metadata.

    Args:
        rows: Row value arrays.
        field: Column holding the raw geometry values.
    """
    feature_map = build_feature_map(rows, field.value_of)
    feature_types = classify_feature_types(feature_map)
    bounds = compute_bounds(feature_map)

    is_trip = is_trip_field(rows, field)
    timeline = extract_trip_timestamps(feature_map) if is_trip else None

    logger.info(
        f"Layer meta for {field.name!r}: types={sorted(feature_types)} trip={is_trip}"
    )
    return LayerMeta(
        field=field,
        feature_map=feature_map,
        feature_types=feature_types,
        bounds=bounds,
        is_trip=is_trip,
        timeline=timeline,
    )
