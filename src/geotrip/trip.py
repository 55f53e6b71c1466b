"""Trip layer detection and per-vertex timestamp extraction.

A trip dataset is a column of line geometries whose vertices carry a fourth
coordinate holding a time value (epoch number or date/time string). Such a
dataset can be animated along its time domain.
"""

from __future__ import annotations

import math
import time
from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator, Sequence

from loguru import logger

from geotrip.analyzer import compute_col_meta
from geotrip.classify import classify_feature_types, geo_type_of
from geotrip.config import settings
from geotrip.data_utils import get_sample_data, not_null, time_to_unix_milli
from geotrip.feature import ColumnMeta, Field, TripTimeline, feature_vertices
from geotrip.parsers.raw_feature import parse_raw_feature

StepHook = Callable[[str, float], None]


@contextmanager
def _timed_step(name: str, on_step: StepHook | None) -> Iterator[None]:
    start = time.perf_counter()
    yield
    if on_step is not None:
        on_step(name, time.perf_counter() - start)


def _fourth(coord: Any) -> Any:
    if isinstance(coord, (list, tuple)) and len(coord) > 3:
        return coord[3]
    return None


def is_valid_time_column(values: Iterable[Any]) -> ColumnMeta | bool:
    """Check whether ``values`` form a time series.

    Returns:
        The inferred ColumnMeta (category "TIME" with its format), or False.
    """
    records = [{"ts": ts} for ts in values]
    metas = compute_col_meta(records)
    analyzed = metas[0] if metas else None

    if not analyzed or analyzed.category != "TIME":
        return False
    return analyzed


def all_coords_have_at_least_4(features: Iterable[dict | None]) -> bool:
    """True if every vertex of every feature has at least 4 components.

    Vacuously true for no features. Absent features are skipped.
    """
    for feature in features:
        if feature is None:
            continue
        vertices = feature_vertices(feature) or []
        if any(len(coord) < 4 for coord in vertices):
            return False
    return True


def is_trip_field(all_rows: Sequence[Sequence[Any]], field: Field) -> bool:
    """Decide whether a geometry column can be animated as a trip layer.

    Checks run cheapest first: a line geometry must be present, every sampled
    vertex must have 4 components, and the 4th components of the first line
    feature must be a valid time column.

    Args:
        all_rows: Row value arrays.
        field: Column holding the raw geometry values.
    """
    max_count = settings.sample_cap
    if len(all_rows) > max_count:
        sample_raw = get_sample_data(all_rows, max_count, field.value_of)
    else:
        sample_raw = [field.value_of(row) for row in all_rows]

    features = [parse_raw_feature(raw) for raw in sample_raw]

    # condition 1: contains line geometry
    if not classify_feature_types(features).get("line"):
        return False

    # condition 2: every sampled vertex has a 4th coordinate
    if not all_coords_have_at_least_4(features):
        logger.debug(f"Field {field.name!r}: line vertices lack a 4th coordinate")
        return False

    # condition 3: the 4th coordinate of the first line is a valid time
    first_line = next(f for f in features if geo_type_of(f) == "line")
    ts_holder = [_fourth(coord) for coord in feature_vertices(first_line) or []]

    analyzed = is_valid_time_column(ts_holder)
    if not analyzed:
        logger.debug(f"Field {field.name!r}: 4th coordinate is not a time value")
        return False
    return True


def extract_trip_timestamps(
    feature_map: Sequence[dict | None], on_step: StepHook | None = None
) -> TripTimeline:
    """Convert the 4th coordinate of every vertex to a millisecond timestamp.

    The time format is inferred from the first feature with at least
    ``settings.min_trip_vertices`` vertices and applied to all features.

    Args:
        feature_map: Index-aligned features, None for holes.
        on_step: Optional ``(step_name, seconds)`` callback for timing.

    Returns:
        TripTimeline; empty with a None domain if no time format is found.
    """
    with _timed_step("analyze_type", on_step):
        sample_trip = None
        for feature in feature_map:
            vertices = feature_vertices(feature)
            if vertices is not None and len(vertices) >= settings.min_trip_vertices:
                sample_trip = vertices
                break

        analyzed = False
        if sample_trip is not None:
            analyzed = is_valid_time_column(_fourth(coord) for coord in sample_trip)

    if not analyzed:
        logger.warning("No time format detected in trip coordinates")
        return TripTimeline([], None)

    fmt = analyzed.format

    def get_time_value(coord):
        value = _fourth(coord)
        if not not_null(value):
            return None
        try:
            return time_to_unix_milli(value, fmt)
        except (ValueError, TypeError, OverflowError) as e:
            logger.debug(f"Timestamp conversion failed: {e}")
            return None

    with _timed_step("map_values", on_step):
        timestamps = []
        for feature in feature_map:
            vertices = feature_vertices(feature)
            if vertices is None:
                timestamps.append(None)
            else:
                timestamps.append([get_time_value(coord) for coord in vertices])

    with _timed_step("domain", on_step):
        domain = compute_time_domain(timestamps)

    return TripTimeline(timestamps, domain)


def compute_time_domain(
    timestamps: Iterable[Sequence[int | None] | None],
) -> tuple[int, int] | None:
    """Animation domain of a timestamp table.

    Uses each feature's first non-null value as its minimum and last non-null
    value as its maximum, which assumes timestamps along a trip never
    decrease. Out-of-order vertices can produce a domain narrower than the
    true range.

    Returns:
        ``(min, max)``, or None when the table has no timestamps.
    """
    lo, hi = math.inf, -math.inf
    for series in timestamps:
        if not series:
            continue
        first = next((t for t in series if t is not None), None)
        if first is None:
            continue
        last = next(t for t in reversed(series) if t is not None)
        lo = min(lo, first)
        hi = max(hi, last)

    if lo == math.inf:
        return None
    return (lo, hi)
