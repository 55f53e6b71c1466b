"""Build the index-aligned row → Feature map for a dataset."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from loguru import logger

from geotrip.feature import ACCEPTABLE_TYPES
from geotrip.parsers.raw_feature import parse_raw_feature


def build_feature_map(
    rows: Sequence[Any], get_feature: Callable[[Any], Any]
) -> list[dict | None]:
    """Parse the geometry value of every row into a Feature.

    Args:
        rows: Source rows, in order.
        get_feature: Returns the raw geometry value of a row.

    Returns:
        List the same length as ``rows``. Position i holds the Feature for
        row i with ``properties["index"] == i``, or None if the row did not
        parse to an acceptable geometry.
    """
    data_to_feature: list[dict | None] = [None] * len(rows)

    for index, row in enumerate(rows):
        feature = parse_raw_feature(get_feature(row))
        geometry = feature.get("geometry") if feature else None

        if not isinstance(geometry, dict) or geometry.get("type") not in ACCEPTABLE_TYPES:
            continue

        data_to_feature[index] = {
            **feature,
            "properties": {**(feature.get("properties") or {}), "index": index},
        }

    dropped = data_to_feature.count(None)
    if dropped:
        logger.debug(f"Feature map: {dropped} of {len(rows)} rows have no usable geometry")
    return data_to_feature
