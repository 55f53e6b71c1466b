"""Dataclasses and geometry helpers shared by the parsing and trip modules.

Features themselves stay plain GeoJSON dicts:
``{"type": "Feature", "geometry": {...}, "properties": {...}}``. Coordinates
follow GeoJSON convention, [lng, lat] or [lng, lat, alt, time].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence, Union

ACCEPTABLE_TYPES = (
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
)


@dataclass(frozen=True)
class GeoObject:
    """A raw value that is already a GeoJSON-like dict."""

    value: dict


@dataclass(frozen=True)
class JsonText:
    """A string whose JSON parse produced a usable value."""

    value: Any


@dataclass(frozen=True)
class WktText:
    """A string that did not parse as JSON; tried as Well-Known Text."""

    text: str


@dataclass(frozen=True)
class CoordArray:
    """A sequence of [lat, lng] pairs describing a line."""

    pairs: list


RawInput = Union[GeoObject, JsonText, WktText, CoordArray]


@dataclass(frozen=True)
class Field:
    """A column of a row table.

    Attributes:
        name: Column header.
        table_field_index: 1-based position of the column in each row.
    """

    name: str
    table_field_index: int

    def value_of(self, row: Sequence[Any]) -> Any:
        """The raw value of this field in a row, None if the row is too short."""
        if len(row) < self.table_field_index:
            return None
        return row[self.table_field_index - 1]


@dataclass(frozen=True)
class ColumnMeta:
    """Inferred type of a column of values.

    Attributes:
        key: Record key the column was read from.
        category: One of "TIME", "NUMBER", "STRING", "BOOLEAN", "GEOMETRY",
            "UNKNOWN".
        format: For TIME columns, "x" (epoch milliseconds), "X" (epoch
            seconds) or a ``strptime`` pattern. Empty otherwise.
    """

    key: str
    category: str
    format: str = ""


@dataclass(frozen=True)
class TripTimeline:
    """Per-feature vertex timestamps and the overall animation domain.

    Attributes:
        timestamps: Index-aligned with the feature map. ``None`` for an absent
            feature, else one millisecond epoch (or ``None``) per vertex.
        domain: ``(min, max)`` over all timestamps, ``None`` if there are none.
    """

    timestamps: list = field(default_factory=list)
    domain: tuple[int, int] | None = None


def is_position(value: Any) -> bool:
    """True if value looks like a single GeoJSON position."""
    return (
        isinstance(value, (list, tuple))
        and len(value) > 0
        and not isinstance(value[0], (list, tuple))
    )


def iter_positions(coordinates: Any) -> Iterator[list]:
    """Yield every position of a nested coordinate array in order."""
    if not isinstance(coordinates, (list, tuple)) or not coordinates:
        return
    if is_position(coordinates):
        yield coordinates
        return
    for child in coordinates:
        yield from iter_positions(child)


def feature_vertices(feature: dict | None) -> list | None:
    """Flattened positions of a feature, or None when it has no coordinates.

    For a LineString this is its coordinate list.
    """
    if not feature:
        return None
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict):
        return None
    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, (list, tuple)):
        return None
    return list(iter_positions(coordinates))
