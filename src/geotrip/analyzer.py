"""Infer the type of each column in a list of records.

A column is TIME when every non-null value is either an epoch number (10
digits for seconds, 13 for milliseconds) or a string matching one shared
date/time pattern. The reported format can be passed to
``geotrip.data_utils.time_to_unix_milli``.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Sequence

from geotrip.feature import ColumnMeta

TIME_PATTERNS = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d %H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
    "%Y:%m:%d %H:%M:%S",
)

NUMERIC_RE = re.compile(r"^-?\d+(\.\d+)?$")

EPOCH_DIGITS = {10: "X", 13: "x"}


def compute_col_meta(records: Sequence[dict]) -> list[ColumnMeta]:
    """Describe every column found in ``records``.

    Args:
        records: Flat dicts; columns are ordered by first appearance.

    Returns:
        One ColumnMeta per column.
    """
    keys: list[str] = []
    for record in records:
        for key in record:
            if key not in keys:
                keys.append(key)

    return [_analyze_column(key, [r.get(key) for r in records]) for key in keys]


def _analyze_column(key: str, values: list) -> ColumnMeta:
    present = [v for v in values if v is not None and v != ""]
    if not present:
        return ColumnMeta(key, "UNKNOWN")

    if all(isinstance(v, bool) for v in present):
        return ColumnMeta(key, "BOOLEAN")
    if all(isinstance(v, dict) for v in present):
        return ColumnMeta(key, "GEOMETRY")

    if all(_is_numeric(v) for v in present):
        epoch_format = _epoch_format(present)
        if epoch_format:
            return ColumnMeta(key, "TIME", epoch_format)
        return ColumnMeta(key, "NUMBER")

    if all(isinstance(v, str) for v in present):
        pattern = _shared_time_pattern(present)
        if pattern:
            return ColumnMeta(key, "TIME", pattern)

    return ColumnMeta(key, "STRING")


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return value == value and value not in (float("inf"), float("-inf"))
    return isinstance(value, str) and bool(NUMERIC_RE.match(value.strip()))


def _epoch_format(values: list) -> str | None:
    formats = {EPOCH_DIGITS.get(len(str(int(abs(float(v)))))) for v in values}
    if len(formats) == 1:
        return formats.pop()
    return None


def _shared_time_pattern(values: list[str]) -> str | None:
    for pattern in TIME_PATTERNS:
        if all(_matches(v.strip(), pattern) for v in values):
            return pattern
    return None


def _matches(text: str, pattern: str) -> bool:
    try:
        datetime.strptime(text, pattern)
    except ValueError:
        return False
    return True
