"""Small data helpers: stride sampling, null checks, time-to-epoch conversion."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Sequence

from dateutil import parser as date_parser


def get_sample_data(
    data: Sequence[Any],
    sample_size: int = 500,
    get_value: Callable[[Any], Any] | None = None,
) -> list:
    """Take every n-th element so that roughly ``sample_size`` remain.

    Order is preserved. ``get_value`` is applied to each picked element.
    """
    step = max(len(data) // max(sample_size, 1), 1)
    picked = [data[i] for i in range(0, len(data), step)]
    if get_value is None:
        return picked
    return [get_value(d) for d in picked]


def not_null(value: Any) -> bool:
    return value is not None


def time_to_unix_milli(value: Any, fmt: str) -> int:
    """Convert a raw time value to milliseconds since the epoch.

    A string that does not match a ``strptime`` pattern is still accepted
    when it is valid ISO 8601 (parsed with ``dateutil.parser.isoparse``).

    Args:
        value: Epoch number or date/time string.
        fmt: "x" for epoch milliseconds, "X" for epoch seconds, otherwise a
            ``strptime`` pattern. Naive date/times are read as UTC.

    Raises:
        ValueError: If the value cannot be converted.
    """
    if fmt == "x":
        return round(float(value))
    if fmt == "X":
        return round(float(value) * 1000)

    text = str(value).strip()
    try:
        dt = datetime.strptime(text, fmt)
    except ValueError:
        try:
            dt = date_parser.isoparse(text)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Cannot convert {value!r} with format {fmt!r}") from e

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return round(dt.timestamp() * 1000)
