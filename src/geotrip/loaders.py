"""Load a CSV table into fields and row value arrays.

Uses stdlib csv. The header row names the fields; every following row is a
list of cell strings. A geometry column usually holds GeoJSON or WKT text.
"""

from __future__ import annotations

import csv
import io

from geotrip.feature import Field

# Per-cell limit; csv defaults to 128 KiB
MAX_CELL_SIZE = 2**31 - 1


def load_csv_rows(csv_string: str) -> tuple[list[Field], list[list[str]]]:
    """Parse CSV content into (fields, rows).

    Args:
        csv_string: Raw CSV content with a header row.

    Returns:
        Fields with 1-based ``table_field_index`` and rows padded to the
        header width. Empty lists if the content is empty.

    Raises:
        csv.Error: If the content is not valid CSV.
    """
    csv.field_size_limit(MAX_CELL_SIZE)
    records = list(csv.reader(io.StringIO(csv_string)))

    if not records:
        return [], []

    header = [h.strip() for h in records[0]]
    fields = [Field(name=name, table_field_index=i + 1) for i, name in enumerate(header)]

    rows: list[list[str]] = []
    for record in records[1:]:
        if not record:
            continue
        rows.append((record + [""] * len(header))[: len(header)])
    return fields, rows


def find_field(fields: list[Field], name: str) -> Field | None:
    """Look up a field by header name (case-insensitive)."""
    wanted = name.lower().strip()
    for f in fields:
        if f.name.lower() == wanted:
            return f
    return None
