"""Inspect a geometry column of a CSV file.

Run:
    python -m geotrip trips.csv --field geojson
"""

from __future__ import annotations

import argparse
import csv
import json
import sys
from pathlib import Path

from loguru import logger

from geotrip.config import settings
from geotrip.dataset import build_layer_meta
from geotrip.loaders import find_field, load_csv_rows


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="geotrip",
        description="Summarize feature types, bounds and trip timeline of a geometry column",
    )
    parser.add_argument("path", type=Path, help="CSV file with a header row")
    parser.add_argument("--field", required=True, help="Name of the geometry column")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level for stderr")
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    try:
        content = args.path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Cannot read {args.path}: {e}")
        return 2

    try:
        fields, rows = load_csv_rows(content)
    except csv.Error as e:
        logger.error(f"Cannot parse {args.path} as CSV: {e}")
        return 2

    field = find_field(fields, args.field)
    if field is None:
        logger.error(f"Field {args.field!r} not found; available: {[f.name for f in fields]}")
        return 2

    meta = build_layer_meta(rows, field)
    print(json.dumps(meta.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
