"""Convert columnar YouTube Analytics payloads into row records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import MalformedReport
from .models import AnalyticsReport


def normalize_report(payload: Mapping[str, Any]) -> AnalyticsReport:
    """Zip every row against the column names.

    ``{"columnHeaders": [{"name": "day"}, {"name": "views"}],
    "rows": [["2024-01-01", 100]]}`` becomes
    ``[{"day": "2024-01-01", "views": 100}]``. Row order is preserved.

    Raises:
        MalformedReport: If a row does not match the column count, rows come
            without columns, or column names are missing or repeated.
    """
    headers = payload.get("columnHeaders") or []
    rows = payload.get("rows") or []

    if not isinstance(headers, list) or not isinstance(rows, list):
        raise MalformedReport("columnHeaders and rows must be lists")

    columns: list[str] = []
    for index, header in enumerate(headers):
        name = header.get("name") if isinstance(header, Mapping) else None
        if not name:
            raise MalformedReport(f"Column {index} has no name")
        if name in columns:
            raise MalformedReport(f"Column {name!r} appears more than once")
        columns.append(name)

    if rows and not columns:
        raise MalformedReport(f"Report has {len(rows)} rows but no columns")

    records = []
    for index, row in enumerate(rows):
        if not isinstance(row, list) or len(row) != len(columns):
            raise MalformedReport(
                f"Row {index} has {len(row) if isinstance(row, list) else 'no'} "
                f"values, expected {len(columns)}"
            )
        records.append(dict(zip(columns, row)))

    return AnalyticsReport(columns=columns, rows=records)
