# benches/utils/write_csv.py
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any


def _cell(v: Any) -> Any:
    if v is None:
        return ""
    if isinstance(v, list | tuple | set):
        return ";".join(str(x) for x in v)
    return v


def write_rows_to_csv(
    rows: list[dict[str, Any]], csv_path: str | Path, field_order: list[str] | None = None
) -> Path:
    """
    Write bench result rows to `csv_path` (parent dirs are created).

    Columns come from `field_order`, else from the first row. List values are
    joined with ';' so a sweep axis stays in one cell.
    """
    path = Path(csv_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fieldnames = field_order or (list(rows[0].keys()) if rows else [])

    with path.open("w", newline="", encoding="utf-8") as f:
        if not fieldnames:
            return path
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        writer.writeheader()
        for r in rows:
            writer.writerow({k: _cell(r.get(k)) for k in fieldnames})
    return path
