"""Flat-file output for the final table."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Iterable

from diningmap.pipeline.models import TABLE_COLUMNS, DiningLocationRow

_DELIMITERS = {"csv": ",", "tsv": "\t"}
FORMATS = (*_DELIMITERS, "json")


def write_table(
    rows: Iterable[DiningLocationRow],
    path: str | Path,
    fmt: str = "csv",
) -> Path:
    """Write *rows* to *path* as ``csv``, ``tsv`` or ``json``.

    Columns are ``label, link, latitude, longitude``.  Missing parent
    directories are created.

    Raises:
        ValueError: If *fmt* is not a supported format.
    """
    fmt = fmt.lower()
    if fmt not in FORMATS:
        raise ValueError(f"Unknown table format {fmt!r}. Use: {' | '.join(FORMATS)}")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    records = [row.as_dict() for row in rows]

    if fmt == "json":
        path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
        return path

    with path.open("w", encoding="utf-8", newline="") as fh:
        writer = csv.DictWriter(fh, fieldnames=TABLE_COLUMNS, delimiter=_DELIMITERS[fmt])
        writer.writeheader()
        writer.writerows(records)
    return path
