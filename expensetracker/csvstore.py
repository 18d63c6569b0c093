"""Reading and writing the expense CSV file."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Sequence

HEADERS = ("ID", "Date", "Description", "Amount")

_DIALECT = {"lineterminator": "\n"}


def create_csv_file(path: str | Path) -> None:
    """Create (or truncate) ``path`` and write the header row to it."""
    try:
        with open(path, "w", newline="", encoding="utf-8") as handle:
            csv.writer(handle, **_DIALECT).writerow(HEADERS)
    except OSError as exc:
        raise OSError(f"failed to create file: {exc}") from exc


def _ensure_exists(path: Path) -> None:
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        create_csv_file(path)


def read_csv(path: str | Path) -> list[list[str]]:
    """Return every record of the CSV file, creating it with headers if missing.

    Blank lines are skipped. Every record must have as many fields as the
    first one, otherwise ``csv.Error`` is raised.
    """
    path = Path(path)
    _ensure_exists(path)
    with open(path, newline="", encoding="utf-8") as handle:
        rows = [row for row in csv.reader(handle) if row]
    if rows:
        width = len(rows[0])
        for number, row in enumerate(rows[1:], start=2):
            if len(row) != width:
                raise csv.Error(f"record {number}: wrong number of fields")
    return rows


def write_csv(path: str | Path, rows: Iterable[Sequence[str]]) -> None:
    """Replace the contents of the CSV file with ``rows``."""
    path = Path(path)
    _ensure_exists(path)
    with open(path, "w", newline="", encoding="utf-8") as handle:
        csv.writer(handle, **_DIALECT).writerows(rows)