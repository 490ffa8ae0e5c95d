"""Reading and writing admission records as CSV.

Files carry a header row with the columns in `settings.CSV_FIELDS`;
`complaint` may be omitted.
"""

from __future__ import annotations

import csv
from typing import Iterable, List

from ..business.records import AdmissionRecord
from ..settings import CSV_FIELDS, REQUIRED_FIELDS


def load_records(path: str) -> List[AdmissionRecord]:
    """Read every record in the CSV at `path`, in file order.

    Raises:
        ValueError: if required columns are missing or a row is malformed
            (the message names the file line).
    """
    records: List[AdmissionRecord] = []
    # utf-8-sig drops the BOM spreadsheet exports put before the header
    with open(path, "r", newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        missing = [c for c in REQUIRED_FIELDS if c not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"{path}: missing column(s): {', '.join(missing)}")
        for row in reader:
            try:
                records.append(AdmissionRecord.from_row(row))
            except ValueError as exc:
                raise ValueError(f"{path}, line {reader.line_num}: {exc}") from exc
    return records


def write_records(path: str, records: Iterable[AdmissionRecord]) -> int:
    """Write `records` to `path` in the given order; return the row count."""
    count = 0
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(CSV_FIELDS))
        writer.writeheader()
        for r in records:
            writer.writerow(r.to_row())
            count += 1
    return count
