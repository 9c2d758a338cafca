"""CSV export helpers for saved plans."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from ..models.plan import PlanRow

HEADERS = ["year", "month", "bucket", "category", "amount"]


def export_plan_csv(*, rows: Iterable[PlanRow], output_path: Path) -> Path:
    """Write plan rows to CSV at `output_path`.

    Columns are deterministic: year, month, bucket, category, amount.
    Returns the path written.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Use newline='' for csv on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(
            fh, fieldnames=HEADERS, extrasaction="ignore", quoting=csv.QUOTE_MINIMAL
        )
        writer.writeheader()
        for row in rows:
            writer.writerow(row.as_dict())

    return output_path
