"""Tabular views of a budget session for printing and export."""

from __future__ import annotations

import pandas as pd

from ..constants.categories import ALLOCATION_BUCKETS, Bucket
from . import metrics
from .session import BudgetSession


def build_grid_frame(session: BudgetSession) -> pd.DataFrame:
    """One row per category, one column per grid column, plus the bucket label.

    Rows follow registry order; the frame is indexed by display name.
    """

    columns = session.columns()
    records = []
    for category in session.registry:
        record: dict[str, object] = {
            "category": category.name,
            "bucket": category.bucket.label,
        }
        for column in columns:
            record[column.label] = session.cell_value(category.id, column)
        records.append(record)

    frame = pd.DataFrame.from_records(
        records, columns=["category", "bucket", *[c.label for c in columns]]
    )
    return frame.set_index("category")


def build_summary_frame(session: BudgetSession) -> pd.DataFrame:
    """Bucket totals, net cash flow and allocation shares for each grid column."""

    rows = []
    for column in session.columns():
        totals = session.totals(column)
        shares = metrics.percentages(totals)
        row: dict[str, object] = {"column": column.label}
        for bucket in Bucket:
            row[bucket.label] = totals.for_bucket(bucket)
        row["Net Cash Flow"] = metrics.net_cash_flow(totals)
        for bucket in ALLOCATION_BUCKETS:
            row[f"{bucket.label} %"] = shares[bucket]
        rows.append(row)

    return pd.DataFrame(rows).set_index("column")


__all__ = ["build_grid_frame", "build_summary_frame"]
