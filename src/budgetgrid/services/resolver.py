"""Cell and bucket aggregation over the time-keyed store."""

from __future__ import annotations

from ..constants.categories import Bucket
from .columns import ColumnDef
from .metrics import BucketTotals
from .registry import CategoryRegistry
from .store import TimeKeyedStore


def cell_value(store: TimeKeyedStore, category_id: str, column: ColumnDef) -> float:
    """Sum of the category's months covered by ``column``."""

    return store.get_range(category_id, column.index, column.span)


def bucket_total(
    store: TimeKeyedStore, registry: CategoryRegistry, bucket: Bucket, column: ColumnDef
) -> float:
    """Sum of ``cell_value`` over the categories currently assigned to ``bucket``."""

    return sum(
        (cell_value(store, category.id, column) for category in registry.list_by_bucket(bucket)),
        0.0,
    )


def bucket_totals(
    store: TimeKeyedStore, registry: CategoryRegistry, column: ColumnDef
) -> BucketTotals:
    return BucketTotals(
        income=bucket_total(store, registry, Bucket.INCOME, column),
        future=bucket_total(store, registry, Bucket.FUTURE, column),
        living=bucket_total(store, registry, Bucket.LIVING, column),
        present=bucket_total(store, registry, Bucket.PRESENT, column),
    )


__all__ = ["bucket_total", "bucket_totals", "cell_value"]
