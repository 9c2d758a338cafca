"""Translation between calendar-dated plan rows and the month-indexed store."""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Mapping

from ..logging_config import get_logger
from ..models.plan import PlanRow
from .registry import CategoryRegistry
from .store import TimeKeyedStore, make_key

logger = get_logger("plan_io")

EDITABLE_MONTHS = 12


def _field(row: PlanRow | Mapping[str, Any], name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def month_index_for(year: int, month: int, reference_date: date) -> int:
    """Offset of (year, month) from the reference month."""

    return (year - reference_date.year) * 12 + (month - reference_date.month)


def calendar_month(reference_date: date, month_index: int) -> tuple[int, int]:
    """Inverse of ``month_index_for``: return (year, month) for an offset."""

    zero_based = reference_date.month - 1 + month_index
    return reference_date.year + zero_based // 12, zero_based % 12 + 1


def window_months(reference_date: date) -> list[tuple[int, int]]:
    """Calendar (year, month) pairs of the editable window, in order."""

    return [calendar_month(reference_date, i) for i in range(EDITABLE_MONTHS)]


def rows_to_store(
    rows: Iterable[PlanRow | Mapping[str, Any]],
    registry: CategoryRegistry,
    reference_date: date,
) -> TimeKeyedStore:
    """Build a store from persisted rows.

    Only the first ``EDITABLE_MONTHS`` months from the reference month are
    kept. Categories are matched on display name, case-insensitively; rows
    naming an unknown category are dropped.
    """

    values: dict[str, float] = {}
    dropped = 0
    for row in rows:
        try:
            year = int(_field(row, "year"))
            month = int(_field(row, "month"))
            amount = float(_field(row, "amount") or 0)
        except (TypeError, ValueError):
            dropped += 1
            continue

        month_index = month_index_for(year, month, reference_date)
        if not 0 <= month_index < EDITABLE_MONTHS:
            dropped += 1
            continue

        category = registry.find_by_name(str(_field(row, "category") or ""))
        if category is None:
            dropped += 1
            continue
        values[make_key(category.id, month_index)] = amount

    if dropped:
        logger.info("Skipped plan rows on load", extra={"dropped": dropped, "kept": len(values)})
    return TimeKeyedStore(values)


def store_to_rows(
    store: TimeKeyedStore, registry: CategoryRegistry, reference_date: date
) -> list[PlanRow]:
    """Emit one row per category and month with a strictly positive amount."""

    rows: list[PlanRow] = []
    for month_index in range(EDITABLE_MONTHS):
        year, month = calendar_month(reference_date, month_index)
        for category in registry:
            amount = store.get(category.id, month_index)
            if amount > 0:
                rows.append(
                    PlanRow(
                        year=year,
                        month=month,
                        bucket=category.bucket.label,
                        category=category.name,
                        amount=amount,
                    )
                )
    return rows


__all__ = [
    "EDITABLE_MONTHS",
    "calendar_month",
    "month_index_for",
    "rows_to_store",
    "store_to_rows",
    "window_months",
]
