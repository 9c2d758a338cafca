"""Edit projection: writing one grid edit back into per-month amounts.

An amount typed into a column is split evenly over the months the column
spans, replacing whatever those months held before. With propagation on, the
same per-month amount is also written to every later month of the editable
horizon, including months outside the visible columns.

Edits made outside the monthly view overwrite several months at once, so they
go through a two-step flow: ``propose_edit`` describes the write without
touching anything and ``commit_edit`` performs it once the user agrees.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from ..logging_config import get_logger
from .columns import ColumnDef, ViewMode
from .formatting import format_money
from .store import MAX_MONTH_INDEX, TimeKeyedStore

logger = get_logger("projector")

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_FLOAT = re.compile(r"\d*\.?\d*")


def parse_amount(raw: str | float | int | None) -> float:
    """Parse user-typed text into an amount, defaulting to 0.

    Every character other than digits and ``.`` is dropped first, so
    ``"$1,500"`` reads as 1500 and ``"-20"`` as 20. Of what remains, the
    longest leading number is used (``"1.2.3"`` reads as 1.2). Numbers lose
    their sign the same way, and non-finite numbers read as 0.
    """

    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        value = abs(float(raw))
        return value if math.isfinite(value) else 0.0
    cleaned = _NON_NUMERIC.sub("", str(raw))
    match = _LEADING_FLOAT.match(cleaned)
    candidate = match.group(0) if match else ""
    if not candidate or candidate == ".":
        return 0.0
    try:
        return float(candidate)
    except ValueError:
        return 0.0


@dataclass(frozen=True, slots=True)
class EditPlan:
    """Description of a pending edit; building one never changes any store."""

    category_id: str
    column: ColumnDef
    entered_amount: float
    view_mode: ViewMode
    propagate: bool
    per_month: float
    horizon: int = MAX_MONTH_INDEX
    overwritten: tuple[tuple[int, float], ...] = field(default=())

    @property
    def requires_confirmation(self) -> bool:
        return self.view_mode is not ViewMode.MONTHLY

    @property
    def span_months(self) -> range:
        return self.column.months()

    @property
    def propagated_months(self) -> range:
        if not self.propagate:
            return range(0)
        return range(self.column.end, self.horizon)

    def affected_months(self) -> list[int]:
        return list(self.span_months) + list(self.propagated_months)

    def confirmation_message(self, *, symbol: str = "$") -> str:
        return (
            "You are editing a consolidated view. This will overwrite "
            f"{self.column.span} individual monthly records with an average of "
            f"{format_money(self.per_month, symbol=symbol)} each. Proceed?"
        )


def propose_edit(
    store: TimeKeyedStore,
    category_id: str,
    column: ColumnDef,
    entered_amount: float,
    view_mode: ViewMode,
    propagation_enabled: bool,
) -> EditPlan:
    """Describe what ``commit_edit`` would write, and which distinct values it replaces."""

    per_month = entered_amount / column.span
    overwritten = tuple(
        (month, store.get(category_id, month))
        for month in column.months()
        if store.get(category_id, month) != per_month
    )
    return EditPlan(
        category_id=category_id,
        column=column,
        entered_amount=entered_amount,
        view_mode=ViewMode.parse(view_mode),
        propagate=propagation_enabled,
        per_month=per_month,
        overwritten=overwritten,
    )


def commit_edit(store: TimeKeyedStore, plan: EditPlan) -> TimeKeyedStore:
    """Apply ``plan`` to ``store`` and return the resulting new store."""

    updates = {month: plan.per_month for month in plan.affected_months()}
    logger.debug(
        "Committing edit",
        extra={
            "category_id": plan.category_id,
            "column": plan.column.label,
            "per_month": plan.per_month,
            "months_written": len(updates),
        },
    )
    return store.with_values(plan.category_id, updates)


def apply_edit(
    store: TimeKeyedStore,
    category_id: str,
    column: ColumnDef,
    entered_amount: float,
    view_mode: ViewMode,
    propagation_enabled: bool,
) -> TimeKeyedStore:
    """Propose and commit in one step; callers handle any confirmation beforehand."""

    plan = propose_edit(
        store, category_id, column, entered_amount, view_mode, propagation_enabled
    )
    return commit_edit(store, plan)


__all__ = ["EditPlan", "apply_edit", "commit_edit", "parse_amount", "propose_edit"]
