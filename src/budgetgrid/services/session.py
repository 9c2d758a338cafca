"""Editing session: the object a front-end holds while a plan is open."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Iterable, Mapping

from ..constants.categories import Bucket
from ..logging_config import get_logger
from ..models.plan import PlanRow
from . import metrics, plan_io, projector, resolver
from .columns import ColumnDef, ViewMode, columns_for
from .history import MAX_HISTORY_SIZE, HistoryManager
from .registry import Category, CategoryRegistry
from .store import TimeKeyedStore

logger = get_logger("session")

ConfirmCallback = Callable[[projector.EditPlan], bool]


class BudgetSession:
    """Owns the store, its history, the category registry and propagation flags.

    Every edit replaces the current store with a new one and records it in
    the history, so ``store`` always equals ``history.current``.
    """

    def __init__(
        self,
        *,
        reference_date: date | None = None,
        registry: CategoryRegistry | None = None,
        initial: TimeKeyedStore | None = None,
        history_size: int = MAX_HISTORY_SIZE,
        view_mode: ViewMode = ViewMode.MONTHLY,
    ) -> None:
        self.reference_date = (reference_date or date.today()).replace(day=1)
        self._registry = registry if registry is not None else CategoryRegistry()
        self._history = HistoryManager(initial, max_size=history_size)
        self._propagation: dict[str, bool] = {cid: True for cid in self._registry.ids()}
        self._view_mode = ViewMode.parse(view_mode)
        self.has_changes = False

    # -- state ---------------------------------------------------------------

    @property
    def store(self) -> TimeKeyedStore:
        return self._history.current

    @property
    def registry(self) -> CategoryRegistry:
        return self._registry

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    def set_view_mode(self, view_mode: ViewMode | str) -> None:
        """Change how columns group months; stored amounts are untouched."""
        self._view_mode = ViewMode.parse(view_mode)

    def columns(self) -> list[ColumnDef]:
        return columns_for(self._view_mode, self.reference_date)

    # -- reads ---------------------------------------------------------------

    def cell_value(self, category_id: str, column: ColumnDef) -> float:
        return resolver.cell_value(self.store, category_id, column)

    def bucket_total(self, bucket: Bucket, column: ColumnDef) -> float:
        return resolver.bucket_total(self.store, self._registry, bucket, column)

    def totals(self, column: ColumnDef) -> metrics.BucketTotals:
        return resolver.bucket_totals(self.store, self._registry, column)

    def net_cash_flow(self, column: ColumnDef) -> float:
        return metrics.net_cash_flow(self.totals(column))

    def percentages(self, column: ColumnDef) -> dict[Bucket, int]:
        return metrics.percentages(self.totals(column))

    # -- edits ---------------------------------------------------------------

    def propose_edit(
        self, category_id: str, column: ColumnDef, raw_amount: str | float | None
    ) -> projector.EditPlan:
        return projector.propose_edit(
            self.store,
            category_id,
            column,
            projector.parse_amount(raw_amount),
            self._view_mode,
            self.is_propagating(category_id),
        )

    def commit_edit(self, plan: projector.EditPlan) -> TimeKeyedStore:
        new_store = projector.commit_edit(self.store, plan)
        self._record(new_store)
        logger.info(
            "Edit committed",
            extra={
                "category_id": plan.category_id,
                "column": plan.column.label,
                "amount": plan.entered_amount,
                "propagate": plan.propagate,
            },
        )
        return new_store

    def edit(
        self,
        category_id: str,
        column: ColumnDef,
        raw_amount: str | float | None,
        *,
        confirm: ConfirmCallback | None = None,
    ) -> bool:
        """Apply an edit, asking ``confirm`` first when it would overwrite several months.

        Returns False when the edit was declined (or no callback was given for
        an aggregate view); nothing changes in that case.
        """
        plan = self.propose_edit(category_id, column, raw_amount)
        if plan.requires_confirmation and (confirm is None or not confirm(plan)):
            logger.info("Aggregate edit cancelled", extra={"category_id": category_id})
            return False
        self.commit_edit(plan)
        return True

    def _record(self, new_store: TimeKeyedStore) -> None:
        self._history.record(new_store)
        self.has_changes = True

    # -- history -------------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def undo(self) -> bool:
        if self._history.undo() is None:
            return False
        self.has_changes = True
        return True

    def redo(self) -> bool:
        if self._history.redo() is None:
            return False
        self.has_changes = True
        return True

    def reset(self) -> None:
        """Clear every amount as a single undoable step."""
        self._history.reset()
        self.has_changes = True
        logger.info("Plan reset")

    # -- propagation flags ---------------------------------------------------

    def is_propagating(self, category_id: str) -> bool:
        return self._propagation.get(category_id, True)

    def toggle_propagation(self, category_id: str) -> bool:
        self._propagation[category_id] = not self.is_propagating(category_id)
        return self._propagation[category_id]

    def set_propagation(self, category_id: str, enabled: bool) -> None:
        self._propagation[category_id] = bool(enabled)

    def set_all_propagation(self, enabled: bool) -> None:
        for category_id in set(self._propagation) | set(self._registry.ids()):
            self._propagation[category_id] = bool(enabled)

    # -- categories ----------------------------------------------------------

    def add_category(self, bucket: Bucket | str, name: str) -> Category | None:
        category = self._registry.add(bucket, name)
        if category is not None:
            self._propagation[category.id] = True
            self.has_changes = True
        return category

    def rename_category(self, category_id: str, new_name: str) -> None:
        if category_id in self._registry:
            self._registry.rename(category_id, new_name)
            self.has_changes = True

    def remove_category(self, category_id: str) -> None:
        if category_id in self._registry:
            self._registry.remove(category_id)
            self._propagation.pop(category_id, None)
            self.has_changes = True

    def resolve_category(self, token: str) -> Category | None:
        """Find a category by id first, then by display name."""
        return self._registry.get(token) or self._registry.find_by_name(token)

    # -- load / save ---------------------------------------------------------

    def load_rows(self, rows: Iterable[PlanRow | Mapping[str, Any]]) -> TimeKeyedStore:
        """Replace the plan with persisted rows; history restarts from the loaded state."""
        loaded = plan_io.rows_to_store(rows, self._registry, self.reference_date)
        self._history.replace(loaded)
        self.has_changes = False
        logger.info("Plan loaded", extra={"entries": len(loaded)})
        return loaded

    def to_rows(self) -> list[PlanRow]:
        return plan_io.store_to_rows(self.store, self._registry, self.reference_date)

    def mark_saved(self) -> None:
        self.has_changes = False


__all__ = ["BudgetSession", "ConfirmCallback"]
