"""SQLModel implementation of the plan repository."""

from __future__ import annotations

from typing import Callable, Iterable

from sqlmodel import Session, select

from ...logging_config import get_logger
from ...models.plan import PlanRow

logger = get_logger("infra.plan")


class SQLModelPlanRepository:
    """SQLModel-based plan repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def load_rows(self, *, from_year: int) -> list[PlanRow]:
        """Return rows for ``from_year`` onwards, ordered by year then month."""
        with self.session_factory() as session:
            statement = (
                select(PlanRow)
                .where(PlanRow.year >= from_year)
                .order_by(PlanRow.year, PlanRow.month, PlanRow.id)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def save_rows(
        self,
        rows: Iterable[PlanRow],
        *,
        months: Iterable[tuple[int, int]] | None = None,
    ) -> int:
        """Replace stored rows with ``rows``.

        With ``months`` the given (year, month) pairs are cleared before
        inserting, even when ``rows`` is empty. Without it every year present
        in ``rows`` is cleared, so callers must send complete years.
        """
        items = [
            PlanRow(
                year=row.year,
                month=row.month,
                bucket=row.bucket,
                category=row.category,
                amount=row.amount,
            )
            for row in rows
        ]
        if months is not None:
            scope = set(months)
            years = sorted({year for year, _ in scope})
        else:
            scope = None
            years = sorted({row.year for row in items})
        if not years:
            return 0

        with self.session_factory() as session:
            stale = session.exec(select(PlanRow).where(PlanRow.year.in_(years))).all()  # type: ignore[attr-defined]
            for row in stale:
                if scope is None or (row.year, row.month) in scope:
                    session.delete(row)
            session.add_all(items)
            session.commit()

        logger.info("Plan saved", extra={"rows": len(items), "years": years})
        return len(items)

    def clear(self) -> None:
        """Delete every stored row."""
        with self.session_factory() as session:
            for row in session.exec(select(PlanRow)).all():
                session.delete(row)
            session.commit()


__all__ = ["SQLModelPlanRepository"]
