"""Plan repository protocol."""

from __future__ import annotations

from typing import Iterable, Protocol

from ...models.plan import PlanRow


class PlanRepository(Protocol):
    """Load/save boundary for the persisted plan."""

    def load_rows(self, *, from_year: int) -> list[PlanRow]:
        """Return rows for ``from_year`` onwards, ordered by year then month."""
        ...

    def save_rows(
        self,
        rows: Iterable[PlanRow],
        *,
        months: Iterable[tuple[int, int]] | None = None,
    ) -> int:
        """Replace the given months (or every year present in ``rows``); return the number inserted."""
        ...

    def clear(self) -> None:
        """Delete every stored row."""
        ...
