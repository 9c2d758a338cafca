"""View-mode column layouts for the budget grid."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ViewMode(str, Enum):
    """Aggregation granularity of the grid columns."""

    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    SEMESTRAL = "SEMESTRAL"
    YEARLY = "YEARLY"
    FIVE_YEAR = "FIVE_YEAR"

    @classmethod
    def parse(cls, value: str | "ViewMode") -> "ViewMode":
        """Resolve a mode name case-insensitively; ``5_YEARS`` is accepted too."""

        if isinstance(value, ViewMode):
            return value
        normalized = str(value).strip().upper().replace("-", "_")
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown view mode: {value!r}") from exc


_ALIASES = {"5_YEARS": "FIVE_YEAR", "5_YEAR": "FIVE_YEAR", "FIVE_YEARS": "FIVE_YEAR"}


@dataclass(frozen=True, slots=True)
class ColumnDef:
    """One displayed column: first month index and the number of months it spans."""

    label: str
    index: int
    span: int

    @property
    def end(self) -> int:
        """Exclusive end month index."""
        return self.index + self.span

    def months(self) -> range:
        return range(self.index, self.end)


def _add_months(value: date, months: int) -> date:
    month = value.month - 1 + months
    return date(value.year + month // 12, month % 12 + 1, 1)


def columns_for(view_mode: ViewMode, reference_date: date) -> list[ColumnDef]:
    """Return the ordered columns for ``view_mode`` starting at ``reference_date``'s month."""

    mode = ViewMode.parse(view_mode)
    start = reference_date.replace(day=1)

    if mode is ViewMode.MONTHLY:
        return [
            ColumnDef(label=_add_months(start, i).strftime("%b"), index=i, span=1)
            for i in range(12)
        ]
    if mode is ViewMode.QUARTERLY:
        return [ColumnDef(label=f"Q{i + 1}", index=i * 3, span=3) for i in range(4)]
    if mode is ViewMode.SEMESTRAL:
        return [ColumnDef(label=f"S{i + 1}", index=i * 6, span=6) for i in range(2)]
    if mode is ViewMode.YEARLY:
        return [
            ColumnDef(label=str(start.year + i), index=i * 12, span=12) for i in range(10)
        ]
    # FIVE_YEAR
    columns = []
    for i in range(5):
        first_year = start.year + i * 5
        columns.append(
            ColumnDef(label=f"{first_year}-{first_year + 4}", index=i * 60, span=60)
        )
    return columns


def find_column(columns: list[ColumnDef], token: str) -> ColumnDef | None:
    """Look up a column by label (case-insensitive) or 1-based position."""

    cleaned = token.strip()
    for column in columns:
        if column.label.lower() == cleaned.lower():
            return column
    if cleaned.isdigit():
        position = int(cleaned)
        if 1 <= position <= len(columns):
            return columns[position - 1]
    return None


__all__ = ["ColumnDef", "ViewMode", "columns_for", "find_column"]
