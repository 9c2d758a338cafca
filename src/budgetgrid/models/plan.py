"""Persisted plan rows."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class PlanRow(SQLModel, table=True):
    """One planned amount for a category in a calendar month."""

    __tablename__: ClassVar[str] = "plan_row"

    id: Optional[int] = Field(default=None, primary_key=True)
    year: int = Field(index=True, nullable=False)
    month: int = Field(nullable=False, ge=1, le=12)
    bucket: str = Field(nullable=False, max_length=16)
    category: str = Field(nullable=False, max_length=128)
    amount: float = Field(nullable=False)

    def as_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "bucket": self.bucket,
            "category": self.category,
            "amount": self.amount,
        }
