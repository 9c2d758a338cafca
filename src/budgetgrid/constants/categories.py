"""
Centralized bucket and default category definitions for the budget grid.
Display names match the rows already persisted by the planning front-end,
so load/save can match on them.
"""

from __future__ import annotations

from enum import Enum


class Bucket(str, Enum):
    """Top-level allocation group every category belongs to."""

    INCOME = "INCOME"
    FUTURE = "FUTURE"
    LIVING = "LIVING"
    PRESENT = "PRESENT"

    @property
    def label(self) -> str:
        """Title-cased label used in persisted rows ("Income", "Future", ...)."""
        return BUCKET_LABELS[self]

    @classmethod
    def parse(cls, value: str | "Bucket") -> "Bucket":
        """Resolve an enum name or persisted label, case-insensitively."""
        if isinstance(value, Bucket):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown bucket: {value!r}") from exc


BUCKET_LABELS = {
    Bucket.INCOME: "Income",
    Bucket.FUTURE: "Future",
    Bucket.LIVING: "Living",
    Bucket.PRESENT: "Present",
}

# Buckets whose totals form the allocation base for percentages
ALLOCATION_BUCKETS = (Bucket.FUTURE, Bucket.LIVING, Bucket.PRESENT)

# (id, display name, bucket)
INCOME_CATEGORIES = [
    ("salary", "Main Income / Salary", Bucket.INCOME),
    ("freelance", "Freelance / Side Gig", Bucket.INCOME),
    ("extra", "Extra / Bonus", Bucket.INCOME),
]

ALLOCATION_CATEGORIES = [
    # FUTURE
    ("emergency", "🚨 Emergency Fund", Bucket.FUTURE),
    ("retirement", "🧓 Retirement Accounts", Bucket.FUTURE),
    ("investments", "📈 Other Investments", Bucket.FUTURE),
    ("debt", "🔗 Debt Repayment", Bucket.FUTURE),
    ("goals", "🎯 Goals Fund", Bucket.FUTURE),
    ("insurance", "🛡️ Insurance", Bucket.FUTURE),
    ("skills", "🧠 Skill-Building", Bucket.FUTURE),
    # LIVING
    ("housing", "🏠 Housing", Bucket.LIVING),
    ("utilities", "🔌 Utilities & Services", Bucket.LIVING),
    ("food", "🍽️ Food", Bucket.LIVING),
    ("transport", "🚆 Transportation", Bucket.LIVING),
    ("health", "⚕️ Healthcare", Bucket.LIVING),
    ("personal_care", "🧼 Basic Personal Care", Bucket.LIVING),
    # PRESENT
    ("enjoyment", "🥂 Enjoyment & Social Life", Bucket.PRESENT),
    ("development", "🌱 Personal Development", Bucket.PRESENT),
    ("travel", "✈️ Travel & Experiences", Bucket.PRESENT),
    ("hobbies", "🎨 Hobbies & Leisure", Bucket.PRESENT),
    ("subscriptions", "📦 Subscriptions", Bucket.PRESENT),
    ("life_happens", "🌧️ “Life Happens” Fund", Bucket.PRESENT),
]

DEFAULT_CATEGORIES = INCOME_CATEGORIES + ALLOCATION_CATEGORIES


__all__ = [
    "ALLOCATION_BUCKETS",
    "ALLOCATION_CATEGORIES",
    "BUCKET_LABELS",
    "Bucket",
    "DEFAULT_CATEGORIES",
    "INCOME_CATEGORIES",
]
