"""Sparse, immutable store of planned amounts keyed by category and month."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

MAX_MONTH_INDEX = 300  # 25 years of editable horizon


def make_key(category_id: str, month_index: int) -> str:
    """Return the storage key for a (category, month) pair."""

    return f"{category_id}-{month_index}"


def parse_key(key: str) -> tuple[str, int]:
    """Split a storage key back into (category_id, month_index).

    Category ids may themselves contain dashes (``custom-<hex>``), so the
    month index is taken from the last dash.
    """

    category_id, _, month = key.rpartition("-")
    return category_id, int(month)


class TimeKeyedStore:
    """Read-only mapping of ``"<category>-<month>"`` keys to amounts.

    A missing key reads as 0. Mutators never modify the instance; they return
    a new store, which lets the history keep earlier states by reference.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, float] | None = None) -> None:
        self._values: Mapping[str, float] = MappingProxyType(dict(values or {}))

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]) -> "TimeKeyedStore":
        return cls({str(k): float(v) for k, v in values.items()})

    def get(self, category_id: str, month_index: int) -> float:
        return self._values.get(make_key(category_id, month_index), 0.0)

    def get_range(self, category_id: str, start_index: int, span: int) -> float:
        """Sum of ``get`` over ``[start_index, start_index + span)``."""

        total = 0.0
        for month_index in range(start_index, start_index + span):
            total += self.get(category_id, month_index)
        return total

    def with_set(self, category_id: str, month_index: int, amount: float) -> "TimeKeyedStore":
        return self.with_values(category_id, {month_index: amount})

    def with_values(
        self, category_id: str, amounts: Mapping[int, float]
    ) -> "TimeKeyedStore":
        """Return a copy with several months of one category overwritten."""

        updated = dict(self._values)
        for month_index, amount in amounts.items():
            updated[make_key(category_id, month_index)] = float(amount)
        return TimeKeyedStore(updated)

    def to_dict(self) -> dict[str, float]:
        return dict(self._values)

    def keys(self) -> Iterator[str]:
        return iter(self._values.keys())

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeKeyedStore):
            return NotImplemented
        return dict(self._values) == dict(other._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"TimeKeyedStore({len(self._values)} entries)"


EMPTY_STORE = TimeKeyedStore()


__all__ = ["EMPTY_STORE", "MAX_MONTH_INDEX", "TimeKeyedStore", "make_key", "parse_key"]
