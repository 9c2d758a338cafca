"""Derived cash-flow metrics computed from bucket totals."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..constants.categories import ALLOCATION_BUCKETS, Bucket


@dataclass(frozen=True, slots=True)
class BucketTotals:
    """Totals of one column, per bucket."""

    income: float = 0.0
    future: float = 0.0
    living: float = 0.0
    present: float = 0.0

    def for_bucket(self, bucket: Bucket) -> float:
        return getattr(self, Bucket.parse(bucket).value.lower())


def _round_half_up(value: float) -> int:
    # Math.round semantics: .5 always goes towards +infinity
    return int(math.floor(value + 0.5))


def allocation_base(totals: BucketTotals) -> float:
    """Sum of the spending buckets; percentages are relative to this, not to income."""

    return totals.future + totals.living + totals.present


def net_cash_flow(totals: BucketTotals) -> float:
    return totals.income - allocation_base(totals)


def percent(totals: BucketTotals, bucket: Bucket) -> int:
    """Whole-number share of ``bucket`` in the allocation base (0 when the base is 0)."""

    base = allocation_base(totals)
    if base == 0:
        return 0
    return _round_half_up(100 * totals.for_bucket(bucket) / base)


def percentages(totals: BucketTotals) -> dict[Bucket, int]:
    return {bucket: percent(totals, bucket) for bucket in ALLOCATION_BUCKETS}


__all__ = ["BucketTotals", "allocation_base", "net_cash_flow", "percent", "percentages"]
