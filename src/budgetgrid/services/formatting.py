"""Display formatting shared by every grid consumer."""

from __future__ import annotations

import math

EMPTY_CELL = "—"


def _round_half_away(value: float) -> int:
    magnitude = int(math.floor(abs(value) + 0.5))
    return -magnitude if value < 0 else magnitude


def format_money(value: float, *, symbol: str = "$") -> str:
    """Render ``value`` as whole-unit currency; exactly 0 renders as an em-dash.

    Halves round away from zero, so 2.5 shows as 3 and -2.5 as -3.
    """

    if value == 0:
        return EMPTY_CELL
    rounded = _round_half_away(value)
    if rounded < 0:
        return f"-{symbol}{abs(rounded):,}"
    return f"{symbol}{rounded:,}"


def format_percent(value: float) -> str:
    return f"{value:.0f}%"


__all__ = ["EMPTY_CELL", "format_money", "format_percent"]
