"""Rounding helpers shared by every calculator."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

# wide enough to quantize any finite float to a handful of decimals
_CONTEXT = Context(prec=350)


def round_to(value: float, places: int) -> float:
    """Round half-up (not banker's rounding) and return a float."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT)
    return float(rounded) + 0.0  # normalise -0.0


def round_money(value: float) -> float:
    return round_to(value, 2)


def round_rate(value: float) -> float:
    """Rates are reported to 4 decimal places."""
    return round_to(value, 4)
