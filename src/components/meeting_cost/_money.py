"""
Currency display formatting.

Matches en-US currency formatting: grouped thousands, two decimals, halves
rounded away from zero, sign ahead of the symbol.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

_CENTS = Decimal("0.01")
# Wide enough for the largest finite float
_CONTEXT = Context(prec=400)


def format_currency(amount: float, symbol: str = "$") -> str:
    if math.isnan(amount):
        return f"{symbol}NaN"
    if math.isinf(amount):
        return f"-{symbol}∞" if amount < 0 else f"{symbol}∞"

    # repr gives the shortest decimal that round-trips, so 1.005 rounds up
    rounded = Decimal(repr(float(amount))).quantize(
        _CENTS, rounding=ROUND_HALF_UP, context=_CONTEXT
    )
    sign = "-" if rounded.is_signed() else ""
    return f"{sign}{symbol}{rounded.copy_abs():,.2f}"
