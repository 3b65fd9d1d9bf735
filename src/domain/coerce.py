"""
Numeric coercion of free-text form input.

Mirrors browser ``Number(text)`` conversion so that typed values behave the
same way a web form would: blank input is zero and anything unparseable is
NaN rather than an exception.
"""

from __future__ import annotations

import math
import re

# ASCII digits only; Python would otherwise read other scripts' digits
_DECIMAL = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")
_RADIX_LITERAL = re.compile(r"^0([xXoObB])([0-9a-zA-Z]+)$")
_RADIX = {"x": 16, "o": 8, "b": 2}
_INFINITY = re.compile(r"^([+-]?)Infinity$")


def to_number(text: str | None) -> float:
    """Convert form text to a float; never raises."""
    if text is None:
        return 0.0

    s = text.strip()
    if not s:
        return 0.0

    if _DECIMAL.match(s):
        return float(s)

    inf = _INFINITY.match(s)
    if inf:
        return -math.inf if inf.group(1) == "-" else math.inf

    # Radix literals take no sign
    radix = _RADIX_LITERAL.match(s)
    if radix:
        try:
            value = int(radix.group(2), _RADIX[radix.group(1).lower()])
        except ValueError:
            return math.nan
        try:
            return float(value)
        except OverflowError:
            return math.inf

    return math.nan


def format_number(value: float) -> str:
    """Render a number back into a form field."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
