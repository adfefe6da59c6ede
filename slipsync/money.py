"""Parse-or-zero coercion and rounding for monetary and quantity fields.

Upstream feeds are inconsistently typed: the same field may arrive as a
number, a numeric string, or null. Every amount entering the pricing or
reporting pipeline goes through ``to_decimal`` so call sites never coerce
ad hoc.
"""

import re
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

ZERO = Decimal("0")
CENT = Decimal("0.01")

# Longest numeric prefix, as accepted by a browser's parseFloat.
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_decimal(value: Any) -> Decimal:
    """Coerce a feed value to Decimal, returning zero for anything unusable."""
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return _finite(value)
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return _finite(Decimal(str(value)))
    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value.strip())
        if match is None:
            return ZERO
        try:
            return _finite(Decimal(match.group(0)))
        except InvalidOperation:
            return ZERO
    return ZERO


def to_int(value: Any) -> int:
    """Coerce a feed value to an int, truncating toward zero."""
    return int(to_decimal(value).to_integral_value(rounding=ROUND_DOWN))


def round2(value: Decimal) -> Decimal:
    """Round half-up to two fractional digits."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _finite(value: Decimal) -> Decimal:
    return value if value.is_finite() else ZERO
