"""Cart-level discount, tax rate and notes.

Values are stored as entered (after numeric coercion). Clamping happens when
totals are computed, so a negative discount is kept here and floored later.
"""

from typing import Any

import structlog

from ..money import to_decimal
from .state import Cart

logger = structlog.get_logger()


def set_discount(cart: Cart, amount: Any) -> None:
    cart.discount_amount = to_decimal(amount)
    logger.debug("discount_set", discount_amount=str(cart.discount_amount))


def set_tax_rate(cart: Cart, rate: Any) -> None:
    cart.tax_rate_percent = to_decimal(rate)
    logger.debug("tax_rate_set", tax_rate_percent=str(cart.tax_rate_percent))


def set_notes(cart: Cart, notes: str) -> None:
    cart.notes = notes or ""
