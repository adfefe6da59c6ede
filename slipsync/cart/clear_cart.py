"""Reset operation."""

import structlog

from ..money import ZERO
from .state import Cart

logger = structlog.get_logger()


def reset(cart: Cart) -> None:
    """Clear all line items and return discount, tax rate and notes to defaults."""
    cart.items.clear()
    cart.discount_amount = ZERO
    cart.tax_rate_percent = ZERO
    cart.notes = ""
    logger.info("cart_reset")
