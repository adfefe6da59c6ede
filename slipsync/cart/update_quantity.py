"""SetQuantity operation."""

import structlog

from ..errors import InsufficientStockError
from .state import Cart

logger = structlog.get_logger()


def set_quantity(cart: Cart, variant_id: str, new_qty: int) -> None:
    """Replace a line item's quantity.

    Non-positive quantities and unknown variants are ignored. Exceeding a
    capped item's stock raises InsufficientStockError and leaves the quantity
    as it was.
    """
    if new_qty <= 0:
        logger.debug("quantity_ignored", variant_id=variant_id, quantity=new_qty)
        return

    item = cart.find(variant_id)
    if item is None:
        return

    if item.is_capped() and new_qty > item.available_stock:
        raise InsufficientStockError(variant_id, item.display_name, item.available_stock, new_qty)

    logger.info("quantity_updated", variant_id=variant_id, old_quantity=item.quantity, new_quantity=new_qty)
    item.quantity = new_qty
