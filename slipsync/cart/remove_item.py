"""RemoveItem operation."""

import structlog

from .state import Cart

logger = structlog.get_logger()


def remove_item(cart: Cart, variant_id: str) -> None:
    before = len(cart.items)
    cart.items[:] = [item for item in cart.items if item.product_variant_id != variant_id]
    if len(cart.items) != before:
        logger.info("removing_item", variant_id=variant_id)
