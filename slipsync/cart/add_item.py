"""AddItem operation."""

import structlog

from ..errors import InsufficientStockError, OutOfStockError
from ..validation import require_sellable_quantity
from .state import Cart, LineItem, ProductEntry, new_line_item

logger = structlog.get_logger()


def add_item(cart: Cart, product: ProductEntry, requested_qty: int = 1) -> LineItem:
    """Add a product to the cart, merging with an existing row for the same variant.

    Raises OutOfStockError when the product has no stock and
    InsufficientStockError when the merged quantity would exceed it. The cart
    is unchanged on error.
    """
    available = product.available()
    if available <= 0:
        raise OutOfStockError(product.variant_id, product.product_name)

    require_sellable_quantity(requested_qty)

    existing = cart.find(product.variant_id)
    next_qty = (existing.quantity if existing else 0) + requested_qty
    if next_qty > available:
        raise InsufficientStockError(product.variant_id, product.product_name, available, next_qty)

    logger.info("adding_item", variant_id=product.variant_id, quantity=requested_qty, new_quantity=next_qty)

    if existing is not None:
        existing.available_stock = available
        existing.quantity = next_qty
        return existing

    item = new_line_item(product, requested_qty)
    cart.items.append(item)
    return item
