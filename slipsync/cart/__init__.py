"""Point-of-sale cart operations and pricing."""

from .state import Cart, LineItem, ProductEntry
from .add_item import add_item
from .update_quantity import set_quantity
from .remove_item import remove_item
from .clear_cart import reset
from .adjustments import set_discount, set_tax_rate, set_notes
from .pricing import PricingResult, compute_totals, normalize_discount
from .checkout import OrderLine, OrderRequest, build_order_request

__all__ = [
    "Cart",
    "LineItem",
    "ProductEntry",
    "add_item",
    "set_quantity",
    "remove_item",
    "reset",
    "set_discount",
    "set_tax_rate",
    "set_notes",
    "PricingResult",
    "compute_totals",
    "normalize_discount",
    "OrderLine",
    "OrderRequest",
    "build_order_request",
]
