"""Checkout: turn a cart into the order request submitted to the order service."""

from dataclasses import dataclass, field
from decimal import Decimal

import structlog

from ..money import ZERO, to_decimal
from ..validation import require_line_items
from .pricing import compute_totals
from .state import Cart

logger = structlog.get_logger()


@dataclass(frozen=True)
class OrderLine:
    product_variant_id: str
    quantity: int
    unit_price: Decimal


@dataclass(frozen=True)
class OrderRequest:
    items: list = field(default_factory=list)  # OrderLine
    discount_amount: Decimal = ZERO
    tax_rate: Decimal = ZERO
    notes: str = ""

    def to_payload(self) -> dict:
        """Render the request with the order service's camelCase field names."""
        return {
            "items": [
                {
                    "productVariantId": line.product_variant_id,
                    "quantity": line.quantity,
                    "unitPrice": str(line.unit_price),
                }
                for line in self.items
            ],
            "discountAmount": str(self.discount_amount),
            "taxRate": str(self.tax_rate),
            "notes": self.notes,
        }


def build_order_request(cart: Cart) -> OrderRequest:
    """Build the order request for a cart; the discount sent is the clamped one."""
    require_line_items(cart.items)

    totals = compute_totals(cart)

    logger.info("checking_out", lines=len(cart.items), total=str(totals.total))

    return OrderRequest(
        items=[
            OrderLine(
                product_variant_id=item.product_variant_id,
                quantity=item.quantity,
                unit_price=max(to_decimal(item.unit_price), ZERO),
            )
            for item in cart.items
        ],
        discount_amount=totals.normalized_discount,
        tax_rate=max(to_decimal(cart.tax_rate_percent), ZERO),
        notes=cart.notes,
    )
