"""Cart state and catalog entries."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from ..money import ZERO, to_decimal, to_int


@dataclass
class ProductEntry:
    """Catalog entry used to populate the cart; quantity is the available stock."""

    variant_id: str
    product_name: str = ""
    sku: str = ""
    price: Any = None
    quantity: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ProductEntry":
        return cls(
            variant_id=str(data.get("variantId") or ""),
            product_name=data.get("productName") or "",
            sku=data.get("sku") or "",
            price=data.get("price"),
            quantity=data.get("quantity"),
        )

    def available(self) -> int:
        return to_int(self.quantity)


@dataclass
class LineItem:
    product_variant_id: str
    display_name: str
    sku: str
    unit_price: Decimal
    quantity: int
    available_stock: int

    def line_total(self) -> Decimal:
        return max(to_decimal(self.unit_price), ZERO) * to_int(self.quantity)

    def is_capped(self) -> bool:
        # A stock sentinel of zero disables the cap.
        return self.available_stock > 0


@dataclass
class Cart:
    items: list = field(default_factory=list)  # LineItem, insertion order
    discount_amount: Decimal = ZERO
    tax_rate_percent: Decimal = ZERO
    notes: str = ""

    def find(self, variant_id: str) -> Optional[LineItem]:
        for item in self.items:
            if item.product_variant_id == variant_id:
                return item
        return None

    def is_empty(self) -> bool:
        return not self.items

    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)


def new_line_item(product: ProductEntry, quantity: int) -> LineItem:
    return LineItem(
        product_variant_id=product.variant_id,
        display_name=product.product_name,
        sku=product.sku,
        unit_price=max(to_decimal(product.price), ZERO),
        quantity=quantity,
        available_stock=product.available(),
    )
