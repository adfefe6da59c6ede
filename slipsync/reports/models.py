"""Data models for the reporting projections."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..money import ZERO, to_decimal, to_int


@dataclass(frozen=True)
class OrderRecord:
    """An order as delivered by the order feed. Amounts keep their raw feed value."""
    id: str
    placed_at: Optional[str] = None
    total_amount: Any = None
    subtotal: Any = None
    discounts_total: Any = None
    taxes_total: Any = None
    currency: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "OrderRecord":
        return cls(
            id=str(data.get("id") or ""),
            placed_at=data.get("placedAt"),
            total_amount=data.get("totalAmount"),
            subtotal=data.get("subtotal"),
            discounts_total=data.get("discountsTotal"),
            taxes_total=data.get("taxesTotal"),
            currency=data.get("currency") or "",
        )

    def revenue(self) -> Decimal:
        """Total amount, falling back to the subtotal when the total is zero or missing."""
        amount = to_decimal(self.total_amount)
        if amount == ZERO:
            amount = to_decimal(self.subtotal)
        return amount


@dataclass(frozen=True)
class InventoryEntry:
    quantity: int
    reorder_point: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "InventoryEntry":
        reorder_point = data.get("reorderPoint")
        return cls(
            quantity=to_int(data.get("quantity")),
            reorder_point=None if reorder_point is None else to_int(reorder_point),
        )

    def is_low_stock(self) -> bool:
        return self.reorder_point is not None and self.quantity <= self.reorder_point


@dataclass(frozen=True)
class DailyBucket:
    date: date
    revenue: Decimal = ZERO
    order_count: int = 0


@dataclass(frozen=True)
class SeriesTotals:
    total_revenue: Decimal
    total_orders: int


@dataclass(frozen=True)
class DashboardSummary:
    orders_today: int
    revenue_today: Decimal
    low_stock_items: int


@dataclass(frozen=True)
class SalesSummary:
    range: str
    gross_sales: Decimal
    discounts_total: Decimal
    taxes_total: Decimal
    net_sales: Decimal
    order_count: int
