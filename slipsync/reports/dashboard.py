"""Dashboard cards: today's orders, today's revenue and low-stock items."""

from collections.abc import Iterable
from decimal import Decimal
from typing import Optional

import structlog

from ..helpers import DateLike, date_of, now
from ..money import ZERO, to_decimal
from .models import DashboardSummary, InventoryEntry, OrderRecord

logger = structlog.get_logger()


def filter_today(orders: Iterable[OrderRecord], reference_date: Optional[DateLike] = None) -> list:
    """Return orders whose placed_at date prefix matches the reference date.

    The comparison is on the first ten characters of the ISO timestamp, i.e.
    the date as written by the feed. ``reference_date`` defaults to today in UTC.
    """
    day = date_of(reference_date if reference_date is not None else now()).isoformat()
    return [order for order in orders if order.placed_at and order.placed_at[:10] == day]


def sum_revenue(orders: Iterable[OrderRecord]) -> Decimal:
    return sum((to_decimal(order.total_amount) for order in orders), ZERO)


def count_low_stock(inventory: Iterable[InventoryEntry]) -> int:
    return sum(1 for entry in inventory if entry.is_low_stock())


def build_dashboard(
    orders: Iterable[OrderRecord],
    inventory: Iterable[InventoryEntry],
    reference_date: Optional[DateLike] = None,
) -> DashboardSummary:
    todays = filter_today(orders, reference_date)
    summary = DashboardSummary(
        orders_today=len(todays),
        revenue_today=sum_revenue(todays),
        low_stock_items=count_low_stock(inventory),
    )
    logger.debug(
        "dashboard_built",
        orders_today=summary.orders_today,
        revenue_today=str(summary.revenue_today),
        low_stock_items=summary.low_stock_items,
    )
    return summary
