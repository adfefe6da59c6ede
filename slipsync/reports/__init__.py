"""Reporting projections over the order and inventory feeds."""

from .models import (
    OrderRecord,
    InventoryEntry,
    DailyBucket,
    SeriesTotals,
    DashboardSummary,
    SalesSummary,
)
from .dashboard import filter_today, sum_revenue, count_low_stock, build_dashboard
from .daily_series import window_days_for, group_by_day, build_daily_series, series_totals
from .sales_summary import (
    DAILY,
    MONTHLY,
    normalize_range,
    resolve_zone,
    resolve_window,
    orders_in_window,
    build_sales_summary,
)

__all__ = [
    "OrderRecord",
    "InventoryEntry",
    "DailyBucket",
    "SeriesTotals",
    "DashboardSummary",
    "SalesSummary",
    "filter_today",
    "sum_revenue",
    "count_low_stock",
    "build_dashboard",
    "window_days_for",
    "group_by_day",
    "build_daily_series",
    "series_totals",
    "DAILY",
    "MONTHLY",
    "normalize_range",
    "resolve_zone",
    "resolve_window",
    "orders_in_window",
    "build_sales_summary",
]
