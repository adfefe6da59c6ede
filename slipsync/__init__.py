"""SlipSync order pricing and reporting core."""

from .errors import (
    errmsg,
    CommandRejectedError,
    OutOfStockError,
    InsufficientStockError,
    ClientError,
    InvalidArgumentError,
    InvalidTimestampError,
)
from .money import to_decimal, to_int, round2
from .config import Settings, get_settings
from .logs import configure_logging
from .cart import (
    Cart,
    LineItem,
    ProductEntry,
    PricingResult,
    OrderRequest,
    add_item,
    set_quantity,
    remove_item,
    reset,
    set_discount,
    set_tax_rate,
    set_notes,
    compute_totals,
    build_order_request,
)
from .reports import (
    OrderRecord,
    InventoryEntry,
    DailyBucket,
    SeriesTotals,
    DashboardSummary,
    SalesSummary,
    filter_today,
    sum_revenue,
    count_low_stock,
    build_dashboard,
    window_days_for,
    build_daily_series,
    series_totals,
    build_sales_summary,
)

__all__ = [
    # Errors
    "errmsg",
    "CommandRejectedError",
    "OutOfStockError",
    "InsufficientStockError",
    "ClientError",
    "InvalidArgumentError",
    "InvalidTimestampError",
    # Numeric coercion
    "to_decimal",
    "to_int",
    "round2",
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
    # Cart
    "Cart",
    "LineItem",
    "ProductEntry",
    "PricingResult",
    "OrderRequest",
    "add_item",
    "set_quantity",
    "remove_item",
    "reset",
    "set_discount",
    "set_tax_rate",
    "set_notes",
    "compute_totals",
    "build_order_request",
    # Reports
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
    "build_daily_series",
    "series_totals",
    "build_sales_summary",
]
