"""Daily and monthly sales summaries.

A summary covers the orders placed between the start of the current day (or
month) in the store's timezone and now, and totals their subtotals,
discounts, taxes and order totals.
"""

from collections.abc import Iterable
from datetime import datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import structlog

from ..config import get_settings
from ..errors import InvalidTimestampError
from ..helpers import now as utc_now, parse_timestamp
from ..money import ZERO, to_decimal
from .models import OrderRecord, SalesSummary

logger = structlog.get_logger()

DAILY = "daily"
MONTHLY = "monthly"


def normalize_range(value: Optional[str]) -> str:
    if value is None:
        return DAILY
    if value.strip().lower() in ("monthly", "month"):
        return MONTHLY
    return DAILY


def _lookup_zone(name: Optional[str]) -> Optional[tzinfo]:
    if not name or not name.strip():
        return None
    key = name.strip()
    if key.upper() in ("UTC", "Z"):
        return timezone.utc
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def resolve_zone(name: Optional[str], default: Optional[str] = None) -> tzinfo:
    """Resolve a store timezone name, falling back to the configured zone, then UTC."""
    zone = _lookup_zone(name)
    if zone is None:
        zone = _lookup_zone(default if default is not None else get_settings().timezone)
    if zone is None:
        logger.debug("timezone_fallback", requested=name)
        return timezone.utc
    return zone


def _localize(moment: datetime, zone: tzinfo) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=zone)
    return moment.astimezone(zone)


def resolve_window(range_name: str, now: datetime, zone: tzinfo) -> tuple:
    """Return (start, end) for the range; end is ``now`` in ``zone``."""
    end = _localize(now, zone)
    start = end.replace(hour=0, minute=0, second=0, microsecond=0)
    if normalize_range(range_name) == MONTHLY:
        start = start.replace(day=1)
    return start, end


def orders_in_window(orders: Iterable[OrderRecord], start: datetime, end: datetime) -> list:
    """Orders placed within [start, end]; naive timestamps are read in the window's zone."""
    selected = []
    for order in orders:
        if not order.placed_at:
            continue
        try:
            placed = _localize(parse_timestamp(order.placed_at), start.tzinfo)
        except InvalidTimestampError:
            continue
        if start <= placed <= end:
            selected.append(order)
    return selected


def build_sales_summary(
    orders: Iterable[OrderRecord],
    range_name: Optional[str] = DAILY,
    now: Optional[datetime] = None,
    zone: Optional[tzinfo] = None,
) -> SalesSummary:
    normalized = normalize_range(range_name)
    start, end = resolve_window(
        normalized,
        now if now is not None else utc_now(),
        zone if zone is not None else resolve_zone(None),
    )
    selected = orders_in_window(orders, start, end)

    summary = SalesSummary(
        range=normalized,
        gross_sales=sum((to_decimal(o.subtotal) for o in selected), ZERO),
        discounts_total=sum((to_decimal(o.discounts_total) for o in selected), ZERO),
        taxes_total=sum((to_decimal(o.taxes_total) for o in selected), ZERO),
        net_sales=sum((to_decimal(o.total_amount) for o in selected), ZERO),
        order_count=len(selected),
    )
    logger.debug("sales_summary_built", range=normalized, start=start.isoformat(), orders=summary.order_count)
    return summary
