"""Daily revenue series over a trailing window.

Orders are bucketed by the UTC calendar date of their placement time. The
series spans from the earliest to the latest bucket inside the window, with
days that had no orders filled in as zero. No buckets are produced when the
window holds no orders.
"""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from typing import Optional, Union

import structlog

from ..config import TIME_RANGES, get_settings
from ..errors import InvalidArgumentError, errmsg
from ..helpers import DateLike, date_of, now as utc_now, utc_date
from ..money import ZERO, round2
from .models import DailyBucket, OrderRecord, SeriesTotals

logger = structlog.get_logger()

ONE_DAY = timedelta(days=1)


def window_days_for(time_range: Union[str, int]) -> int:
    """Map a window selector ("7d", "30d", "90d" or 7/30/90) to a day count."""
    if isinstance(time_range, int) and not isinstance(time_range, bool):
        if time_range in TIME_RANGES.values():
            return time_range
    elif isinstance(time_range, str):
        key = time_range.strip().lower()
        if key in TIME_RANGES:
            return TIME_RANGES[key]
    raise InvalidArgumentError(
        errmsg.UNKNOWN_TIME_RANGE.format(value=time_range, allowed=sorted(TIME_RANGES))
    )


def group_by_day(orders: Iterable[OrderRecord]) -> dict:
    """Accumulate revenue and order count per UTC date -> (Decimal, int)."""
    grouped: dict = {}
    for order in orders:
        day = utc_date(order.placed_at)
        if day is None:
            continue
        revenue, count = grouped.get(day, (ZERO, 0))
        grouped[day] = (revenue + order.revenue(), count + 1)
    return grouped


def build_daily_series(
    orders: Iterable[OrderRecord],
    window_days: Optional[int] = None,
    now: Optional[DateLike] = None,
) -> list:
    """Build the contiguous, zero-filled DailyBucket sequence for the window.

    ``window_days`` defaults to the configured time range.
    """
    if window_days is None:
        window_days = get_settings().window_days
    start = date_of(now if now is not None else utc_now()) - timedelta(days=window_days)

    grouped = {day: values for day, values in group_by_day(orders).items() if day >= start}
    if not grouped:
        return []

    series = []
    day: date = min(grouped)
    last = max(grouped)
    while day <= last:
        revenue, count = grouped.get(day, (ZERO, 0))
        series.append(DailyBucket(date=day, revenue=round2(revenue), order_count=count))
        day += ONE_DAY

    logger.debug("daily_series_built", window_days=window_days, start=start.isoformat(), buckets=len(series))
    return series


def series_totals(series: Sequence[DailyBucket]) -> SeriesTotals:
    return SeriesTotals(
        total_revenue=sum((bucket.revenue for bucket in series), ZERO),
        total_orders=sum(bucket.order_count for bucket in series),
    )
