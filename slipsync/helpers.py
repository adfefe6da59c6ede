"""Timestamp helpers for order feed entries."""

from datetime import date, datetime, timezone
from typing import Optional, Union

from .errors import InvalidTimestampError

DateLike = Union[date, datetime]


def now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_timestamp(iso8601: str) -> datetime:
    """Parse an ISO-8601 timestamp string.

    Accepts a trailing ``Z`` and minute-precision times ("2024-01-01T10:00Z").
    The result is naive when the string carries no offset.
    """
    text = iso8601.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise InvalidTimestampError(iso8601, e) from e


def as_utc(moment: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def utc_date(placed_at: Optional[str]) -> Optional[date]:
    """Return the UTC calendar date of a feed timestamp, or None if unusable."""
    if not placed_at:
        return None
    try:
        return as_utc(parse_timestamp(placed_at)).date()
    except InvalidTimestampError:
        return None


def date_of(value: DateLike) -> date:
    """Return the calendar date of a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value
