"""Cart preconditions checked before an operation touches any state."""

from collections.abc import Sequence

from .errors import CommandRejectedError, errmsg


def require_sellable_quantity(quantity: int) -> None:
    """Reject a requested quantity below one unit."""
    if quantity < 1:
        raise CommandRejectedError(errmsg.QUANTITY_POSITIVE)


def require_line_items(items: Sequence) -> None:
    """Reject checkout of a cart with no lines."""
    if not items:
        raise CommandRejectedError(errmsg.CART_EMPTY)
