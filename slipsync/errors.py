"""Error types and error message constants for the order and reporting core."""

from typing import Optional


class errmsg:
    """Error message constants."""

    QUANTITY_POSITIVE = "Quantity must be positive"
    CART_EMPTY = "Cart is empty"
    OUT_OF_STOCK = "{name} is out of stock"
    INSUFFICIENT_STOCK = "Only {available} units available for {name}"
    UNKNOWN_TIME_RANGE = "unknown time range {value!r}, expected one of {allowed}"


class CommandRejectedError(Exception):
    """Cart operation was rejected due to business rule violation."""


class OutOfStockError(CommandRejectedError):
    """The product has no stock available to sell."""

    def __init__(self, variant_id: str, product_name: str):
        super().__init__(errmsg.OUT_OF_STOCK.format(name=product_name or variant_id))
        self.variant_id = variant_id
        self.product_name = product_name


class InsufficientStockError(CommandRejectedError):
    """The requested quantity exceeds the available stock."""

    def __init__(self, variant_id: str, product_name: str, available: int, requested: int):
        super().__init__(
            errmsg.INSUFFICIENT_STOCK.format(available=available, name=product_name or variant_id)
        )
        self.variant_id = variant_id
        self.product_name = product_name
        self.available = available
        self.requested = requested


class ClientError(Exception):
    """Base class for errors caused by the caller's arguments."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class InvalidArgumentError(ClientError):
    """Invalid argument provided by caller."""

    def __init__(self, message: str):
        super().__init__(f"invalid argument: {message}")


class InvalidTimestampError(ClientError):
    """Failed to parse timestamp."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(f"invalid timestamp: {message}", cause)
