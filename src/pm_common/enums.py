"""Global enums: values match the query-string / JSON wire format exactly."""

from enum import Enum


class OrderSide(str, Enum):
    BUY = "buy"
    SELL = "sell"


class OrderType(str, Enum):
    """Only market and limit orders are simulated (single time-in-force)."""
    MARKET = "market"
    LIMIT = "limit"
