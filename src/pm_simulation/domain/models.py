"""Domain models for pm_simulation: frozen dataclasses, no business logic.

Every number is a Decimal. Prices are probabilities in [0, 1].
"""

from dataclasses import dataclass
from decimal import Decimal

from src.pm_common.enums import OrderSide, OrderType


@dataclass(frozen=True)
class PriceLevel:
    """One resting quote."""

    price: Decimal
    size: Decimal


@dataclass(frozen=True)
class OrderBook:
    """Immutable two-sided snapshot for one outcome token.

    Level order is whatever the source delivered; consumers that need price
    priority sort it themselves (see sorted_asks / sorted_bids).
    """

    token_id: str
    bids: tuple[PriceLevel, ...] = ()
    asks: tuple[PriceLevel, ...] = ()

    def sorted_bids(self) -> list[PriceLevel]:
        """Bids best-first (descending price)."""
        return sorted(self.bids, key=lambda lv: lv.price, reverse=True)

    def sorted_asks(self) -> list[PriceLevel]:
        """Asks best-first (ascending price)."""
        return sorted(self.asks, key=lambda lv: lv.price)

    @property
    def best_bid(self) -> Decimal | None:
        return max((lv.price for lv in self.bids), default=None)

    @property
    def best_ask(self) -> Decimal | None:
        return min((lv.price for lv in self.asks), default=None)

    @property
    def is_empty(self) -> bool:
        return not self.bids and not self.asks


@dataclass(frozen=True)
class SimulationRequest:
    token_id: str
    side: OrderSide
    size: Decimal
    order_type: OrderType = OrderType.MARKET
    limit_price: Decimal | None = None  # required iff order_type is LIMIT


@dataclass(frozen=True)
class Fill:
    """One consumed slice of book depth, in walk order."""

    price: Decimal
    size: Decimal
    cost: Decimal  # price * size
    cumulative_size: Decimal
    cumulative_cost: Decimal


@dataclass(frozen=True)
class BookWalk:
    """Book Walker output handed to the metrics stage."""

    fills: tuple[Fill, ...]
    liquidity_available: Decimal  # sum of eligible level sizes, before consumption


@dataclass(frozen=True)
class SimulationResult:
    token_id: str
    side: OrderSide
    size: Decimal
    order_type: OrderType
    expected_price: Decimal
    best_case_price: Decimal
    worst_case_price: Decimal
    price_impact: Decimal
    slippage: Decimal
    total_cost: Decimal
    average_price: Decimal
    fills: tuple[Fill, ...]
    depth_used: Decimal
    liquidity_available: Decimal
