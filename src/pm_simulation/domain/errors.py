"""Simulation error values.

The simulator returns these instead of raising: every failure is
deterministic for a given (request, book), so the caller branches on the
type and maps it to a response. See SimulationApplicationService for the
AppError mapping.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.pm_common.enums import OrderSide
from src.pm_simulation.domain.models import SimulationResult


@dataclass(frozen=True)
class SimulationError:
    """Base for all simulation error values."""

    code = "SIMULATION_ERROR"

    @property
    def message(self) -> str:
        return "Simulation failed"


@dataclass(frozen=True)
class InvalidSize(SimulationError):
    size: Decimal

    code = "INVALID_SIZE"

    @property
    def message(self) -> str:
        return f"Order size must be greater than 0, got {self.size}"


@dataclass(frozen=True)
class MissingLimitPrice(SimulationError):
    code = "MISSING_LIMIT_PRICE"

    @property
    def message(self) -> str:
        return "Limit price is required for limit orders"


@dataclass(frozen=True)
class InvalidPrice(SimulationError):
    limit_price: Decimal

    code = "INVALID_PRICE"

    @property
    def message(self) -> str:
        return f"Limit price must be between 0 and 1, got {self.limit_price}"


@dataclass(frozen=True)
class BookNotFound(SimulationError):
    token_id: str

    code = "BOOK_NOT_FOUND"

    @property
    def message(self) -> str:
        return f"Orderbook not found for token: {self.token_id}"


@dataclass(frozen=True)
class NoLiquidityForSide(SimulationError):
    side: OrderSide

    code = "NO_LIQUIDITY_FOR_SIDE"

    @property
    def message(self) -> str:
        return f"No liquidity available for {self.side.value} order"


@dataclass(frozen=True)
class NoLiquidityAtLimit(SimulationError):
    side: OrderSide
    limit_price: Decimal

    code = "NO_LIQUIDITY_AT_LIMIT"

    @property
    def message(self) -> str:
        bound = "at or below" if self.side == OrderSide.BUY else "at or above"
        return f"No liquidity available {bound} limit price: {self.limit_price}"


SimulationOutcome = SimulationResult | SimulationError
