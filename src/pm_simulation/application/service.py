"""SimulationApplicationService: fetch snapshot, simulate, map errors.

The engine returns error values; this layer is where they become AppError
exceptions for the HTTP exception handler.
"""

import logging
from typing import Protocol

from src.pm_common.errors import (
    AppError,
    InvalidPriceError,
    InvalidSizeError,
    MissingLimitPriceError,
    NoLiquidityAtLimitError,
    NoLiquidityForSideError,
    OrderBookNotFoundError,
)
from src.pm_simulation.application.schemas import SimulationResponse
from src.pm_simulation.domain.errors import (
    BookNotFound,
    InvalidPrice,
    InvalidSize,
    MissingLimitPrice,
    NoLiquidityAtLimit,
    NoLiquidityForSide,
    SimulationError,
)
from src.pm_simulation.domain.models import OrderBook, SimulationRequest
from src.pm_simulation.engine.simulator import simulate
from src.pm_simulation.engine.validator import validate_request

logger = logging.getLogger(__name__)


class OrderBookProviderProtocol(Protocol):
    async def get_order_book(self, token_id: str) -> OrderBook | None: ...


class SimulationApplicationService:
    def __init__(self, books: OrderBookProviderProtocol) -> None:
        self._books = books

    async def simulate(self, request: SimulationRequest) -> SimulationResponse:
        # reject bad parameters before spending an upstream call
        error = validate_request(request)
        if error is not None:
            raise to_app_error(error)

        book = await self._books.get_order_book(request.token_id)
        outcome = simulate(request, book)
        if isinstance(outcome, SimulationError):
            logger.info(
                "Simulation rejected: token=%s side=%s size=%s code=%s",
                request.token_id, request.side.value, request.size, outcome.code,
            )
            raise to_app_error(outcome)

        logger.debug(
            "Simulated %s %s %s: avg=%s impact=%s fills=%d",
            request.order_type.value, request.side.value, request.size,
            outcome.average_price, outcome.price_impact, len(outcome.fills),
        )
        return SimulationResponse.from_domain(outcome)


def to_app_error(error: SimulationError) -> AppError:
    """Fixed mapping from simulation error kind to API error."""
    match error:
        case InvalidSize(size=size):
            return InvalidSizeError(size)
        case MissingLimitPrice():
            return MissingLimitPriceError()
        case InvalidPrice(limit_price=price):
            return InvalidPriceError(price)
        case BookNotFound(token_id=token_id):
            return OrderBookNotFoundError(token_id)
        case NoLiquidityForSide(side=side):
            return NoLiquidityForSideError(side.value)
        case NoLiquidityAtLimit(side=side, limit_price=price):
            return NoLiquidityAtLimitError(side.value, price)
    raise TypeError(f"Unmapped simulation error: {error!r}")
