"""Execution metrics derived from a completed book walk.

    average_price = total_cost / size
    price_impact  = max(0, (avg - best) / best)      buy
                  = max(0, (best - avg) / best)      sell
    mid           = (best_bid + best_ask) / 2        0 if either side empty
    slippage      = |avg - mid| / mid                0 if mid == 0
    depth_used    = min(1, size / liquidity_available)

best is the top of the consumed side before any limit filtering.
"""
from decimal import Decimal

from src.pm_common.enums import OrderSide
from src.pm_simulation.domain.models import (
    BookWalk,
    OrderBook,
    SimulationRequest,
    SimulationResult,
)

_ZERO = Decimal(0)
_ONE = Decimal(1)


def calculate_metrics(
    request: SimulationRequest, book: OrderBook, walk: BookWalk
) -> SimulationResult:
    total_cost = sum((f.cost for f in walk.fills), _ZERO)
    average_price = total_cost / request.size

    if request.side == OrderSide.BUY:
        best_price = book.best_ask
    else:
        best_price = book.best_bid
    # walker already rejected an empty consumed side
    assert best_price is not None

    return SimulationResult(
        token_id=request.token_id,
        side=request.side,
        size=request.size,
        order_type=request.order_type,
        expected_price=average_price,
        best_case_price=best_price,
        worst_case_price=walk.fills[-1].price,
        price_impact=price_impact(request.side, average_price, best_price),
        slippage=slippage(average_price, mid_price(book)),
        total_cost=total_cost,
        average_price=average_price,
        fills=walk.fills,
        depth_used=depth_used(request.size, walk.liquidity_available),
        liquidity_available=walk.liquidity_available,
    )


def price_impact(side: OrderSide, average_price: Decimal, best_price: Decimal) -> Decimal:
    if best_price <= 0:
        return _ZERO
    if side == OrderSide.BUY:
        impact = (average_price - best_price) / best_price
    else:
        impact = (best_price - average_price) / best_price
    return max(_ZERO, impact)


def mid_price(book: OrderBook) -> Decimal:
    best_bid = book.best_bid
    best_ask = book.best_ask
    if best_bid is None or best_ask is None:
        return _ZERO
    return (best_bid + best_ask) / 2


def slippage(average_price: Decimal, mid: Decimal) -> Decimal:
    if mid <= 0:
        return _ZERO
    return abs(average_price - mid) / mid


def depth_used(size: Decimal, liquidity_available: Decimal) -> Decimal:
    if liquidity_available <= 0:
        return _ONE
    return min(_ONE, size / liquidity_available)
