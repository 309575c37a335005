"""Greedy book walk: consume resting liquidity best price first.

Buy orders walk asks ascending, sell orders walk bids descending. Levels are
sorted here regardless of how the snapshot arrived. If the eligible levels
run out before the requested size is reached, the shortfall is booked as one
synthetic fill at the worst eligible price so the fills always sum to the
requested size. That padding is a display convention, not real liquidity.
"""
from decimal import Decimal

from src.pm_common.enums import OrderSide, OrderType
from src.pm_simulation.domain.errors import (
    NoLiquidityAtLimit,
    NoLiquidityForSide,
    SimulationError,
)
from src.pm_simulation.domain.models import (
    BookWalk,
    Fill,
    OrderBook,
    PriceLevel,
    SimulationRequest,
)


def walk_book(request: SimulationRequest, book: OrderBook) -> BookWalk | SimulationError:
    levels = _side_levels(request.side, book)
    if not levels:
        return NoLiquidityForSide(side=request.side)

    eligible = _apply_limit(request, levels)
    if not eligible:
        # validator guarantees limit_price is set for limit orders
        assert request.limit_price is not None
        return NoLiquidityAtLimit(side=request.side, limit_price=request.limit_price)

    fills: list[Fill] = []
    remaining = request.size
    cumulative_size = Decimal(0)
    cumulative_cost = Decimal(0)

    for level in eligible:
        if remaining <= 0:
            break
        fill_size = min(remaining, level.size)
        fill = _make_fill(level.price, fill_size, cumulative_size, cumulative_cost)
        fills.append(fill)
        remaining -= fill_size
        cumulative_size = fill.cumulative_size
        cumulative_cost = fill.cumulative_cost

    if remaining > 0:
        worst_price = eligible[-1].price
        fills.append(_make_fill(worst_price, remaining, cumulative_size, cumulative_cost))

    liquidity = sum((lv.size for lv in eligible), Decimal(0))
    return BookWalk(fills=tuple(fills), liquidity_available=liquidity)


def _side_levels(side: OrderSide, book: OrderBook) -> list[PriceLevel]:
    """Levels of the side a taker consumes, best price first."""
    if side == OrderSide.BUY:
        return book.sorted_asks()
    return book.sorted_bids()


def _apply_limit(request: SimulationRequest, levels: list[PriceLevel]) -> list[PriceLevel]:
    if request.order_type != OrderType.LIMIT or request.limit_price is None:
        return levels
    limit = request.limit_price
    if request.side == OrderSide.BUY:
        return [lv for lv in levels if lv.price <= limit]
    return [lv for lv in levels if lv.price >= limit]


def _make_fill(
    price: Decimal, size: Decimal, prev_size: Decimal, prev_cost: Decimal
) -> Fill:
    cost = price * size
    return Fill(
        price=price,
        size=size,
        cost=cost,
        cumulative_size=prev_size + size,
        cumulative_cost=prev_cost + cost,
    )
