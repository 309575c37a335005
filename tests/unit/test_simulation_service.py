"""Unit tests for SimulationApplicationService using a mock book provider."""
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.pm_common.enums import OrderSide, OrderType
from src.pm_common.errors import (
    InvalidPriceError,
    InvalidSizeError,
    MissingLimitPriceError,
    NoLiquidityAtLimitError,
    NoLiquidityForSideError,
    OrderBookNotFoundError,
)
from src.pm_simulation.application.service import SimulationApplicationService, to_app_error
from src.pm_simulation.domain.errors import (
    BookNotFound,
    InvalidPrice,
    InvalidSize,
    MissingLimitPrice,
    NoLiquidityAtLimit,
    NoLiquidityForSide,
)
from src.pm_simulation.domain.models import OrderBook, PriceLevel, SimulationRequest

D = Decimal

BOOK = OrderBook(
    "tok-1",
    bids=(PriceLevel(D("0.48"), D(10)),),
    asks=(PriceLevel(D("0.52"), D(5)), PriceLevel(D("0.60"), D(5))),
)


def _req(**kwargs) -> SimulationRequest:
    defaults = dict(token_id="tok-1", side=OrderSide.BUY, size=D(10))
    defaults.update(kwargs)
    return SimulationRequest(**defaults)


@pytest.fixture
def books() -> MagicMock:
    provider = MagicMock()
    provider.get_order_book = AsyncMock(return_value=BOOK)
    return provider


class TestSimulate:
    @pytest.mark.asyncio
    async def test_returns_response(self, books) -> None:
        svc = SimulationApplicationService(books=books)
        resp = await svc.simulate(_req())
        assert resp.side == "buy"
        assert resp.order_type == "market"
        assert resp.average_price == pytest.approx(0.56)
        assert resp.slippage == pytest.approx(0.12)
        assert len(resp.fills) == 2
        assert resp.fills[1].cumulative_cost == pytest.approx(5.6)
        books.get_order_book.assert_awaited_once_with("tok-1")

    @pytest.mark.asyncio
    async def test_invalid_request_skips_book_fetch(self, books) -> None:
        svc = SimulationApplicationService(books=books)
        with pytest.raises(InvalidSizeError):
            await svc.simulate(_req(size=D(0)))
        books.get_order_book.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_book(self, books) -> None:
        books.get_order_book = AsyncMock(return_value=None)
        svc = SimulationApplicationService(books=books)
        with pytest.raises(OrderBookNotFoundError) as exc_info:
            await svc.simulate(_req())
        assert exc_info.value.http_status == 404

    @pytest.mark.asyncio
    async def test_no_liquidity_at_limit(self, books) -> None:
        svc = SimulationApplicationService(books=books)
        with pytest.raises(NoLiquidityAtLimitError) as exc_info:
            await svc.simulate(_req(order_type=OrderType.LIMIT, limit_price=D("0.50")))
        assert exc_info.value.message.endswith("at or below limit price: 0.50")


class TestToAppError:
    @pytest.mark.parametrize(
        ("error", "expected", "code"),
        [
            (InvalidSize(size=D(-1)), InvalidSizeError, 7001),
            (MissingLimitPrice(), MissingLimitPriceError, 7002),
            (InvalidPrice(limit_price=D(2)), InvalidPriceError, 7003),
            (BookNotFound(token_id="t"), OrderBookNotFoundError, 6001),
            (NoLiquidityForSide(side=OrderSide.SELL), NoLiquidityForSideError, 7004),
            (NoLiquidityAtLimit(side=OrderSide.SELL, limit_price=D("0.5")),
             NoLiquidityAtLimitError, 7005),
        ],
    )
    def test_each_kind_has_fixed_mapping(self, error, expected, code) -> None:
        app_err = to_app_error(error)
        assert isinstance(app_err, expected)
        assert app_err.code == code
