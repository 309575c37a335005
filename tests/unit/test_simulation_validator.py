from decimal import Decimal

from src.pm_common.enums import OrderSide, OrderType
from src.pm_simulation.domain.errors import InvalidPrice, InvalidSize, MissingLimitPrice
from src.pm_simulation.domain.models import SimulationRequest
from src.pm_simulation.engine.validator import validate_request


def _req(size: str = "10", order_type: OrderType = OrderType.MARKET,
         limit_price: str | None = None) -> SimulationRequest:
    return SimulationRequest(
        token_id="tok-1", side=OrderSide.BUY, size=Decimal(size), order_type=order_type,
        limit_price=Decimal(limit_price) if limit_price is not None else None,
    )


class TestValidateRequest:
    def test_valid_market_order(self) -> None:
        assert validate_request(_req()) is None

    def test_valid_limit_order(self) -> None:
        assert validate_request(_req(order_type=OrderType.LIMIT, limit_price="0.55")) is None

    def test_zero_size(self) -> None:
        assert validate_request(_req(size="0")) == InvalidSize(size=Decimal(0))

    def test_negative_size(self) -> None:
        assert isinstance(validate_request(_req(size="-3")), InvalidSize)

    def test_nan_size(self) -> None:
        assert isinstance(validate_request(_req(size="NaN")), InvalidSize)

    def test_limit_without_price(self) -> None:
        assert validate_request(_req(order_type=OrderType.LIMIT)) == MissingLimitPrice()

    def test_limit_price_above_one(self) -> None:
        err = validate_request(_req(order_type=OrderType.LIMIT, limit_price="1.01"))
        assert err == InvalidPrice(limit_price=Decimal("1.01"))

    def test_limit_price_below_zero(self) -> None:
        err = validate_request(_req(order_type=OrderType.LIMIT, limit_price="-0.1"))
        assert isinstance(err, InvalidPrice)

    def test_bounds_are_inclusive(self) -> None:
        assert validate_request(_req(order_type=OrderType.LIMIT, limit_price="0")) is None
        assert validate_request(_req(order_type=OrderType.LIMIT, limit_price="1")) is None

    def test_market_order_with_bad_limit_price_still_rejected(self) -> None:
        assert isinstance(validate_request(_req(limit_price="2")), InvalidPrice)

    def test_size_checked_first(self) -> None:
        assert isinstance(validate_request(_req(size="0", order_type=OrderType.LIMIT)), InvalidSize)
