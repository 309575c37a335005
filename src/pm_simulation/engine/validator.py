"""Input validation: runs before the order book is touched."""
from src.pm_common.decimals import is_valid_price
from src.pm_common.enums import OrderType
from src.pm_simulation.domain.errors import (
    InvalidPrice,
    InvalidSize,
    MissingLimitPrice,
    SimulationError,
)
from src.pm_simulation.domain.models import SimulationRequest


def validate_request(request: SimulationRequest) -> SimulationError | None:
    """Return the first contract violation, or None if the request is usable."""
    if not request.size.is_finite() or request.size <= 0:
        return InvalidSize(size=request.size)
    if request.order_type == OrderType.LIMIT and request.limit_price is None:
        return MissingLimitPrice()
    price = request.limit_price
    if price is not None and (not price.is_finite() or not is_valid_price(price)):
        return InvalidPrice(limit_price=price)
    return None
