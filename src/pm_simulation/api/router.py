"""pm_simulation REST endpoints.

GET /simulate: pre-trade execution estimate against the live order book

Example:
  GET /simulate?tokenId=123&side=buy&size=50
  GET /simulate?tokenId=123&side=sell&size=100&orderType=limit&limitPrice=0.55
"""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.pm_common.enums import OrderSide, OrderType
from src.pm_common.response import ApiResponse, success_response
from src.pm_simulation.application.service import SimulationApplicationService
from src.pm_simulation.domain.models import SimulationRequest

router = APIRouter(prefix="/simulate", tags=["simulation"])


def get_simulation_service(request: Request) -> SimulationApplicationService:
    return SimulationApplicationService(books=request.app.state.orderbook_service)


@router.get("")
async def simulate_order(
    request: Request,
    service: Annotated[SimulationApplicationService, Depends(get_simulation_service)],
    token_id: str = Query(..., alias="tokenId", min_length=1),
    side: OrderSide = Query(...),
    size: Decimal = Query(..., description="Order size in shares"),
    order_type: OrderType = Query(OrderType.MARKET, alias="orderType"),
    limit_price: Decimal | None = Query(
        None, alias="limitPrice", description="Required for limit orders (0-1)"
    ),
) -> ApiResponse:
    sim_request = SimulationRequest(
        token_id=token_id,
        side=side,
        size=size,
        order_type=order_type,
        limit_price=limit_price,
    )
    result = await service.simulate(sim_request)
    return success_response(
        result.model_dump(), request_id=getattr(request.state, "request_id", None)
    )
