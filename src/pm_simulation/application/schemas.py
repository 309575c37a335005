"""Pydantic schemas for the simulation API response.

Decimals from the engine are rendered as JSON numbers (floats); the engine
result itself stays exact.
"""

from pydantic import BaseModel

from src.pm_simulation.domain.models import Fill, SimulationResult


class FillOut(BaseModel):
    price: float
    size: float
    cost: float
    cumulative_size: float
    cumulative_cost: float

    @classmethod
    def from_domain(cls, f: Fill) -> "FillOut":
        return cls(
            price=float(f.price),
            size=float(f.size),
            cost=float(f.cost),
            cumulative_size=float(f.cumulative_size),
            cumulative_cost=float(f.cumulative_cost),
        )


class SimulationResponse(BaseModel):
    token_id: str
    side: str
    size: float
    order_type: str
    # Execution prices
    expected_price: float
    best_case_price: float
    worst_case_price: float
    # Impact
    price_impact: float
    slippage: float
    # Cost
    total_cost: float
    average_price: float
    fills: list[FillOut]
    # Depth
    depth_used: float
    liquidity_available: float

    @classmethod
    def from_domain(cls, r: SimulationResult) -> "SimulationResponse":
        return cls(
            token_id=r.token_id,
            side=r.side.value,
            size=float(r.size),
            order_type=r.order_type.value,
            expected_price=float(r.expected_price),
            best_case_price=float(r.best_case_price),
            worst_case_price=float(r.worst_case_price),
            price_impact=float(r.price_impact),
            slippage=float(r.slippage),
            total_cost=float(r.total_cost),
            average_price=float(r.average_price),
            fills=[FillOut.from_domain(f) for f in r.fills],
            depth_used=float(r.depth_used),
            liquidity_available=float(r.liquidity_available),
        )
