"""Unified error codes and custom exceptions.

Error code ranges:
  6xxx: Order book collaborator
  7xxx: Simulation
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 6xxx: Order book ---

class OrderBookNotFoundError(AppError):
    def __init__(self, token_id: str) -> None:
        super().__init__(6001, f"Orderbook not found for token: {token_id}", 404)


class OrderBookUnavailableError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(6002, f"Orderbook source unavailable: {detail}", 502)


# --- 7xxx: Simulation ---

class InvalidRequestError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(7000, f"Invalid request: {detail}", 422)


class InvalidSizeError(AppError):
    def __init__(self, size: object) -> None:
        super().__init__(7001, f"Order size must be greater than 0, got {size}", 422)


class MissingLimitPriceError(AppError):
    def __init__(self) -> None:
        super().__init__(7002, "Limit price is required for limit orders", 422)


class InvalidPriceError(AppError):
    def __init__(self, price: object) -> None:
        super().__init__(7003, f"Limit price must be between 0 and 1, got {price}", 422)


class NoLiquidityForSideError(AppError):
    def __init__(self, side: str) -> None:
        super().__init__(7004, f"No liquidity available for {side} order", 422)


class NoLiquidityAtLimitError(AppError):
    def __init__(self, side: str, limit_price: object) -> None:
        bound = "at or below" if side == "buy" else "at or above"
        super().__init__(
            7005,
            f"No liquidity available {bound} limit price: {limit_price}",
            422,
        )


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
