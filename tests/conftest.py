"""Shared test fixtures."""

from decimal import Decimal

import pytest

from src.pm_simulation.domain.models import OrderBook, PriceLevel


class StaticOrderBookProvider:
    """Order book provider backed by a dict; stands in for OrderBookService."""

    def __init__(self, books: dict[str, OrderBook] | None = None) -> None:
        self.books = books or {}
        self.calls: list[str] = []

    async def get_order_book(self, token_id: str) -> OrderBook | None:
        self.calls.append(token_id)
        return self.books.get(token_id)


def make_book(token_id: str, bids=(), asks=()) -> OrderBook:
    return OrderBook(
        token_id=token_id,
        bids=tuple(PriceLevel(Decimal(p), Decimal(s)) for p, s in bids),
        asks=tuple(PriceLevel(Decimal(p), Decimal(s)) for p, s in asks),
    )


@pytest.fixture
def provider() -> StaticOrderBookProvider:
    return StaticOrderBookProvider({
        "tok-buy": make_book("tok-buy", asks=[("0.50", "5"), ("0.60", "10")]),
        "tok-sell": make_book("tok-sell", bids=[("0.70", "4"), ("0.60", "6")]),
        "tok-both": make_book(
            "tok-both", bids=[("0.48", "10")], asks=[("0.52", "5"), ("0.60", "5")]
        ),
    })
