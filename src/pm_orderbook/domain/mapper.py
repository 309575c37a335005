"""Map a raw CLOB /book payload onto the simulator's OrderBook.

Polymarket returns levels either as objects or as [price, size] pairs,
with numbers encoded as strings:
  {"bids": [{"price": "0.48", "size": "120"}], "asks": [["0.52", "80"]]}

Levels that cannot be parsed, have size <= 0, or a price outside [0, 1]
are dropped. Duplicate prices on one side are merged by summing sizes,
keeping first-seen order otherwise.
"""

import logging
from decimal import Decimal
from typing import Any

from src.pm_common.decimals import is_valid_price, to_decimal
from src.pm_simulation.domain.models import OrderBook, PriceLevel

logger = logging.getLogger(__name__)


def map_clob_order_book(raw: dict[str, Any], token_id: str) -> OrderBook:
    return OrderBook(
        token_id=token_id,
        bids=_map_side(raw.get("bids") or [], token_id, "bids"),
        asks=_map_side(raw.get("asks") or [], token_id, "asks"),
    )


def _map_side(entries: list[Any], token_id: str, side_name: str) -> tuple[PriceLevel, ...]:
    merged: dict[Decimal, Decimal] = {}
    dropped = 0
    for entry in entries:
        parsed = _parse_entry(entry)
        if parsed is None:
            dropped += 1
            continue
        price, size = parsed
        merged[price] = merged.get(price, Decimal(0)) + size
    if dropped:
        logger.debug("Dropped %d malformed %s levels for token %s", dropped, side_name, token_id)
    return tuple(PriceLevel(price=p, size=s) for p, s in merged.items())


def _parse_entry(entry: Any) -> tuple[Decimal, Decimal] | None:
    if isinstance(entry, dict):
        raw_price, raw_size = entry.get("price"), entry.get("size")
    elif isinstance(entry, (list, tuple)) and len(entry) == 2:
        raw_price, raw_size = entry
    else:
        return None
    price = to_decimal(raw_price)
    size = to_decimal(raw_size)
    if price is None or size is None:
        return None
    if size <= 0 or not is_valid_price(price):
        return None
    return price, size


def order_book_to_dict(book: OrderBook) -> dict[str, Any]:
    """JSON-safe form used by the cache; Decimals travel as strings."""
    return {
        "token_id": book.token_id,
        "bids": [[str(lv.price), str(lv.size)] for lv in book.bids],
        "asks": [[str(lv.price), str(lv.size)] for lv in book.asks],
    }


def order_book_from_dict(data: dict[str, Any]) -> OrderBook:
    return map_clob_order_book(data, data["token_id"])
