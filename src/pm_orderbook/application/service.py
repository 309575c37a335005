"""OrderBookService: cache-first snapshot provider for the simulator.

Concurrent lookups for the same token share a single upstream fetch: the
first caller creates a task, later callers await the same task. The task
result (book, None, or exception) reaches every waiter.
"""

import asyncio
import logging

from src.pm_orderbook.domain.mapper import map_clob_order_book
from src.pm_orderbook.infrastructure.cache import OrderBookCache
from src.pm_orderbook.infrastructure.clob_client import ClobClient
from src.pm_simulation.domain.models import OrderBook

logger = logging.getLogger(__name__)


class OrderBookService:
    def __init__(self, client: ClobClient, cache: OrderBookCache) -> None:
        self._client = client
        self._cache = cache
        self._in_flight: dict[str, asyncio.Task[OrderBook | None]] = {}

    async def get_order_book(self, token_id: str) -> OrderBook | None:
        """Return a snapshot, or None when the token has no (non-empty) book."""
        cached = await self._cache.get(token_id)
        if cached is not None:
            return cached

        task = self._in_flight.get(token_id)
        if task is None:
            task = asyncio.create_task(self._fetch_and_store(token_id))
            self._in_flight[token_id] = task
            task.add_done_callback(lambda t: self._forget(token_id, t))
        else:
            logger.debug("Joining in-flight orderbook fetch for %s", token_id)
        # shield: one cancelled waiter must not cancel the shared fetch
        return await asyncio.shield(task)

    def _forget(self, token_id: str, task: asyncio.Task[OrderBook | None]) -> None:
        if self._in_flight.get(token_id) is task:
            del self._in_flight[token_id]

    async def _fetch_and_store(self, token_id: str) -> OrderBook | None:
        raw = await self._client.fetch_order_book(token_id)
        if raw is None:
            logger.info("No orderbook upstream for token %s", token_id)
            return None
        book = map_clob_order_book(raw, token_id)
        if book.is_empty:
            logger.info("Empty orderbook for token %s", token_id)
            return None
        await self._cache.set(token_id, book)
        return book
