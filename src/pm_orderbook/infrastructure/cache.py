"""Order book TTL cache: Redis when available, in-process map always.

Reads try Redis first and fall back to the local map; writes go to both.
A Redis failure is logged and the call continues against the local map,
so a flaky Redis degrades to per-process caching instead of failing
simulations.

Redis key: "orderbook:{token_id}", value: JSON, expiry: SET ... EX ttl.
"""

import json
import logging
import time
from collections import OrderedDict
from collections.abc import Callable

from redis.exceptions import RedisError

from src.pm_common.redis_client import RedisHandle
from src.pm_orderbook.domain.mapper import order_book_from_dict, order_book_to_dict
from src.pm_simulation.domain.models import OrderBook

logger = logging.getLogger(__name__)

KEY_PREFIX = "orderbook"


class OrderBookCache:
    def __init__(
        self,
        ttl_seconds: int,
        max_entries: int = 1000,
        redis: RedisHandle | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._redis = redis
        self._clock = clock
        # token_id -> (expires_at, book); oldest insert first for eviction
        self._local: OrderedDict[str, tuple[float, OrderBook]] = OrderedDict()

    async def get(self, token_id: str) -> OrderBook | None:
        client = await self._redis.get() if self._redis else None
        if client is not None:
            try:
                raw = await client.get(self._key(token_id))
            except RedisError as exc:
                logger.warning("Redis get failed for %s: %s", token_id, exc)
                raw = None
            book = self._decode(token_id, raw) if raw is not None else None
            if book is not None:
                self._set_local(token_id, book)
                return book
        return self._get_local(token_id)

    async def set(self, token_id: str, book: OrderBook) -> None:
        self._set_local(token_id, book)
        client = await self._redis.get() if self._redis else None
        if client is None:
            return
        try:
            await client.set(
                self._key(token_id), json.dumps(order_book_to_dict(book)), ex=self._ttl
            )
        except RedisError as exc:
            logger.warning("Redis set failed for %s: %s", token_id, exc)

    def _key(self, token_id: str) -> str:
        return f"{KEY_PREFIX}:{token_id}"

    def _decode(self, token_id: str, raw: str) -> OrderBook | None:
        """Rebuild a cached book; None (with a warning) if the payload is unusable."""
        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError(f"expected object, got {type(data).__name__}")
            return order_book_from_dict(data)
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Discarding unreadable Redis entry for %s: %r", token_id, exc)
            return None

    def _get_local(self, token_id: str) -> OrderBook | None:
        entry = self._local.get(token_id)
        if entry is None:
            return None
        expires_at, book = entry
        if self._clock() >= expires_at:
            del self._local[token_id]
            return None
        return book

    def _set_local(self, token_id: str, book: OrderBook) -> None:
        self._local.pop(token_id, None)
        self._local[token_id] = (self._clock() + self._ttl, book)
        while len(self._local) > self._max_entries:
            self._local.popitem(last=False)
