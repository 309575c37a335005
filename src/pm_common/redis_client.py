"""Redis client handle: used for the order book TTL cache only.

The handle is constructed explicitly (usually in the app lifespan) and
passed to whoever needs it; there is no module-level pool.

Lifecycle:
    handle = RedisHandle.from_settings(settings)   # create
    redis = await handle.get()                      # use (None when disabled)
    await handle.close()                            # shutdown
    handle.reset()                                  # tests: drop pool, no I/O
"""

import logging

import redis.asyncio as aioredis

from config.settings import Settings

logger = logging.getLogger(__name__)


class RedisHandle:
    def __init__(self, url: str, enabled: bool = True) -> None:
        self._url = url
        self._enabled = enabled
        self._pool: aioredis.Redis | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "RedisHandle":
        return cls(settings.REDIS_URL, enabled=settings.REDIS_ENABLED)

    @property
    def enabled(self) -> bool:
        return self._enabled

    async def get(self) -> aioredis.Redis | None:
        """Get or create the Redis connection pool; None when Redis is disabled."""
        if not self._enabled:
            return None
        if self._pool is None:
            self._pool = aioredis.from_url(self._url, decode_responses=True)
            logger.info("Redis pool created for %s", self._url)
        return self._pool

    async def close(self) -> None:
        """Close the Redis connection pool."""
        if self._pool is not None:
            await self._pool.aclose()
            self._pool = None

    def reset(self) -> None:
        """Forget the pool without closing it. Test-only."""
        self._pool = None
