"""Polymarket CLOB REST client: order book endpoint only.

GET {base_url}/book?token_id=<id>
  200 → raw JSON dict
  404 → None (no book for this token)
  other / transport error → OrderBookUnavailableError
"""

import logging
from typing import Any

import httpx

from config.settings import Settings
from src.pm_common.errors import OrderBookUnavailableError

logger = logging.getLogger(__name__)


class ClobClient:
    def __init__(self, base_url: str, timeout: float = 5.0,
                 http: httpx.AsyncClient | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClobClient":
        return cls(settings.POLYMARKET_CLOB_API_URL, timeout=settings.CLOB_HTTP_TIMEOUT_SECONDS)

    async def fetch_order_book(self, token_id: str) -> dict[str, Any] | None:
        url = f"{self._base_url}/book"
        try:
            resp = await self._http.get(url, params={"token_id": token_id})
        except httpx.HTTPError as exc:
            logger.warning("CLOB request failed for token %s: %s", token_id, exc)
            raise OrderBookUnavailableError(type(exc).__name__) from exc

        if resp.status_code == 404:
            return None
        if resp.status_code != 200:
            logger.warning("CLOB /book returned %d for token %s", resp.status_code, token_id)
            raise OrderBookUnavailableError(f"HTTP {resp.status_code}")
        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning("CLOB /book returned malformed JSON for token %s", token_id)
            raise OrderBookUnavailableError("malformed response") from exc
        if not isinstance(data, dict):
            raise OrderBookUnavailableError("unexpected response shape")
        return data

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()
