"""Integration-test fixtures.

The app is built with a static order book provider, so these tests run
without network access, Redis or the CLOB API.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import create_app


@pytest_asyncio.fixture
async def client(provider) -> AsyncClient:
    """Async HTTP client against an app wired to the static provider."""
    app = create_app(orderbook_service=provider)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
