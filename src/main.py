"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config.settings import Settings, settings
from src.pm_common.errors import AppError, InternalError, InvalidRequestError
from src.pm_common.redis_client import RedisHandle
from src.pm_common.response import error_response
from src.pm_gateway.middleware.request_log import RequestLogMiddleware
from src.pm_orderbook.application.service import OrderBookService
from src.pm_orderbook.infrastructure.cache import OrderBookCache
from src.pm_orderbook.infrastructure.clob_client import ClobClient
from src.pm_simulation.api.router import router as simulation_router

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings = settings,
    orderbook_service: OrderBookService | None = None,
) -> FastAPI:
    """Build the app. Tests pass a ready orderbook_service to skip CLOB/Redis wiring."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: wire Redis handle, CLOB client, cache. Shutdown: close them."""
        logging.basicConfig(level=app_settings.LOG_LEVEL)
        redis = RedisHandle.from_settings(app_settings)
        client: ClobClient | None = None
        if orderbook_service is None:
            client = ClobClient.from_settings(app_settings)
            cache = OrderBookCache(
                ttl_seconds=app_settings.ORDERBOOK_CACHE_TTL_SECONDS,
                max_entries=app_settings.ORDERBOOK_CACHE_MAX_ENTRIES,
                redis=redis,
            )
            app.state.orderbook_service = OrderBookService(client, cache)
        logger.info("Redis cache %s", "enabled" if redis.enabled else "disabled")
        app.state.redis = redis
        yield
        if client is not None:
            await client.aclose()
        await redis.close()

    app = FastAPI(
        title=app_settings.APP_NAME,
        version="0.1.0",
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    if orderbook_service is not None:
        app.state.orderbook_service = orderbook_service

    app.add_middleware(RequestLogMiddleware)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        resp = error_response(
            exc.code, exc.message, request_id=getattr(request.state, "request_id", None)
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=resp.model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"][1:]) or "request" for err in exc.errors()
        )
        return await app_error_handler(request, InvalidRequestError(fields))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        # traceback is logged by RequestLogMiddleware; clients only see 9002
        return await app_error_handler(request, InternalError())

    app.include_router(simulation_router, prefix="/api/v1")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": "0.1.0"}

    return app


app = create_app()
