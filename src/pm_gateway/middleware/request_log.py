"""Request logging middleware.

Logs every HTTP request with method, path, query, status code, latency and
a short request ID for correlation. The request_id is injected into
request.state (so handlers can put it in ApiResponse) and echoed back in
the X-Request-ID response header.

Log format:
    INFO [GET] /api/v1/simulate?side=buy&size=10 → 200 (4ms) req_a1b2c3d4e5f6
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("pm.request")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = f"req_{uuid.uuid4().hex[:12]}"
        request.state.request_id = request_id
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "[%s] %s → unhandled error (%.0fms) %s",
                request.method, target, elapsed_ms, request_id,
            )
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "[%s] %s → %d (%.0fms) %s",
            request.method,
            target,
            response.status_code,
            elapsed_ms,
            request_id,
        )
        return response
