"""Request logging middleware."""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from preferredimage.utils.logger import get_logger

logger = get_logger(__name__)

# Endpoints worth logging; health checks are skipped
LOGGED_PATHS = ("/detect", "/select")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log selection requests and their outcome."""

    async def dispatch(self, request: Request, call_next):
        """Log request before processing and response after."""
        if request.url.path not in LOGGED_PATHS:
            return await call_next(request)

        start_time = time.time()

        logger.debug(
            "Incoming request",
            method=request.method,
            path=request.url.path,
            content_length=request.headers.get("content-length"),
        )

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "Request completed",
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )

        return response
