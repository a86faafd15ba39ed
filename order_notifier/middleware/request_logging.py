"""
Request logging middleware
"""
import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs inbound requests, their duration and unhandled failures."""

    def __init__(self, app, log_requests: bool = True):
        super().__init__(app)
        self.log_requests = log_requests

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        if self.log_requests:
            logger.info(
                "Request started: %s %s",
                request.method,
                request.url.path,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "client_ip": request.client.host if request.client else None,
                },
            )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request failed: %s %s - %s: %s",
                request.method,
                request.url.path,
                type(exc).__name__,
                exc,
                extra={"process_time": time.perf_counter() - start_time},
            )
            raise

        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.6f}"
        return response
