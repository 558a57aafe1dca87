"""Custom middleware for request correlation, logging and request metrics."""

import logging
import time
import uuid
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match
from starlette.types import ASGIApp

from .observability import REQUEST_COUNT, REQUEST_DURATION

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique request ID to each request.

    The request ID is either extracted from the X-Request-ID header
    or generated if not present. It's added to the response headers
    and can be used for request correlation across services.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and add request ID."""
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response


def _route_template(request: Request) -> str:
    """Matched route path (``/{lang}/api/v1/tours/{tour_id}``) to keep metric labels bounded."""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", request.url.path)
    return "unmatched"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs HTTP requests and records request metrics.

    Bodies are never logged since auth requests carry passwords.
    """

    def __init__(self, app: ASGIApp, skip_paths: Optional[list] = None):
        super().__init__(app)
        self.skip_paths = skip_paths or ["/health", "/metrics", "/favicon.ico"]

    def _should_log(self, path: str) -> bool:
        """Check if request should be logged."""
        return path not in self.skip_paths

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request."""
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host

        return "unknown"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request, log it and record its count and duration."""
        if not self._should_log(request.url.path):
            return await call_next(request)

        start_time = time.perf_counter()
        endpoint = _route_template(request)

        log_data = {
            "request_id": getattr(request.state, "request_id", "unknown"),
            "method": request.method,
            "path": request.url.path,
            "client_ip": self._get_client_ip(request),
            "user_agent": request.headers.get("User-Agent", "unknown"),
        }
        logger.info("HTTP request started", extra=log_data)

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration = time.perf_counter() - start_time
            REQUEST_COUNT.labels(method=request.method, endpoint=endpoint, status_code=str(status_code)).inc()
            REQUEST_DURATION.labels(method=request.method, endpoint=endpoint).observe(duration)

            log_data.update({
                "status_code": status_code,
                "duration_ms": round(duration * 1000, 2),
            })
            if status_code >= 500:
                logger.error("HTTP request completed with server error", extra=log_data)
            elif status_code >= 400:
                logger.warning("HTTP request completed with client error", extra=log_data)
            else:
                logger.info("HTTP request completed successfully", extra=log_data)


def setup_middleware(app, enable_logging: bool = True) -> None:
    """
    Setup all middleware on the FastAPI app.

    Args:
        app: FastAPI application instance
        enable_logging: Whether to enable request logging middleware
    """
    # Last added runs first, so request IDs exist before logging reads them
    if enable_logging:
        app.add_middleware(LoggingMiddleware)

    app.add_middleware(RequestIDMiddleware)
