"""Per-IP rate limiting for the API routes using throttled-py."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER_SECONDS = 60.0


def extract_client_ip(request: Request) -> str:
    """Client IP of a request, preferring the first X-Forwarded-For entry."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return "unknown"


def retry_after_seconds(result: Any) -> float:
    """Seconds until the limited client may retry."""
    state = getattr(result, "state", None)
    retry_after = getattr(state, "retry_after", None) if state is not None else None
    if retry_after is None:
        retry_after = getattr(result, "retry_after", None)
    try:
        return float(retry_after) if retry_after else DEFAULT_RETRY_AFTER_SECONDS
    except (TypeError, ValueError):
        return DEFAULT_RETRY_AFTER_SECONDS


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Token-bucket limit per client IP on paths under a prefix."""

    def __init__(
        self,
        app: Callable,
        requests_per_minute: int = 100,
        path_prefix: str = "/api/",
    ) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Maximum number of requests allowed per IP per minute.
            path_prefix: Only paths starting with this prefix are limited.
        """
        super().__init__(app)
        self.path_prefix = path_prefix
        self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        self.rate_limiter_store = store.MemoryStore()
        logger.info(
            f"Rate limiting {path_prefix}* to {requests_per_minute} requests per minute per IP"
        )

    def is_limited(self, client_ip: str) -> tuple[bool, float]:
        """Consume one token for the client; return (limited, retry_after)."""
        throttle = Throttled(
            key=client_ip,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.rate_limiter_store,
        )
        result = throttle.limit()
        if result.limited:
            return True, retry_after_seconds(result)
        return False, 0.0

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Reject over-quota API requests with 429."""
        if not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        client_ip = extract_client_ip(request)
        limited, retry_after = self.is_limited(client_ip)
        if limited:
            logger.warning(f"Rate limit exceeded for IP {client_ip}, retry after {retry_after}s")
            return JSONResponse(
                {"error": "Rate limit exceeded. Please try again later."},
                status_code=429,
                headers={"Retry-After": str(int(retry_after))},
            )
        return await call_next(request)
