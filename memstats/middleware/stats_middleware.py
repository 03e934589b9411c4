"""FastAPI middleware emitting request stats.

Every /api/** request increments a request counter and a per-status counter,
and adds its latency to a stat, through whichever receiver is active. The
stats endpoints themselves are not instrumented so reading them back does
not change what is read.
"""

import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from memstats.core.logging_config import get_logger

logger = get_logger(__name__)

_SKIPPED_PREFIX = "/api/v1/stats"


class StatsMiddleware(BaseHTTPMiddleware):
    """Middleware that records request counts and latency for /api/** routes."""

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request and emit stats for API routes.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in the chain

        Returns:
            HTTP response from downstream handlers
        """
        path = request.url.path
        if not path.startswith("/api/") or path.startswith(_SKIPPED_PREFIX):
            return await call_next(request)

        t0 = time.monotonic_ns()
        response = await call_next(request)
        latency_ms = (time.monotonic_ns() - t0) / 1_000_000.0

        # Instrumentation must never break the request
        try:
            from memstats.services.stats.instance import get_stats_receiver

            http = get_stats_receiver().scope("http")
            http.counter("requests").incr()
            http.counter("status", str(response.status_code)).incr()
            http.stat("latency_ms").add(latency_ms)
        except Exception as e:
            logger.debug(f"Stats middleware error for {request.method} {path}: {e}")

        return response
