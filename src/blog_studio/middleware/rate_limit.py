"""Per-client request rate limiting for the JSON API."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

if TYPE_CHECKING:
    from collections.abc import Callable

    from starlette.middleware.base import RequestResponseEndpoint
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

EXEMPT_PATHS = frozenset({"/health"})


@runtime_checkable
class RateLimitPolicy(Protocol):
    """Decides whether a client may make another request right now."""

    def allow(self, client_id: str) -> bool:
        ...


@dataclass
class _Window:
    started_at: float
    count: int


class FixedWindowRateLimiter:
    """Allow ``max_requests`` per client in each window of ``window_seconds``.

    The window opens on a client's first request and resets once it has
    elapsed. Counters live in process memory, so each worker process
    enforces its own limit. Expired windows are swept at most once per
    window, which bounds the map to the clients seen in the last two windows.
    """

    def __init__(
        self,
        max_requests: int = 5,
        window_seconds: float = 60.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._windows)

    def allow(self, client_id: str) -> bool:
        now = self._clock()
        if now - self._last_sweep >= self.window_seconds:
            self._sweep(now)

        window = self._windows.get(client_id)
        if window is None or now - window.started_at >= self.window_seconds:
            self._windows[client_id] = _Window(started_at=now, count=1)
            return True
        if window.count >= self.max_requests:
            return False
        window.count += 1
        return True

    def _sweep(self, now: float) -> None:
        expired = [
            client_id
            for client_id, window in self._windows.items()
            if now - window.started_at >= self.window_seconds
        ]
        for client_id in expired:
            del self._windows[client_id]
        self._last_sweep = now
        if expired:
            logger.debug("Rate limit windows evicted: count=%d", len(expired))


def client_address(request: Request, *, trust_forwarded: bool = False) -> str:
    """Identify the caller by socket peer.

    ``X-Forwarded-For`` is client-controlled, so its first hop is only used
    when ``trust_forwarded`` is set for deployments behind a reverse proxy.
    """
    if trust_forwarded:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "127.0.0.1"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests with 429 once the client's policy says no."""

    def __init__(
        self, app: ASGIApp, policy: RateLimitPolicy, *, trust_forwarded: bool = False
    ) -> None:
        super().__init__(app)
        self.policy = policy
        self.trust_forwarded = trust_forwarded

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in EXEMPT_PATHS:
            return await call_next(request)

        client_id = client_address(request, trust_forwarded=self.trust_forwarded)
        if not self.policy.allow(client_id):
            logger.warning(
                "Rate limit exceeded: client=%s path=%s", client_id, request.url.path
            )
            return JSONResponse(
                {"error": "Rate limit exceeded"},
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            )
        return await call_next(request)
