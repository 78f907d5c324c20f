"""ASGI middleware."""

from blog_studio.middleware.rate_limit import (
    FixedWindowRateLimiter,
    RateLimitMiddleware,
    RateLimitPolicy,
)

__all__ = ["FixedWindowRateLimiter", "RateLimitMiddleware", "RateLimitPolicy"]
