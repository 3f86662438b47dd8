"""Infrastructure layer."""

from vendorlens.infrastructure.ratelimit import RateLimiter

__all__ = ["RateLimiter"]
