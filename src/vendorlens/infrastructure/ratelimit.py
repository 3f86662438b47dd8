"""Rate limiting implementation."""

from aiolimiter import AsyncLimiter


class RateLimiter:
    """Rate limiter using token bucket algorithm."""

    def __init__(
        self,
        rate: float,
        time_period: float = 1.0,
    ) -> None:
        """
        Initialize rate limiter.

        Args:
            rate: Maximum number of operations
            time_period: Time period in seconds (default: 1.0)
        """
        self._limiter = AsyncLimiter(rate, time_period)

    @classmethod
    def per_minute(cls, rate: int) -> "RateLimiter | None":
        """Build a per-minute limiter, or None when pacing is disabled."""
        if rate <= 0:
            return None
        return cls(rate, 60.0)

    async def acquire(self) -> None:
        """Acquire a token (wait if necessary)."""
        await self._limiter.acquire()
