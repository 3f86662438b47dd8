"""Base oracle provider class."""

from abc import ABC, abstractmethod

from vendorlens.core.exceptions import ConfigurationError, OracleError
from vendorlens.core.interfaces import IOracle
from vendorlens.core.logging import get_logger
from vendorlens.infrastructure.ratelimit import RateLimiter


class BaseOracle(IOracle, ABC):
    """Base class for text-generation providers.

    Subclasses create their SDK client lazily and implement ``_generate``.
    The credential check and request pacing live here so every provider
    fails the same way when it is not configured.
    """

    def __init__(self, rate_limiter: RateLimiter | None = None) -> None:
        self.logger = get_logger(f"oracle.{self.name}")
        self._client = None
        self._rate_limiter = rate_limiter

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        ...

    @property
    def model(self) -> str:
        """Model identifier sent with each request."""
        return "unknown"

    @property
    def is_configured(self) -> bool:
        return True

    @abstractmethod
    async def _generate(self, prompt: str) -> str:
        """Perform a single provider request."""
        ...

    async def generate(self, prompt: str) -> str:
        """Send a prompt and return the generated text verbatim."""
        if not self.is_configured:
            raise ConfigurationError(
                f"{self.name} credential not configured",
                details={"provider": self.name},
            )

        if self._rate_limiter is not None:
            await self._rate_limiter.acquire()

        try:
            return await self._generate(prompt)
        except OracleError as e:
            self.logger.warning(
                "oracle_request_failed",
                provider=self.name,
                error_type=type(e).__name__,
                error=e.message,
            )
            raise
