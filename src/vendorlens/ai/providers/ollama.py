"""Ollama local LLM provider."""

from vendorlens.ai.base import BaseOracle
from vendorlens.core.config import Settings, get_settings
from vendorlens.core.exceptions import (
    AuthError,
    ConfigurationError,
    ResponseFormatError,
    TransportError,
)
from vendorlens.infrastructure.ratelimit import RateLimiter


class OllamaOracle(BaseOracle):
    """Ollama local LLM provider for privacy-focused analysis.

    Needs no credential, so it always reports itself as configured.
    """

    def __init__(
        self,
        host: str | None = None,
        model: str | None = None,
        settings: Settings | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._host = host or settings.ollama_host
        self._model = model or settings.ollama_model
        super().__init__(rate_limiter=rate_limiter)

    @property
    def name(self) -> str:
        return "ollama"

    @property
    def model(self) -> str:
        return self._model

    def _get_client(self):
        """Get or create Ollama client."""
        if self._client is None:
            try:
                from ollama import AsyncClient
            except ImportError as e:
                raise ConfigurationError(
                    "ollama package not installed. Install with: pip install ollama",
                ) from e

            self._client = AsyncClient(host=self._host)

        return self._client

    async def _generate(self, prompt: str) -> str:
        """Generate text using local Ollama model."""
        from ollama import ResponseError

        client = self._get_client()

        try:
            response = await client.chat(
                model=self._model,
                messages=[
                    {"role": "user", "content": prompt},
                ],
            )
        except ResponseError as e:
            if e.status_code in (401, 403):
                raise AuthError(
                    f"Ollama rejected the request: {e.error}",
                    provider=self.name,
                ) from e
            raise TransportError(
                f"Ollama request failed: {e.error}",
                provider=self.name,
            ) from e
        except Exception as e:
            raise TransportError(
                f"Ollama request failed: {e}. Make sure Ollama is running at {self._host}",
                provider=self.name,
            ) from e

        content = response["message"]["content"]
        if not isinstance(content, str):
            raise ResponseFormatError(
                "Unexpected response format from Ollama.",
                provider=self.name,
            )
        return content
