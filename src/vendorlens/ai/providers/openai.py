"""OpenAI GPT AI provider."""

from vendorlens.ai.base import BaseOracle
from vendorlens.core.config import Settings, get_settings
from vendorlens.core.exceptions import (
    AuthError,
    ConfigurationError,
    ResponseFormatError,
    TransportError,
)
from vendorlens.infrastructure.ratelimit import RateLimiter


class OpenAIOracle(BaseOracle):
    """OpenAI GPT provider."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        settings: Settings | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._api_key = api_key if api_key is not None else settings.get_openai_key()
        self._model = model or settings.openai_model
        super().__init__(rate_limiter=rate_limiter)

    @property
    def name(self) -> str:
        return "openai"

    @property
    def model(self) -> str:
        return self._model

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self):
        """Get or create OpenAI client."""
        if self._client is None:
            try:
                from openai import AsyncOpenAI
            except ImportError as e:
                raise ConfigurationError("openai package not installed") from e

            self._client = AsyncOpenAI(api_key=self._api_key)

        return self._client

    async def _generate(self, prompt: str) -> str:
        """Generate text using GPT."""
        import openai

        client = self._get_client()

        try:
            response = await client.chat.completions.create(
                model=self._model,
                max_tokens=1024,
                messages=[
                    {"role": "user", "content": prompt},
                ],
            )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            raise AuthError(
                f"OpenAI API key is not valid: {e}",
                provider=self.name,
            ) from e
        except Exception as e:
            raise TransportError(
                f"OpenAI request failed: {e}",
                provider=self.name,
            ) from e

        content = response.choices[0].message.content if response.choices else None
        if not isinstance(content, str):
            raise ResponseFormatError(
                "Unexpected response format from OpenAI API.",
                provider=self.name,
            )
        return content
