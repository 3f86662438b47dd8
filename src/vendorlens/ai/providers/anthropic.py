"""Anthropic (Claude) AI provider."""

from vendorlens.ai.base import BaseOracle
from vendorlens.core.config import Settings, get_settings
from vendorlens.core.exceptions import (
    AuthError,
    ConfigurationError,
    ResponseFormatError,
    TransportError,
)
from vendorlens.infrastructure.ratelimit import RateLimiter


class AnthropicOracle(BaseOracle):
    """Anthropic Claude provider."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        settings: Settings | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._api_key = api_key if api_key is not None else settings.get_anthropic_key()
        self._model = model or settings.anthropic_model
        super().__init__(rate_limiter=rate_limiter)

    @property
    def name(self) -> str:
        return "anthropic"

    @property
    def model(self) -> str:
        return self._model

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self):
        """Get or create Anthropic client."""
        if self._client is None:
            try:
                import anthropic
            except ImportError as e:
                raise ConfigurationError("anthropic package not installed") from e

            self._client = anthropic.AsyncAnthropic(api_key=self._api_key)

        return self._client

    async def _generate(self, prompt: str) -> str:
        """Generate text using Claude."""
        import anthropic

        client = self._get_client()

        try:
            message = await client.messages.create(
                model=self._model,
                max_tokens=1024,
                messages=[
                    {"role": "user", "content": prompt},
                ],
            )
        except (anthropic.AuthenticationError, anthropic.PermissionDeniedError) as e:
            raise AuthError(
                f"Anthropic API key is not valid: {e}",
                provider=self.name,
            ) from e
        except Exception as e:
            raise TransportError(
                f"Claude request failed: {e}",
                provider=self.name,
            ) from e

        if not message.content or not isinstance(
            getattr(message.content[0], "text", None), str
        ):
            raise ResponseFormatError(
                "Unexpected response format from Anthropic API.",
                provider=self.name,
            )
        return message.content[0].text
