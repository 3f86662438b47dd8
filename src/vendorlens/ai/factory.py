"""Oracle provider construction."""

from vendorlens.ai.base import BaseOracle
from vendorlens.ai.providers.anthropic import AnthropicOracle
from vendorlens.ai.providers.gemini import GeminiOracle
from vendorlens.ai.providers.ollama import OllamaOracle
from vendorlens.ai.providers.openai import OpenAIOracle
from vendorlens.core.config import Settings, get_settings
from vendorlens.core.exceptions import ConfigurationError
from vendorlens.infrastructure.ratelimit import RateLimiter

PROVIDERS: dict[str, type[BaseOracle]] = {
    "gemini": GeminiOracle,
    "anthropic": AnthropicOracle,
    "openai": OpenAIOracle,
    "ollama": OllamaOracle,
}


def create_oracle(
    provider: str | None = None,
    settings: Settings | None = None,
) -> BaseOracle:
    """Build the oracle for a provider name, defaulting to the configured one.

    The returned instance holds its SDK client once created, so callers
    should construct it once and pass it to every analysis that needs it.
    """
    settings = settings or get_settings()
    provider = (provider or settings.default_ai_provider).lower()

    oracle_class = PROVIDERS.get(provider)
    if oracle_class is None:
        raise ConfigurationError(
            f"Unknown provider: {provider}",
            details={"available": sorted(PROVIDERS)},
        )

    return oracle_class(
        settings=settings,
        rate_limiter=RateLimiter.per_minute(settings.oracle_requests_per_minute),
    )
