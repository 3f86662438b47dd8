"""Tests for oracle providers and provider construction."""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from vendorlens.ai import create_oracle
from vendorlens.ai.providers import (
    AnthropicOracle,
    GeminiOracle,
    OllamaOracle,
    OpenAIOracle,
)
from vendorlens.core.config import Settings
from vendorlens.core.exceptions import (
    AuthError,
    ConfigurationError,
    ResponseFormatError,
    TransportError,
)
from vendorlens.infrastructure.ratelimit import RateLimiter


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    return Settings(
        _env_file=None,
        gemini_api_key=None,
        anthropic_api_key=None,
        openai_api_key=None,
    )


def _gemini_client(mock_client: Mock, **kwargs) -> AsyncMock:
    generate = AsyncMock(**kwargs)
    mock_client.return_value.aio.models.generate_content = generate
    return generate


@pytest.mark.asyncio
async def test_gemini_missing_key_fails_without_client(settings):
    oracle = GeminiOracle(settings=settings)

    with patch("google.genai.Client") as mock_client:
        for _ in range(2):
            with pytest.raises(ConfigurationError, match="credential not configured"):
                await oracle.generate("hello")

        mock_client.assert_not_called()

    assert not oracle.is_configured


@pytest.mark.asyncio
async def test_gemini_returns_text_verbatim(settings):
    oracle = GeminiOracle(api_key="test-key", model="gemini-test", settings=settings)

    with patch("google.genai.Client") as mock_client:
        response = Mock()
        response.text = "  Yes\n"
        generate = _gemini_client(mock_client, return_value=response)

        assert await oracle.generate("prompt one") == "  Yes\n"
        assert await oracle.generate("prompt two") == "  Yes\n"

        mock_client.assert_called_once_with(api_key="test-key")
        assert generate.await_count == 2
        generate.assert_awaited_with(model="gemini-test", contents="prompt two")


@pytest.mark.asyncio
async def test_gemini_non_text_reply_is_format_error(settings):
    oracle = GeminiOracle(api_key="test-key", settings=settings)

    with patch("google.genai.Client") as mock_client:
        response = Mock()
        response.text = None
        _gemini_client(mock_client, return_value=response)

        with pytest.raises(ResponseFormatError):
            await oracle.generate("prompt")


@pytest.mark.asyncio
async def test_gemini_auth_failure(settings):
    from google.genai import errors

    oracle = GeminiOracle(api_key="bad-key", settings=settings)

    with patch("google.genai.Client") as mock_client:
        _gemini_client(
            mock_client,
            side_effect=errors.ClientError(
                401, {"error": {"message": "unauthenticated", "status": "UNAUTHENTICATED"}}
            ),
        )

        with pytest.raises(AuthError) as exc_info:
            await oracle.generate("prompt")

    assert exc_info.value.provider == "gemini"


@pytest.mark.asyncio
async def test_gemini_transport_failure(settings):
    oracle = GeminiOracle(api_key="test-key", settings=settings)

    with patch("google.genai.Client") as mock_client:
        _gemini_client(mock_client, side_effect=ConnectionError("fetch failed"))

        with pytest.raises(TransportError, match="fetch failed"):
            await oracle.generate("prompt")


@pytest.mark.asyncio
async def test_openai_returns_message_content(settings):
    oracle = OpenAIOracle(api_key="sk-test", settings=settings)

    with patch("openai.AsyncOpenAI") as mock_client:
        completion = Mock()
        completion.choices = [Mock(message=Mock(content="reject"))]
        mock_client.return_value.chat.completions.create = AsyncMock(
            return_value=completion
        )

        assert await oracle.generate("prompt") == "reject"


@pytest.mark.asyncio
async def test_anthropic_wraps_unexpected_failures(settings):
    oracle = AnthropicOracle(api_key="sk-ant-test", settings=settings)

    with patch("anthropic.AsyncAnthropic") as mock_client:
        mock_client.return_value.messages.create = AsyncMock(
            side_effect=OSError("network unreachable")
        )

        with pytest.raises(TransportError, match="network unreachable"):
            await oracle.generate("prompt")


@pytest.mark.asyncio
async def test_ollama_needs_no_credential(settings):
    oracle = OllamaOracle(settings=settings)

    with patch("ollama.AsyncClient") as mock_client:
        mock_client.return_value.chat = AsyncMock(
            return_value={"message": {"content": "Positive"}}
        )

        assert oracle.is_configured
        assert await oracle.generate("prompt") == "Positive"
        mock_client.assert_called_once_with(host=settings.ollama_host)


@pytest.mark.asyncio
async def test_rate_limiter_is_acquired_per_call(settings):
    limiter = Mock(spec=RateLimiter)
    limiter.acquire = AsyncMock()
    oracle = GeminiOracle(api_key="test-key", settings=settings, rate_limiter=limiter)

    with patch("google.genai.Client") as mock_client:
        response = Mock()
        response.text = "No"
        _gemini_client(mock_client, return_value=response)

        await oracle.generate("a")
        await oracle.generate("b")

    assert limiter.acquire.await_count == 2


@pytest.mark.parametrize(
    "provider,expected",
    [
        ("gemini", GeminiOracle),
        ("anthropic", AnthropicOracle),
        ("openai", OpenAIOracle),
        ("ollama", OllamaOracle),
        ("GEMINI", GeminiOracle),
    ],
)
def test_create_oracle(settings, provider, expected):
    assert isinstance(create_oracle(provider, settings), expected)


def test_create_oracle_uses_default_provider(settings):
    settings.default_ai_provider = "ollama"
    assert isinstance(create_oracle(None, settings), OllamaOracle)


def test_create_oracle_rejects_unknown_provider(settings):
    with pytest.raises(ConfigurationError, match="Unknown provider"):
        create_oracle("mystery", settings)


def test_create_oracle_attaches_rate_limiter(settings):
    settings.oracle_requests_per_minute = 30
    oracle = create_oracle("gemini", settings)
    assert isinstance(oracle._rate_limiter, RateLimiter)


def test_settings_accept_legacy_api_key_variable(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("API_KEY", "legacy-key")

    assert Settings(_env_file=None).get_gemini_key() == "legacy-key"


@pytest.mark.parametrize("rate", [0, -5])
def test_per_minute_limiter_disabled_for_non_positive_rate(rate):
    assert RateLimiter.per_minute(rate) is None
