"""Google Gemini AI provider."""

from vendorlens.ai.base import BaseOracle
from vendorlens.core.config import Settings, get_settings
from vendorlens.core.exceptions import (
    AuthError,
    ConfigurationError,
    ResponseFormatError,
    TransportError,
)
from vendorlens.infrastructure.ratelimit import RateLimiter

AUTH_STATUS_CODES = {401, 403}


class GeminiOracle(BaseOracle):
    """Google Gemini provider using the google-genai SDK."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        settings: Settings | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._api_key = api_key if api_key is not None else settings.get_gemini_key()
        self._model = model or settings.gemini_model
        super().__init__(rate_limiter=rate_limiter)

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def model(self) -> str:
        return self._model

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self):
        """Get or create Gemini client."""
        if self._client is None:
            try:
                from google import genai
            except ImportError as e:
                raise ConfigurationError(
                    "google-genai package not installed. Install with: pip install google-genai",
                ) from e

            self._client = genai.Client(api_key=self._api_key)

        return self._client

    async def _generate(self, prompt: str) -> str:
        """Generate text using Gemini."""
        from google.genai import errors

        client = self._get_client()

        try:
            response = await client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
            )
        except errors.APIError as e:
            if e.code in AUTH_STATUS_CODES or "API key not valid" in str(e):
                raise AuthError(
                    "Gemini API key is not valid. Please check your GEMINI_API_KEY environment variable.",
                    provider=self.name,
                    details={"code": e.code},
                ) from e
            raise TransportError(
                f"Failed to get response from Gemini API. Details: {e}",
                provider=self.name,
                details={"code": e.code},
            ) from e
        except Exception as e:
            raise TransportError(
                f"Network error or issue reaching Gemini API. Details: {e}",
                provider=self.name,
            ) from e

        text = response.text
        if not isinstance(text, str):
            raise ResponseFormatError(
                "Unexpected response format from Gemini API.",
                provider=self.name,
            )
        return text
