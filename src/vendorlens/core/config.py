"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ProviderName = Literal["gemini", "anthropic", "openai", "ollama"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # AI Provider API Keys
    gemini_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "api_key"),
    )
    anthropic_api_key: SecretStr | None = Field(default=None)
    openai_api_key: SecretStr | None = Field(default=None)

    # Models
    gemini_model: str = Field(default="gemini-2.5-flash")
    anthropic_model: str = Field(default="claude-sonnet-4-20250514")
    openai_model: str = Field(default="gpt-4o")

    # Ollama Configuration
    ollama_host: str = Field(default="http://localhost:11434")
    ollama_model: str = Field(default="gpt-oss:20b")

    # Default AI Provider
    default_ai_provider: ProviderName = Field(default="gemini")

    # Analysis
    oracle_requests_per_minute: int = Field(default=0, ge=0, le=6000)
    max_concurrent_steps: int = Field(default=1, ge=1, le=8)

    # API Configuration
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "text"] = Field(default="json")

    # CORS Configuration (set CORS_ORIGINS env var, comma-separated)
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        description="Allowed CORS origins. Set to ['*'] for development only.",
    )
    cors_allow_credentials: bool = Field(default=True)

    def get_gemini_key(self) -> str | None:
        """Get Gemini API key value."""
        if self.gemini_api_key:
            return self.gemini_api_key.get_secret_value()
        return None

    def get_anthropic_key(self) -> str | None:
        """Get Anthropic API key value."""
        if self.anthropic_api_key:
            return self.anthropic_api_key.get_secret_value()
        return None

    def get_openai_key(self) -> str | None:
        """Get OpenAI API key value."""
        if self.openai_api_key:
            return self.openai_api_key.get_secret_value()
        return None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
