"""Oracle provider implementations."""

from vendorlens.ai.providers.anthropic import AnthropicOracle
from vendorlens.ai.providers.gemini import GeminiOracle
from vendorlens.ai.providers.ollama import OllamaOracle
from vendorlens.ai.providers.openai import OpenAIOracle

__all__ = ["AnthropicOracle", "GeminiOracle", "OllamaOracle", "OpenAIOracle"]
