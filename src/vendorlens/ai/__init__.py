"""Text-generation oracle clients."""

from vendorlens.ai.base import BaseOracle
from vendorlens.ai.factory import PROVIDERS, create_oracle

__all__ = ["BaseOracle", "PROVIDERS", "create_oracle"]
