"""Abstract interfaces for text-generation oracles."""

from abc import ABC, abstractmethod


class IOracle(ABC):
    """Interface for text-generation providers.

    An oracle answers one prompt with one reply. Implementations raise
    ``ConfigurationError`` when their credential is missing and an
    ``OracleError`` subclass when the call itself fails.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        ...

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the provider has everything it needs to make a call."""
        ...

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Send a prompt and return the generated text verbatim."""
        ...
