"""Custom exceptions for VendorLens."""


class VendorLensError(Exception):
    """Base exception for all VendorLens errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(VendorLensError):
    """Raised when input validation fails."""

    pass


class ConfigurationError(VendorLensError):
    """Raised when configuration is invalid or a credential is missing."""

    pass


class OracleError(VendorLensError):
    """Raised when a text-generation call fails.

    Scoped to a single checklist step: the pipeline turns it into an
    ``error`` step result and carries on.
    """

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        details: dict | None = None,
    ) -> None:
        super().__init__(message, details)
        self.provider = provider


class TransportError(OracleError):
    """Raised when the oracle endpoint cannot be reached or fails."""

    pass


class AuthError(OracleError):
    """Raised when the oracle rejects the configured credential."""

    pass


class ResponseFormatError(OracleError):
    """Raised when the oracle reply carries no usable text."""

    pass


class UnexpectedRunError(VendorLensError):
    """Wraps a non-oracle failure that aborted an analysis run."""

    def __init__(
        self,
        message: str,
        domain: str | None = None,
        details: dict | None = None,
    ) -> None:
        super().__init__(message, details)
        self.domain = domain
