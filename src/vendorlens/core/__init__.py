"""Core module - configuration, logging, and interfaces."""

from vendorlens.core.config import Settings, get_settings
from vendorlens.core.exceptions import (
    VendorLensError,
    ValidationError,
    ConfigurationError,
    OracleError,
    TransportError,
    AuthError,
    ResponseFormatError,
    UnexpectedRunError,
)

__all__ = [
    "Settings",
    "get_settings",
    "VendorLensError",
    "ValidationError",
    "ConfigurationError",
    "OracleError",
    "TransportError",
    "AuthError",
    "ResponseFormatError",
    "UnexpectedRunError",
]
