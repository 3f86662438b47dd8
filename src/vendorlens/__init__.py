"""VendorLens - AI-assisted third-party vendor risk analysis."""

from vendorlens.version import __version__

__all__ = ["__version__"]
