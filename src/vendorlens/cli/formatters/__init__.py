"""CLI output formatters."""

from vendorlens.cli.formatters.table import format_profile
from vendorlens.cli.formatters.json_fmt import export_json, format_json

__all__ = ["format_profile", "format_json", "export_json"]
