"""JSON formatter for CLI output."""

import json
from pathlib import Path

from rich.console import Console

from vendorlens.models import VendorRiskProfile


def format_json(console: Console, profile: VendorRiskProfile) -> None:
    """Format and display a risk profile as JSON."""
    console.print_json(json.dumps(profile.to_json_dict()))


def export_json(profile: VendorRiskProfile, path: str | Path) -> None:
    """Export a risk profile to a JSON file."""
    with open(path, "w") as f:
        json.dump(profile.to_json_dict(), f, indent=2)
