"""Pytest configuration and fixtures."""

import pytest

from vendorlens.ai.prompts.checklist import CHECKLIST_PROMPTS
from vendorlens.core.exceptions import ConfigurationError
from vendorlens.core.interfaces import IOracle
from vendorlens.models import ChecklistItemId

POSITIVE_REPLIES = {
    ChecklistItemId.DOMAIN_PRESENCE: "Yes",
    ChecklistItemId.DMARC: "reject",
    ChecklistItemId.WEBSITE_SECURITY: "Secure. HTTPS with HSTS everywhere.",
    ChecklistItemId.GRC_POLICIES: (
        "ISO 27001 certification, SOC attestations, Privacy Policy, "
        "Information Security Policy"
    ),
    ChecklistItemId.BREACHES: "0",
    ChecklistItemId.LITIGATION: "No",
    ChecklistItemId.ONLINE_REVIEWS: "Positive. Customers praise support.",
    ChecklistItemId.YEARS_IN_BUSINESS: "10",
    ChecklistItemId.VULNERABILITIES: "None found. Public assets look well maintained.",
}


def identify_step(prompt: str) -> ChecklistItemId:
    """Work out which checklist question a prompt asks."""
    for item_id, template in CHECKLIST_PROMPTS.items():
        if prompt.startswith(template.split("{domain}")[0]):
            return item_id
    raise AssertionError(f"Unrecognized prompt: {prompt[:60]}")


class ScriptedOracle(IOracle):
    """Oracle returning canned replies per checklist step.

    A reply that is an exception instance is raised instead of returned.
    """

    def __init__(
        self,
        replies: dict[ChecklistItemId, str | Exception] | None = None,
        configured: bool = True,
    ) -> None:
        self.replies = {**POSITIVE_REPLIES, **(replies or {})}
        self.configured = configured
        self.calls: list[ChecklistItemId] = []
        self.prompts: list[str] = []

    @property
    def name(self) -> str:
        return "scripted"

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate(self, prompt: str) -> str:
        if not self.configured:
            raise ConfigurationError("scripted credential not configured")

        item_id = identify_step(prompt)
        self.calls.append(item_id)
        self.prompts.append(prompt)

        reply = self.replies[item_id]
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def positive_oracle() -> ScriptedOracle:
    """Oracle answering every question as favourably as possible."""
    return ScriptedOracle()


@pytest.fixture
def scripted_oracle():
    """Factory for oracles with selected replies overridden."""
    return ScriptedOracle
