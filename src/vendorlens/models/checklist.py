"""Checklist definitions."""

from enum import Enum

from vendorlens.models.base import FrozenSchema

MAX_POSSIBLE_SCORE_POST_QUALIFICATION = 39  # 10 DMARC + 5 security + 10 GRC + 3 reviews + 1 years + 10 vulns
PASS_THRESHOLD_PERCENTAGE = 60
DISQUALIFYING_POINTS = -10


class ChecklistItemId(str, Enum):
    """Checklist item identifiers in canonical order."""

    DOMAIN_PRESENCE = "domain_presence"
    DMARC = "dmarc"
    WEBSITE_SECURITY = "website_security"
    GRC_POLICIES = "grc_policies"
    BREACHES = "breaches"
    LITIGATION = "litigation"
    ONLINE_REVIEWS = "online_reviews"
    YEARS_IN_BUSINESS = "years_in_business"
    VULNERABILITIES = "vulnerabilities"


class ChecklistStepDefinition(FrozenSchema):
    """Static definition of one checklist question."""

    id: ChecklistItemId
    question: str
    description: str | None = None


CHECKLIST_CONFIG: dict[ChecklistItemId, ChecklistStepDefinition] = {
    definition.id: definition
    for definition in (
        ChecklistStepDefinition(
            id=ChecklistItemId.DOMAIN_PRESENCE,
            question="Own Domain, Email & Website Presence",
            description=(
                "Does the vendor have their own domain, email system, "
                "and a functional website? (Critical)"
            ),
        ),
        ChecklistStepDefinition(
            id=ChecklistItemId.DMARC,
            question="DMARC Compliance (p=reject)",
            description=(
                "Does the vendor's email domain fully comply with DMARC "
                "with a 'reject' policy?"
            ),
        ),
        ChecklistStepDefinition(
            id=ChecklistItemId.WEBSITE_SECURITY,
            question="Reasonable Website Security",
            description=(
                "Is the vendor's website reasonably secure "
                "(e.g., HTTPS, no obvious major flaws)?"
            ),
        ),
        ChecklistStepDefinition(
            id=ChecklistItemId.GRC_POLICIES,
            question="Declared Policies & GRC Status",
            description=(
                "Does the website declare GRC status (ISO 27001, SOC, Privacy "
                "Policy, InfoSec Policy) in a dedicated section?"
            ),
        ),
        ChecklistStepDefinition(
            id=ChecklistItemId.BREACHES,
            question="History of Cyber/Privacy Breaches",
            description=(
                "Are there publicly reported cybersecurity or privacy breaches "
                "associated with the vendor?"
            ),
        ),
        ChecklistStepDefinition(
            id=ChecklistItemId.LITIGATION,
            question="History of Significant Litigation",
            description=(
                "Does the vendor have a history of more than two significant "
                "litigation cases?"
            ),
        ),
        ChecklistStepDefinition(
            id=ChecklistItemId.ONLINE_REVIEWS,
            question="Online Comments/Reviews Sentiment",
            description=(
                "What is the general sentiment of online reviews about the "
                "organization?"
            ),
        ),
        ChecklistStepDefinition(
            id=ChecklistItemId.YEARS_IN_BUSINESS,
            question="Years in Business",
            description="Has the organization been in business for more than 5 years?",
        ),
        ChecklistStepDefinition(
            id=ChecklistItemId.VULNERABILITIES,
            question="Identified Vulnerabilities (Simulated Scan)",
            description=(
                "Does a simulated online scan identify any serious or critical "
                "vulnerabilities in owned assets?"
            ),
        ),
    )
}
