"""Reply scoring rules for each checklist step.

Every scorer is a pure function from the oracle's raw reply to a
``StepScore``. None of them perform I/O, so they can be tested against
literal reply strings.
"""

import re
from dataclasses import dataclass
from typing import Callable

from vendorlens.ai.prompts.checklist import GRC_POLICY_CATEGORIES
from vendorlens.models.checklist import DISQUALIFYING_POINTS, ChecklistItemId

GRC_POINTS_PER_CATEGORY = 2.5
GRC_MAX_POINTS = 10.0

SERIOUS_VULNERABILITY_PREFIXES = (
    "serious/critical vulnerabilities likely",
    "critical vulnerabilities likely",
    "serious vulnerabilities likely",
)

_FIRST_INTEGER = re.compile(r"[0-9]+")

# Larger than any count or age a reply could meaningfully report
MAX_EXTRACTED_INTEGER = 999_999_999


@dataclass(frozen=True)
class StepScore:
    """Points and explanation derived from one oracle reply."""

    points: float
    finding: str
    justification: str


def format_points(points: float) -> str:
    """Render a point value without a trailing ``.0`` for whole numbers."""
    return f"{points:g}"


def extract_first_integer(text: str) -> int:
    """Return the first integer literal in the text, or 0 if there is none.

    Values beyond ``MAX_EXTRACTED_INTEGER`` are clamped to it.
    """
    match = _FIRST_INTEGER.search(text)
    if not match:
        return 0
    digits = match.group(0).lstrip("0") or "0"
    if len(digits) > len(str(MAX_EXTRACTED_INTEGER)):
        return MAX_EXTRACTED_INTEGER
    return min(int(digits), MAX_EXTRACTED_INTEGER)


def _grc_label(category: str) -> str:
    return category.removeprefix("a comprehensive ").removeprefix("an ")


def _grc_keyword(category: str) -> str:
    keyword = _grc_label(category).lower()
    return keyword.replace(" certification", "").replace(" attestations", "")


def score_domain_presence(reply: str) -> StepScore:
    if "yes" in reply.strip().lower():
        return StepScore(
            0,
            "Vendor appears to have own domain, email, and website.",
            "Base requirement met. Analysis continues.",
        )
    return StepScore(
        DISQUALIFYING_POINTS,
        "Vendor does NOT appear to have own domain, email, or website.",
        "Critical failure. Risk assessment terminated.",
    )


def score_dmarc(reply: str) -> StepScore:
    finding = reply.strip().lower()
    if "reject" in finding:
        return StepScore(
            10,
            "DMARC policy is p=reject.",
            "Full DMARC compliance with reject policy enhances email security.",
        )
    return StepScore(
        -10,
        f"DMARC policy is '{finding}' (not p=reject).",
        "DMARC policy is not 'reject', indicating potential email spoofing risks.",
    )


def score_website_security(reply: str) -> StepScore:
    justification = reply.strip()
    finding = justification.lower()
    if finding.startswith("insecure"):
        return StepScore(-10, "Website appears insecure.", justification)
    if finding.startswith("secure") or finding.startswith("moderately secure"):
        return StepScore(5, "Website appears reasonably secure.", justification)
    return StepScore(0, "Could not definitively assess website security.", justification)


def score_grc_policies(reply: str) -> StepScore:
    text = reply.strip()
    lowered = text.lower()
    points = 0.0
    found: list[str] = []

    if "none found" not in lowered:
        for category in GRC_POLICY_CATEGORIES:
            if _grc_keyword(category) in lowered:
                points += GRC_POINTS_PER_CATEGORY
                found.append(_grc_label(category))

    points = min(points, GRC_MAX_POINTS)
    if found:
        finding = f"Found: {', '.join(found)}."
    else:
        finding = "No clear GRC policies found or declared prominently."
    return StepScore(
        points,
        finding,
        f"Awarded {format_points(points)} points for declared GRC policies. {text}",
    )


def score_breaches(reply: str) -> StepScore:
    text = reply.strip()
    count = extract_first_integer(text)
    assessment = f"Model assessment: {text}"

    if count == 0:
        points = 0
        justification = f"No major breaches reported. {assessment}"
    elif count == 1:
        points = -5
        justification = f"One major breach reported. {assessment}"
    else:
        points = -10
        justification = f"{count} major breaches reported. {assessment}"

    return StepScore(points, f"{count} major breach(es) found.", justification)


def score_litigation(reply: str) -> StepScore:
    justification = reply.strip()
    if justification.lower().startswith("yes"):
        return StepScore(-3, "History of significant litigation found.", justification)
    return StepScore(
        0,
        "No significant history of >2 major litigation cases found.",
        justification,
    )


def score_online_reviews(reply: str) -> StepScore:
    justification = reply.strip()
    sentiment = justification.lower()
    if sentiment.startswith("positive"):
        return StepScore(3, "Positive sentiment.", justification)
    if sentiment.startswith("negative"):
        return StepScore(-2, "Negative sentiment.", justification)
    return StepScore(0, "Neutral/Mixed sentiment.", justification)


def score_years_in_business(reply: str) -> StepScore:
    years = extract_first_integer(reply.strip())
    if years > 5:
        return StepScore(
            1,
            f"In business for approx {years} years.",
            "Company established for over 5 years.",
        )
    return StepScore(
        0,
        f"In business for approx {years} years (or unknown/less than 5).",
        "Company established for 5 years or less, or age unknown from this check.",
    )


def score_vulnerabilities(reply: str) -> StepScore:
    justification = reply.strip()
    verdict = justification.lower()
    if verdict.startswith(SERIOUS_VULNERABILITY_PREFIXES):
        return StepScore(-10, "Serious/Critical vulnerabilities likely.", justification)
    if verdict.startswith("none found"):
        return StepScore(10, "No serious/critical vulnerabilities identified.", justification)
    # Minor issues and unclear replies are neutral
    return StepScore(
        0,
        "Minor or no critical vulnerabilities identified from simulated scan.",
        justification,
    )


SCORERS: dict[ChecklistItemId, Callable[[str], StepScore]] = {
    ChecklistItemId.DOMAIN_PRESENCE: score_domain_presence,
    ChecklistItemId.DMARC: score_dmarc,
    ChecklistItemId.WEBSITE_SECURITY: score_website_security,
    ChecklistItemId.GRC_POLICIES: score_grc_policies,
    ChecklistItemId.BREACHES: score_breaches,
    ChecklistItemId.LITIGATION: score_litigation,
    ChecklistItemId.ONLINE_REVIEWS: score_online_reviews,
    ChecklistItemId.YEARS_IN_BUSINESS: score_years_in_business,
    ChecklistItemId.VULNERABILITIES: score_vulnerabilities,
}
