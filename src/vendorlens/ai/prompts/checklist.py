"""Checklist question prompt templates.

Each template takes a single ``{domain}`` placeholder and asks for a reply
short enough to be scored by substring and prefix checks.
"""

from vendorlens.models.checklist import ChecklistItemId

GRC_POLICY_CATEGORIES = [
    "ISO 27001 certification",
    "SOC attestations",
    "a comprehensive Privacy Policy",
    "an Information Security Policy",
]

DOMAIN_PRESENCE_PROMPT = (
    "Based on public information, does '{domain}' appear to be a legitimate, "
    "active company domain with an associated website and likely email system? "
    "Respond with only 'Yes' or 'No'."
)

DMARC_PROMPT = (
    "What is the DMARC policy (p=) for the domain '{domain}'? Check common DNS "
    "records. Respond with 'reject', 'quarantine', 'none', or 'unknown'."
)

WEBSITE_SECURITY_PROMPT = (
    "Briefly assess the general website security of 'https://{domain}'. Does it "
    "robustly use HTTPS? Are there any obvious, easily identifiable major "
    "security issues from a quick public check (e.g., mixed content, very "
    "outdated ciphers, certificate errors, no HSTS)? Respond with 'Secure', "
    "'Moderately Secure', or 'Insecure', followed by a brief justification."
)

GRC_POLICIES_PROMPT = (
    "Does the website for '{domain}' visibly declare or have dedicated, easily "
    "findable sections for any of the following: "
    + ", ".join(GRC_POLICY_CATEGORIES)
    + "? List which of these four categories are clearly present and seem "
    "substantial. Respond with a comma-separated list of found items (e.g., "
    "'ISO 27001 certification, Privacy Policy') or 'None found'."
)

BREACHES_PROMPT = (
    "Based on publicly available information, how many distinct major publicly "
    "reported cybersecurity or privacy breaches are associated with the company "
    "operating '{domain}' in the last 5-7 years? Respond with a number (0, 1, 2, "
    "3, etc.) and a brief summary if any are found."
)

LITIGATION_PROMPT = (
    "Is there a significant public record of more than two major litigation "
    "cases (e.g., class-action lawsuits related to business practices, data "
    "privacy, major contract disputes, regulatory fines) against the company "
    "operating '{domain}' in recent years (last 5-7 years)? Respond 'Yes' or "
    "'No', and briefly state why if 'Yes'."
)

ONLINE_REVIEWS_PROMPT = (
    "What is the general public sentiment from online comments, news articles, "
    "and reviews about the organization '{domain}'? Respond with 'Positive', "
    "'Negative', 'Neutral', or 'Mixed', and a very brief summary."
)

YEARS_IN_BUSINESS_PROMPT = (
    "Approximately how many years has the company primarily associated with the "
    "domain '{domain}' been in business or operation? Respond with a number "
    "(e.g., '15') or 'Unknown'."
)

VULNERABILITIES_PROMPT = (
    "Based on a hypothetical, non-invasive online scan of public-facing assets "
    "for '{domain}' (website, known services), are any critical or high-severity "
    "vulnerabilities commonly found (e.g., unpatched critical CVEs in exposed "
    "software, severe SSL/TLS misconfigurations, SQL injection possibilities "
    "based on URL patterns, exposed sensitive directories)? Respond 'None "
    "found', 'Minor issues found', or 'Serious/Critical vulnerabilities "
    "likely', with a brief explanation."
)

CHECKLIST_PROMPTS: dict[ChecklistItemId, str] = {
    ChecklistItemId.DOMAIN_PRESENCE: DOMAIN_PRESENCE_PROMPT,
    ChecklistItemId.DMARC: DMARC_PROMPT,
    ChecklistItemId.WEBSITE_SECURITY: WEBSITE_SECURITY_PROMPT,
    ChecklistItemId.GRC_POLICIES: GRC_POLICIES_PROMPT,
    ChecklistItemId.BREACHES: BREACHES_PROMPT,
    ChecklistItemId.LITIGATION: LITIGATION_PROMPT,
    ChecklistItemId.ONLINE_REVIEWS: ONLINE_REVIEWS_PROMPT,
    ChecklistItemId.YEARS_IN_BUSINESS: YEARS_IN_BUSINESS_PROMPT,
    ChecklistItemId.VULNERABILITIES: VULNERABILITIES_PROMPT,
}


def build_prompt(item_id: ChecklistItemId, domain: str) -> str:
    """Render the prompt for a checklist item."""
    return CHECKLIST_PROMPTS[item_id].format(domain=domain)
