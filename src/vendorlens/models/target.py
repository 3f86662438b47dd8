"""Analysis target model."""

from pydantic import Field, field_validator

from vendorlens.models.base import BaseSchema

MAX_DOMAIN_LENGTH = 253


class VendorTarget(BaseSchema):
    """Vendor domain submitted for analysis."""

    domain: str = Field(description="Vendor domain name", examples=["example.com"])

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        domain = v.strip()
        if not domain:
            raise ValueError("Please enter a vendor domain.")

        # Accept pasted URLs: keep only the host part
        domain = domain.lower()
        for scheme in ("https://", "http://"):
            domain = domain.removeprefix(scheme)
        domain = domain.split("/", 1)[0].strip()

        if not domain:
            raise ValueError("Please enter a vendor domain.")
        if len(domain) > MAX_DOMAIN_LENGTH:
            raise ValueError(f"Domain too long (max {MAX_DOMAIN_LENGTH} characters)")

        return domain
