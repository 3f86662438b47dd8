"""Service status endpoints."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from vendorlens.api.dependencies import OracleFactory, get_oracle_factory
from vendorlens.core.exceptions import ConfigurationError
from vendorlens.version import __version__

router = APIRouter()


class HealthResponse(BaseModel):
    """Service status and readiness of the default provider."""

    status: str
    version: str
    provider: str | None = None
    provider_configured: bool = False
    detail: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health_check(
    oracle_factory: OracleFactory = Depends(get_oracle_factory),
) -> HealthResponse:
    """
    Report whether analyses can run.

    The service is ``degraded`` when the default provider cannot be built
    or has no credential, since every analysis would then be refused.
    """
    try:
        oracle = oracle_factory(None)
    except ConfigurationError as e:
        return HealthResponse(status="degraded", version=__version__, detail=e.message)

    return HealthResponse(
        status="healthy" if oracle.is_configured else "degraded",
        version=__version__,
        provider=oracle.name,
        provider_configured=oracle.is_configured,
    )


@router.get("/")
async def root() -> dict:
    """Service index."""
    return {
        "name": "VendorLens API",
        "version": __version__,
        "docs": "/docs",
        "checklist": "/api/v1/checklist",
    }
