"""Vendor analysis API endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from vendorlens.api.dependencies import OracleFactory, get_oracle_factory
from vendorlens.core.config import get_settings
from vendorlens.core.exceptions import ConfigurationError, ValidationError
from vendorlens.models import (
    CHECKLIST_CONFIG,
    ChecklistStepDefinition,
    StepResult,
)
from vendorlens.pipeline import RiskAnalyzer

router = APIRouter()


class AnalysisRequest(BaseModel):
    """Request to analyze a vendor domain."""

    domain: str = Field(examples=["example.com"])
    provider: Literal["gemini", "anthropic", "openai", "ollama"] | None = None


class AnalysisResponse(BaseModel):
    """Vendor risk profile response."""

    domain: str
    checklist_results: list[StepResult]
    total_score: float
    summary: str
    is_disqualified: bool
    percentage: float | None = None
    passed: bool


@router.get("/checklist", response_model=list[ChecklistStepDefinition])
async def list_checklist() -> list[ChecklistStepDefinition]:
    """List the checklist questions asked for every vendor."""
    return list(CHECKLIST_CONFIG.values())


@router.post("/analyses", response_model=AnalysisResponse)
async def create_analysis(
    request: AnalysisRequest,
    oracle_factory: OracleFactory = Depends(get_oracle_factory),
) -> AnalysisResponse:
    """
    Analyze a vendor domain.

    Runs the full checklist and returns the resulting risk profile. Fails
    with 400 for an empty domain and 503 when the provider is not configured.
    """
    try:
        oracle = oracle_factory(request.provider)
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=e.message) from None

    analyzer = RiskAnalyzer(
        oracle,
        max_concurrent_steps=get_settings().max_concurrent_steps,
    )

    try:
        profile = await analyzer.analyze(request.domain)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message) from None
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=e.message) from None

    return AnalysisResponse(**profile.to_json_dict())
