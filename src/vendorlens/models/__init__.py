"""Pydantic data models for VendorLens."""

from vendorlens.models.base import BaseSchema, FrozenSchema, StepStatus
from vendorlens.models.checklist import (
    CHECKLIST_CONFIG,
    DISQUALIFYING_POINTS,
    MAX_POSSIBLE_SCORE_POST_QUALIFICATION,
    PASS_THRESHOLD_PERCENTAGE,
    ChecklistItemId,
    ChecklistStepDefinition,
)
from vendorlens.models.profile import PENDING_FINDING, StepResult, VendorRiskProfile
from vendorlens.models.target import VendorTarget

__all__ = [
    # Base
    "BaseSchema",
    "FrozenSchema",
    "StepStatus",
    # Checklist
    "CHECKLIST_CONFIG",
    "DISQUALIFYING_POINTS",
    "MAX_POSSIBLE_SCORE_POST_QUALIFICATION",
    "PASS_THRESHOLD_PERCENTAGE",
    "ChecklistItemId",
    "ChecklistStepDefinition",
    # Results
    "PENDING_FINDING",
    "StepResult",
    "VendorRiskProfile",
    # Target
    "VendorTarget",
]
