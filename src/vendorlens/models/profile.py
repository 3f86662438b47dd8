"""Step result and vendor risk profile models."""

from pydantic import Field

from vendorlens.models.base import FrozenSchema, StepStatus
from vendorlens.models.checklist import (
    CHECKLIST_CONFIG,
    MAX_POSSIBLE_SCORE_POST_QUALIFICATION,
    PASS_THRESHOLD_PERCENTAGE,
    ChecklistItemId,
)

PENDING_FINDING = "Pending analysis..."


class StepResult(FrozenSchema):
    """Outcome of one checklist step for one run."""

    id: ChecklistItemId
    question: str
    finding: str
    points: float = 0.0
    justification: str = ""
    status: StepStatus = StepStatus.PENDING

    @classmethod
    def pending(cls, item_id: ChecklistItemId) -> "StepResult":
        """Create the initial placeholder for a checklist item."""
        return cls(
            id=item_id,
            question=CHECKLIST_CONFIG[item_id].question,
            finding=PENDING_FINDING,
        )

    @property
    def is_pending(self) -> bool:
        return self.status == StepStatus.PENDING


class VendorRiskProfile(FrozenSchema):
    """Aggregate result of one analysis run."""

    domain: str
    checklist_results: list[StepResult] = Field(default_factory=list)
    total_score: float = 0.0
    summary: str = ""
    is_disqualified: bool = False

    @property
    def percentage(self) -> float | None:
        """Score as a share of the maximum post-qualification score."""
        if self.is_disqualified:
            return None
        return self.total_score / MAX_POSSIBLE_SCORE_POST_QUALIFICATION * 100

    @property
    def passed(self) -> bool:
        percentage = self.percentage
        return percentage is not None and percentage >= PASS_THRESHOLD_PERCENTAGE

    def get_result(self, item_id: ChecklistItemId) -> StepResult:
        """Return the result for a checklist item."""
        for result in self.checklist_results:
            if result.id == item_id:
                return result
        raise KeyError(item_id)

    def to_json_dict(self) -> dict:
        """Convert to JSON-serializable dictionary with derived fields."""
        data = self.model_dump(mode="json")
        data["percentage"] = self.percentage
        data["passed"] = self.passed
        return data
