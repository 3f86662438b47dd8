"""Tests for checklist and profile models."""

import pydantic
import pytest

from vendorlens.models import (
    CHECKLIST_CONFIG,
    ChecklistItemId,
    StepResult,
    StepStatus,
    VendorRiskProfile,
    VendorTarget,
)


def test_checklist_config_covers_every_item_in_order():
    assert list(CHECKLIST_CONFIG) == list(ChecklistItemId)
    for item_id, definition in CHECKLIST_CONFIG.items():
        assert definition.id == item_id
        assert definition.question


def test_pending_result_defaults():
    result = StepResult.pending(ChecklistItemId.DMARC)

    assert result.status == StepStatus.PENDING
    assert result.points == 0
    assert result.finding == "Pending analysis..."
    assert result.justification == ""
    assert result.question == "DMARC Compliance (p=reject)"
    assert result.is_pending


def test_step_result_is_immutable():
    result = StepResult.pending(ChecklistItemId.BREACHES)

    with pytest.raises(pydantic.ValidationError):
        result.points = -5

    promoted = result.model_copy(update={"status": StepStatus.ERROR})
    assert promoted.status == StepStatus.ERROR
    assert result.status == StepStatus.PENDING


def test_profile_percentage_and_pass_threshold():
    passing = VendorRiskProfile(domain="a.example", total_score=24)
    failing = VendorRiskProfile(domain="a.example", total_score=23)

    assert passing.percentage == pytest.approx(61.54, abs=0.01)
    assert passing.passed
    assert failing.percentage == pytest.approx(58.97, abs=0.01)
    assert not failing.passed


def test_disqualified_profile_has_no_percentage():
    profile = VendorRiskProfile(domain="a.example", total_score=-10, is_disqualified=True)

    assert profile.percentage is None
    assert not profile.passed


def test_profile_json_includes_derived_fields():
    profile = VendorRiskProfile(
        domain="a.example",
        checklist_results=[StepResult.pending(item_id) for item_id in ChecklistItemId],
        total_score=39,
    )

    data = profile.to_json_dict()

    assert data["percentage"] == pytest.approx(100.0)
    assert data["passed"] is True
    assert data["checklist_results"][0]["id"] == "domain_presence"
    assert data["checklist_results"][0]["status"] == "pending"


def test_get_result_by_id():
    profile = VendorRiskProfile(
        domain="a.example",
        checklist_results=[StepResult.pending(item_id) for item_id in ChecklistItemId],
    )

    assert profile.get_result(ChecklistItemId.LITIGATION).id == ChecklistItemId.LITIGATION


def test_vendor_target_rejects_overlong_domain():
    with pytest.raises(pydantic.ValidationError, match="too long"):
        VendorTarget(domain="a" * 250 + ".com")
