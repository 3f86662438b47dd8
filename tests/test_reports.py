"""Tests for the HTML report generator."""

from vendorlens.models import ChecklistItemId, StepResult, StepStatus, VendorRiskProfile
from vendorlens.reports import HTMLReportGenerator


def _profile() -> VendorRiskProfile:
    results = [StepResult.pending(item_id) for item_id in ChecklistItemId]
    results[1] = results[1].model_copy(
        update={
            "status": StepStatus.COMPLETED,
            "points": 10,
            "finding": "DMARC policy is p=reject.",
            "justification": "<script>alert(1)</script>",
        }
    )
    return VendorRiskProfile(
        domain="vendor.example",
        checklist_results=results,
        total_score=10,
        summary="Vendor FAILS with 10 points (25.6%).",
    )


def test_report_contains_verdict_and_rows():
    html = HTMLReportGenerator().generate_string(_profile())

    assert "Vendor Risk Report - vendor.example" in html
    assert "FAIL" in html
    assert "10 (25.6%)" in html
    assert html.count("<tr>") == 10  # header + nine steps


def test_report_escapes_model_text(tmp_path):
    path = HTMLReportGenerator().generate(_profile(), tmp_path / "r.html")
    html = path.read_text(encoding="utf-8")

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
