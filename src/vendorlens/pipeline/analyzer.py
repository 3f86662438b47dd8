"""Vendor risk analysis pipeline."""

import asyncio
from typing import Callable

from pydantic import ValidationError as PydanticValidationError

from vendorlens.core.exceptions import (
    ConfigurationError,
    UnexpectedRunError,
    ValidationError,
)
from vendorlens.core.interfaces import IOracle
from vendorlens.core.logging import get_logger
from vendorlens.models import (
    MAX_POSSIBLE_SCORE_POST_QUALIFICATION,
    PASS_THRESHOLD_PERCENTAGE,
    ChecklistItemId,
    StepResult,
    StepStatus,
    VendorRiskProfile,
    VendorTarget,
)
from vendorlens.pipeline.scoring import format_points
from vendorlens.pipeline.steps import evaluate_step

RUN_ERROR_FINDING = "Error during analysis"
DISQUALIFIED_SUMMARY = (
    "Vendor does not meet basic criteria (domain presence). "
    "Risk assessment terminated. FAILED."
)
RUN_ERROR_SUMMARY = "Analysis could not be completed due to an error."

# Steps evaluated once the vendor passes the domain presence check
QUALIFIED_STEPS = [
    item_id for item_id in ChecklistItemId if item_id != ChecklistItemId.DOMAIN_PRESENCE
]

ProgressCallback = Callable[[StepResult], None]


def validate_domain(domain: str) -> str:
    """Normalize a submitted domain or raise ``ValidationError``."""
    try:
        return VendorTarget(domain=domain).domain
    except PydanticValidationError as e:
        message = str(e.errors()[0]["msg"]).removeprefix("Value error, ")
        raise ValidationError(message, details={"domain": domain}) from None


def score_total(results: list[StepResult]) -> float:
    """Sum the points of every step except domain presence."""
    return sum(
        result.points
        for result in results
        if result.id != ChecklistItemId.DOMAIN_PRESENCE
    )


def summarize(total: float, results: list[StepResult]) -> str:
    """Compose the pass/fail summary for a fully evaluated vendor."""
    percentage = total / MAX_POSSIBLE_SCORE_POST_QUALIFICATION * 100
    points = format_points(total)

    if percentage >= PASS_THRESHOLD_PERCENTAGE:
        return (
            f"Vendor PASSES with {points} points ({percentage:.1f}%). "
            "Strengths observed in DMARC, security posture, and GRC. "
            "Continuous monitoring advised."
        )

    shortcomings = ", ".join(
        result.question.split(" - ")[0]
        for result in results
        if result.points < 0 and result.id != ChecklistItemId.DOMAIN_PRESENCE
    )
    return (
        f"Vendor FAILS with {points} points ({percentage:.1f}%). "
        f"Shortcomings identified in areas such as {shortcomings or 'various criteria'}. "
        "Further investigation needed."
    )


class RiskAnalyzer:
    """Runs the vendor risk checklist against one domain at a time.

    The domain presence step runs first. A negative result there
    disqualifies the vendor and the remaining steps stay pending. Otherwise
    the remaining steps run in checklist order, or with bounded concurrency
    when ``max_concurrent_steps`` is above one.
    """

    def __init__(
        self,
        oracle: IOracle,
        max_concurrent_steps: int = 1,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        self.logger = get_logger("analyzer")
        self._oracle = oracle
        self._max_concurrent_steps = max(1, max_concurrent_steps)
        self._progress_callback = progress_callback

    @property
    def oracle(self) -> IOracle:
        return self._oracle

    async def analyze(self, domain: str) -> VendorRiskProfile:
        """Analyze a vendor domain and return its risk profile.

        Raises:
            ValidationError: The domain is empty
            ConfigurationError: The oracle has no credential configured
        """
        domain = validate_domain(domain)
        if not self._oracle.is_configured:
            raise ConfigurationError(
                f"{self._oracle.name} credential not configured",
                details={"provider": self._oracle.name},
            )

        results = {item_id: StepResult.pending(item_id) for item_id in ChecklistItemId}

        self.logger.info(
            "analysis_started",
            domain=domain,
            provider=self._oracle.name,
        )

        try:
            return await self._evaluate(domain, results)
        except UnexpectedRunError as e:
            self.logger.error(
                "analysis_failed",
                domain=domain,
                error=e.message,
                exc_info=e.__cause__,
            )
            return self._errored_profile(domain, results)

    async def _evaluate(
        self,
        domain: str,
        results: dict[ChecklistItemId, StepResult],
    ) -> VendorRiskProfile:
        """Run the checklist, updating ``results`` as steps finish."""
        try:
            presence = await self._run_step(ChecklistItemId.DOMAIN_PRESENCE, domain)
            results[ChecklistItemId.DOMAIN_PRESENCE] = presence

            if presence.points < 0:
                self.logger.info("analysis_disqualified", domain=domain)
                return VendorRiskProfile(
                    domain=domain,
                    checklist_results=list(results.values()),
                    total_score=presence.points,
                    summary=DISQUALIFIED_SUMMARY,
                    is_disqualified=True,
                )

            await self._run_qualified_steps(domain, results)
        except ConfigurationError:
            raise
        except Exception as e:
            raise UnexpectedRunError(f"Analysis failed: {e}", domain=domain) from e

        ordered = list(results.values())
        total = score_total(ordered)
        profile = VendorRiskProfile(
            domain=domain,
            checklist_results=ordered,
            total_score=total,
            summary=summarize(total, ordered),
            is_disqualified=False,
        )

        self.logger.info(
            "analysis_completed",
            domain=domain,
            total_score=total,
            passed=profile.passed,
        )
        return profile

    async def _run_step(self, item_id: ChecklistItemId, domain: str) -> StepResult:
        result = await evaluate_step(self._oracle, item_id, domain)
        if self._progress_callback is not None:
            self._progress_callback(result)
        return result

    async def _run_qualified_steps(
        self,
        domain: str,
        results: dict[ChecklistItemId, StepResult],
    ) -> None:
        """Evaluate every step after domain presence, updating ``results``."""
        if self._max_concurrent_steps == 1:
            for item_id in QUALIFIED_STEPS:
                results[item_id] = await self._run_step(item_id, domain)
            return

        semaphore = asyncio.Semaphore(self._max_concurrent_steps)

        async def run_limited(item_id: ChecklistItemId) -> StepResult:
            async with semaphore:
                return await self._run_step(item_id, domain)

        outcomes = await asyncio.gather(
            *(run_limited(item_id) for item_id in QUALIFIED_STEPS),
            return_exceptions=True,
        )

        first_error: BaseException | None = None
        for item_id, outcome in zip(QUALIFIED_STEPS, outcomes):
            if isinstance(outcome, BaseException):
                first_error = first_error or outcome
            else:
                results[item_id] = outcome

        if first_error is not None:
            raise first_error

    def _errored_profile(
        self,
        domain: str,
        results: dict[ChecklistItemId, StepResult],
    ) -> VendorRiskProfile:
        """Build the profile for a run aborted by an unexpected error.

        Domain presence never counts toward the total here, whether or not
        it had already run.
        """
        ordered = [
            result.model_copy(
                update={"status": StepStatus.ERROR, "finding": RUN_ERROR_FINDING}
            )
            if result.is_pending
            else result
            for result in results.values()
        ]
        return VendorRiskProfile(
            domain=domain,
            checklist_results=ordered,
            total_score=score_total(ordered),
            summary=RUN_ERROR_SUMMARY,
            is_disqualified=False,
        )
