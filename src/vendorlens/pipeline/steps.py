"""Single checklist step execution."""

from vendorlens.ai.prompts.checklist import build_prompt
from vendorlens.core.exceptions import OracleError
from vendorlens.core.interfaces import IOracle
from vendorlens.core.logging import get_logger
from vendorlens.models import CHECKLIST_CONFIG, ChecklistItemId, StepResult, StepStatus
from vendorlens.pipeline.scoring import SCORERS

ERROR_FINDING = "Error in analysis"


async def evaluate_step(
    oracle: IOracle,
    item_id: ChecklistItemId,
    domain: str,
) -> StepResult:
    """Ask the oracle one checklist question and score the reply.

    Oracle failures become an ``error`` result with zero points. Any other
    exception propagates to the caller.
    """
    logger = get_logger("steps")
    question = CHECKLIST_CONFIG[item_id].question
    prompt = build_prompt(item_id, domain)

    try:
        reply = await oracle.generate(prompt)
    except OracleError as e:
        logger.warning(
            "step_failed",
            step=item_id.value,
            domain=domain,
            error=e.message,
        )
        return StepResult(
            id=item_id,
            question=question,
            finding=ERROR_FINDING,
            points=0,
            justification=e.message,
            status=StepStatus.ERROR,
        )

    score = SCORERS[item_id](reply)
    logger.debug(
        "step_completed",
        step=item_id.value,
        domain=domain,
        points=score.points,
    )
    return StepResult(
        id=item_id,
        question=question,
        finding=score.finding,
        points=score.points,
        justification=score.justification,
        status=StepStatus.COMPLETED,
    )
