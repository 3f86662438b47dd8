"""AI prompt templates."""

from vendorlens.ai.prompts.checklist import (
    CHECKLIST_PROMPTS,
    GRC_POLICY_CATEGORIES,
    build_prompt,
)

__all__ = ["CHECKLIST_PROMPTS", "GRC_POLICY_CATEGORIES", "build_prompt"]
