"""Vendor risk scoring pipeline."""

from vendorlens.pipeline.analyzer import RiskAnalyzer, summarize, validate_domain
from vendorlens.pipeline.scoring import SCORERS, StepScore
from vendorlens.pipeline.steps import evaluate_step

__all__ = [
    "RiskAnalyzer",
    "SCORERS",
    "StepScore",
    "evaluate_step",
    "summarize",
    "validate_domain",
]
