"""Tests for structured logging setup."""

import json

import pytest

from vendorlens.core.logging import get_logger, setup_logging
from vendorlens.pipeline import RiskAnalyzer


def _events(err: str) -> list[dict]:
    return [json.loads(line) for line in err.splitlines() if line.startswith("{")]


def test_logger_is_bound_to_component_name(capsys):
    setup_logging(level="INFO", log_format="json")

    get_logger("pipeline").info("analysis_started", domain="good.example")

    (event,) = _events(capsys.readouterr().err)
    assert event["event"] == "analysis_started"
    assert event["logger"] == "pipeline"
    assert event["domain"] == "good.example"
    assert event["level"] == "info"


def test_level_filters_debug_events(capsys):
    setup_logging(level="INFO", log_format="json")

    get_logger("steps").debug("step_completed")

    assert _events(capsys.readouterr().err) == []


@pytest.mark.asyncio
async def test_analysis_emits_lifecycle_events(capsys, positive_oracle):
    setup_logging(level="INFO", log_format="json")

    await RiskAnalyzer(positive_oracle).analyze("good.example")

    names = [e["event"] for e in _events(capsys.readouterr().err)]
    assert "analysis_started" in names
    assert "analysis_completed" in names
