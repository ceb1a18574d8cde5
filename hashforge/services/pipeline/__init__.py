"""
Pipeline services for the hash sandbox.

This module implements:
1. Sequential evaluation of a step pipeline over a password/salt pair
2. Avalanche comparison against single-character password mutations
3. Ready-made preset pipelines and demo scenarios
"""

from collections.abc import Iterable

from hashforge.services.pipeline.avalanche import AvalancheAnalyzer, AvalancheRow
from hashforge.services.pipeline.evaluator import (
    Pipeline,
    PipelineEvaluator,
    RunResult,
    TraceEntry,
)
from hashforge.services.pipeline.presets import PRESETS, SCENARIOS, Scenario


def evaluate(password: str, salt: str, pipeline: Pipeline | Iterable[str]) -> RunResult:
    """Evaluate ``pipeline`` over ``password + salt``."""
    return PipelineEvaluator().evaluate(password, salt, pipeline)


def avalanche_report(
    password: str,
    salt: str,
    pipeline: Pipeline | Iterable[str],
) -> list[AvalancheRow]:
    """Avalanche comparison of ``pipeline`` for ``password``."""
    return AvalancheAnalyzer().report(password, salt, pipeline)


__all__ = [
    "AvalancheAnalyzer",
    "AvalancheRow",
    "Pipeline",
    "PipelineEvaluator",
    "RunResult",
    "TraceEntry",
    "PRESETS",
    "SCENARIOS",
    "Scenario",
    "evaluate",
    "avalanche_report",
]
