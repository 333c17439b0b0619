from __future__ import annotations

import logging

from lifepath.apps.engine.narrative import templates
from lifepath.apps.engine.narrative.engine import derive_narrative
from lifepath.apps.engine.paths.engine import build_alternate_paths
from lifepath.libs.schemas import AnalysisResult, HabitInput

logger = logging.getLogger(__name__)


def simulate_future(habits: HabitInput) -> AnalysisResult:
    """
    Score the current habits, project the improved and optimal paths,
    and attach rule-based guidance. Pure; no I/O beyond debug logging.
    """
    paths = build_alternate_paths(habits)
    current = paths["current"]
    narrative = derive_narrative(habits, current.scores)

    logger.debug(
        "simulation.complete overall=%s improved=%s optimal=%s weakest=%s",
        current.scores.overall,
        paths["improved"].scores.overall,
        paths["optimal"].scores.overall,
        narrative.weakest_area.name,
    )

    return AnalysisResult(
        current_path=current,
        improvement_path=paths["improved"],
        optimal_path=paths["optimal"],
        momentum=narrative.momentum,
        explanation=templates.TRAJECTORY_EXPLANATION,
        weakest_area=narrative.weakest_area,
        micro_actions=narrative.micro_actions,
        emotionally_intelligent_summary=narrative.summary,
        risks=narrative.risks,
        positives=narrative.positives,
        suggestions=narrative.suggestions,
        disclaimer=templates.DISCLAIMER,
    )


__all__ = ["simulate_future"]
