from __future__ import annotations

from typing import List

from lifepath.apps.engine.narrative import templates
from lifepath.apps.engine.scoring.engine import DIMENSIONS
from lifepath.libs.schemas import (
    HabitInput,
    LifeScores,
    MicroAction,
    MomentumInfo,
    Narrative,
    WeakestArea,
)

MAX_SUGGESTIONS = 5
MIN_SUGGESTIONS = 3


def find_weakest_area(scores: LifeScores) -> str:
    """Lowest dimension; ties keep the earliest one in DIMENSIONS order."""

    weakest = DIMENSIONS[0]
    lowest = getattr(scores, weakest)
    for dimension in DIMENSIONS:
        value = getattr(scores, dimension)
        if value < lowest:
            lowest = value
            weakest = dimension
    return weakest


def momentum_for(overall: float) -> MomentumInfo:
    for upper, strength, label, description in templates.MOMENTUM_TIERS:
        if overall < upper:
            return MomentumInfo(strength=strength, label=label, description=description)
    strength, label, description = templates.TOP_MOMENTUM
    return MomentumInfo(strength=strength, label=label, description=description)


def micro_actions_for(area: str) -> List[MicroAction]:
    key = area if area in templates.MICRO_ACTIONS else "focus"
    return [
        MicroAction(task=task, duration=duration, impact_area=key)
        for task, duration in templates.MICRO_ACTIONS[key]
    ]


def _triggered_risks(habits: HabitInput) -> List[str]:
    keys = []
    if habits.phone_hours > 4:
        keys.append("phone")
    if habits.sleep_hours < 7:
        keys.append("sleep")
    if habits.activity_minutes < 20:
        keys.append("activity")
    if habits.stress_level > 7:
        keys.append("stress")
    return keys


def collect_positives(habits: HabitInput) -> List[str]:
    positives = []
    if habits.sleep_hours >= 7.5:
        positives.append(templates.POSITIVES["sleep"])
    if habits.activity_minutes >= 30:
        positives.append(templates.POSITIVES["activity"])
    if habits.productive_hours >= 4:
        positives.append(templates.POSITIVES["productive"])
    return positives


def collect_suggestions(risk_keys: List[str]) -> List[str]:
    suggestions = [templates.SUGGESTIONS[key] for key in risk_keys]
    if len(suggestions) < MIN_SUGGESTIONS:
        suggestions.append(templates.FALLBACK_SUGGESTION)
    return suggestions[:MAX_SUGGESTIONS]


def persona_for(age: float) -> str:
    for upper, persona in templates.PERSONAS:
        if age < upper:
            return persona
    return templates.PERSONAS[-1][1]


def summarize(habits: HabitInput, scores: LifeScores) -> str:
    persona = persona_for(habits.age)
    if scores.overall > 7.5:
        template = templates.SUMMARY_POSITIVE
    elif scores.overall > 5:
        template = templates.SUMMARY_NEUTRAL
    else:
        template = templates.SUMMARY_ENCOURAGING
    return template.format(persona=persona)


def derive_narrative(habits: HabitInput, scores: LifeScores) -> Narrative:
    """Deterministic guidance for the current path. No LLM, table-driven."""

    weakest = find_weakest_area(scores)
    risk_keys = _triggered_risks(habits)

    return Narrative(
        weakest_area=WeakestArea(
            name=weakest.capitalize(),
            explanation=templates.WEAKEST_AREA_EXPLANATIONS[weakest],
        ),
        micro_actions=micro_actions_for(weakest),
        risks=[templates.RISKS[key] for key in risk_keys],
        positives=collect_positives(habits),
        suggestions=collect_suggestions(risk_keys),
        momentum=momentum_for(scores.overall),
        summary=summarize(habits, scores),
    )


__all__ = [
    "collect_positives",
    "collect_suggestions",
    "derive_narrative",
    "find_weakest_area",
    "micro_actions_for",
    "momentum_for",
    "persona_for",
    "summarize",
]
