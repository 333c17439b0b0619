from __future__ import annotations

import math
from types import MappingProxyType
from typing import Dict, Mapping

from lifepath.libs.schemas import HabitInput, LifeScores

DIMENSIONS = ("focus", "energy", "health", "learning", "emotional", "growth")

MOOD_SCORES: Mapping[str, float] = MappingProxyType(
    {
        "happy": 9,
        "calm": 8,
        "neutral": 5,
        "worried": 3,
        "sad": 2,
    }
)
DEFAULT_MOOD_SCORE = 5

# Hours of productive time that saturate the productive score.
PRODUCTIVE_TARGET_HOURS = 6


def round_tenth(value: float) -> float:
    """Round half up to one decimal place (0.05 -> 0.1, never banker's rounding)."""

    return math.floor(value * 10 + 0.5) / 10


def optimal_sleep_hours(age: float) -> float:
    if age < 18:
        return 9
    if age < 30:
        return 8
    if age < 60:
        return 7.5
    return 8


def optimal_activity_minutes(age: float) -> float:
    return 60 if age < 18 else 30


def _distance_score(value: float, optimal: float) -> float:
    distance = abs(value - optimal)
    max_distance = max(optimal, 24 - optimal)
    return max(0, 10 - (distance / max_distance) * 10)


def metric_scores(habits: HabitInput) -> Dict[str, float]:
    """Per-metric 0-10 scores before they are blended into dimensions."""

    return {
        "sleep": _distance_score(habits.sleep_hours, optimal_sleep_hours(habits.age)),
        "phone": max(0, 10 - habits.phone_hours * 1.2),
        "activity": min(10, (habits.activity_minutes / optimal_activity_minutes(habits.age)) * 10),
        "stress": max(0, 10 - habits.stress_level),
        "mood": MOOD_SCORES.get(habits.mood, DEFAULT_MOOD_SCORE),
        "productive": min(10, (habits.productive_hours / PRODUCTIVE_TARGET_HOURS) * 10),
    }


def compute_scores(habits: HabitInput) -> LifeScores:
    """Blend metric scores into the six life dimensions.

    Each composite is rounded before later composites consume it, so
    ``learning`` and ``growth`` are built on already-rounded values.
    """
    m = metric_scores(habits)
    sleep, phone, activity = m["sleep"], m["phone"], m["activity"]
    stress, mood, productive = m["stress"], m["mood"], m["productive"]

    focus = round_tenth(sleep * 0.3 + phone * 0.4 + productive * 0.3)
    energy = round_tenth(sleep * 0.3 + activity * 0.4 + stress * 0.3)
    health = round_tenth(sleep * 0.25 + activity * 0.5 + stress * 0.25)
    learning = round_tenth(focus * 0.5 + productive * 0.3 + energy * 0.2)
    emotional = round_tenth(mood * 0.4 + stress * 0.4 + activity * 0.2)
    growth = round_tenth(learning * 0.3 + emotional * 0.3 + productive * 0.4)
    overall = round_tenth((focus + energy + health + learning + emotional + growth) / 6)

    return LifeScores(
        focus=focus,
        energy=energy,
        health=health,
        learning=learning,
        emotional=emotional,
        growth=growth,
        overall=overall,
    )


__all__ = [
    "DIMENSIONS",
    "MOOD_SCORES",
    "compute_scores",
    "metric_scores",
    "optimal_activity_minutes",
    "optimal_sleep_hours",
    "round_tenth",
]
