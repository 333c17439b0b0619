from __future__ import annotations

from typing import Dict

from lifepath.apps.engine.scoring.engine import compute_scores
from lifepath.libs.schemas import HabitInput, PathSimulation

PATH_STYLES: Dict[str, Dict[str, str]] = {
    "current": {
        "name": "Current Direction",
        "description": "If nothing changes",
        "color": "var(--color-warning)",
    },
    "improved": {
        "name": "Small Steps",
        "description": "With small improvements",
        "color": "var(--color-primary)",
    },
    "optimal": {
        "name": "Best Self",
        "description": "With healthy habits",
        "color": "var(--color-success)",
    },
}


def target_sleep_hours(age: float) -> float:
    # Unlike the scoring optimum, seniors are not bumped back up to 8h here.
    if age < 18:
        return 9
    if age < 30:
        return 8
    return 7.5


def improved_habits(habits: HabitInput) -> HabitInput:
    """Moderate changes someone could realistically make this week."""

    return habits.with_changes(
        phone_hours=max(1, habits.phone_hours - 1),
        sleep_hours=min(9, habits.sleep_hours + 0.5),
        activity_minutes=min(90, habits.activity_minutes + 15),
        stress_level=max(1, habits.stress_level - 2),
    )


def optimal_habits(habits: HabitInput) -> HabitInput:
    return habits.with_changes(
        phone_hours=2,
        sleep_hours=target_sleep_hours(habits.age),
        activity_minutes=60,
        stress_level=3,
        productive_hours=max(habits.productive_hours, 5),
    )


def _simulate(key: str, habits: HabitInput) -> PathSimulation:
    return PathSimulation(scores=compute_scores(habits), **PATH_STYLES[key])


def build_alternate_paths(habits: HabitInput) -> Dict[str, PathSimulation]:
    """Score the current habits alongside the improved and optimal variants."""

    return {
        "current": _simulate("current", habits),
        "improved": _simulate("improved", improved_habits(habits)),
        "optimal": _simulate("optimal", optimal_habits(habits)),
    }


__all__ = [
    "PATH_STYLES",
    "build_alternate_paths",
    "improved_habits",
    "optimal_habits",
    "target_sleep_hours",
]
