from __future__ import annotations

import math
from typing import Any

from pydantic import ValidationError

from lifepath.libs.schemas import HabitInput, get_settings


class InvalidHabitInput(ValueError):
    """Request body was rejected before reaching the engine."""


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        # JSON integers can exceed float range; only floats can be inf or nan.
        return True
    return isinstance(value, float) and math.isfinite(value)


def parse_habit_payload(payload: Any) -> HabitInput:
    """Check the age bounds, then coerce the remaining fields into a HabitInput."""

    if not isinstance(payload, dict):
        raise InvalidHabitInput("Invalid input")

    min_age, max_age = get_settings().age_bounds
    age = payload.get("age")
    # A zero age is treated the same as a missing one.
    if not _is_number(age) or not age or age < min_age or age > max_age:
        raise InvalidHabitInput("Invalid age")

    try:
        return HabitInput.model_validate(payload)
    except ValidationError as exc:
        raise InvalidHabitInput("Invalid input") from exc


__all__ = ["InvalidHabitInput", "parse_habit_payload"]
