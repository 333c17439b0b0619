"""Habit questionnaire input schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class HabitInput(BaseModel):
    """Self-reported daily habits for a single analysis request.

    Ranges are not enforced here; callers validate ``age`` and the scoring
    engine clamps everything else.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        allow_inf_nan=False,
    )

    age: float
    phone_hours: float
    sleep_hours: float
    productive_hours: float
    activity_minutes: float
    stress_level: float
    mood: str | None = "neutral"

    @field_validator("mood", mode="before")
    @classmethod
    def _non_text_mood_is_unknown(cls, value: Any) -> Any:
        # Unknown moods score as neutral downstream; never reject the request.
        return value if isinstance(value, str) else None

    def with_changes(self, **changes: Any) -> "HabitInput":
        """Return a copy with the given fields replaced."""

        return self.model_copy(update=changes)


__all__ = ["HabitInput"]
