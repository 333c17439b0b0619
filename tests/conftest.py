import os

import pytest

os.environ.setdefault("LIFEPATH_ENVIRONMENT", "test")
os.environ.setdefault("LIFEPATH_LOG_FORMAT", "text")

from lifepath.libs.schemas import HabitInput, get_settings


@pytest.fixture
def make_habits():
    def _make(**overrides) -> HabitInput:
        data = {
            "age": 25,
            "phone_hours": 3,
            "sleep_hours": 7,
            "productive_hours": 4,
            "activity_minutes": 30,
            "stress_level": 5,
            "mood": "neutral",
        }
        data.update(overrides)
        return HabitInput(**data)

    return _make


@pytest.fixture
def struggling_habits() -> HabitInput:
    return HabitInput(
        age=25,
        phone_hours=6,
        sleep_hours=5,
        productive_hours=2,
        activity_minutes=10,
        stress_level=9,
        mood="worried",
    )


@pytest.fixture
def thriving_habits() -> HabitInput:
    return HabitInput(
        age=25,
        phone_hours=1,
        sleep_hours=8,
        productive_hours=5,
        activity_minutes=45,
        stress_level=2,
        mood="happy",
    )


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
