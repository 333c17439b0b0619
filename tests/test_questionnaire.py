import pytest

from lifepath.apps.engine.questionnaire.engine import (
    DEFAULT_FORM,
    age_group,
    build_questionnaire,
    productive_label,
)


@pytest.mark.parametrize(
    "age,group",
    [(8, "child"), (12, "child"), (13, "teen"), (17, "teen"), (18, "young_adult"), (29, "young_adult"), (30, "adult"), (49, "adult"), (50, "senior")],
)
def test_age_group(age, group):
    assert age_group(age) == group


def test_productive_label_depends_on_age():
    assert productive_label(15) == "study or learning"
    assert productive_label(35) == "work or focused tasks"


def test_questionnaire_order_and_bounds():
    catalogue = build_questionnaire(15)
    ids = [q["id"] for q in catalogue["questions"]]
    assert ids == ["age", "phoneHours", "sleepHours", "productiveHours", "activityMinutes", "stressLevel"]
    age_q = catalogue["questions"][0]
    assert (age_q["min"], age_q["max"]) == (8, 70)
    productive = catalogue["questions"][3]
    assert "study or learning" in productive["question"]
    assert productive["emoji"] == "📚"
    assert catalogue["questions"][-1]["labels"] == {"1": "Very Calm", "10": "Very Stressed"}
    assert catalogue["age_group"] == "teen"


def test_questionnaire_defaults():
    catalogue = build_questionnaire()
    assert catalogue["defaults"] == DEFAULT_FORM
    assert catalogue["age_group"] == "young_adult"
    assert [m["value"] for m in catalogue["mood_options"]] == ["happy", "calm", "neutral", "worried", "sad"]
    catalogue["defaults"]["age"] = 99
    assert DEFAULT_FORM["age"] == 25
