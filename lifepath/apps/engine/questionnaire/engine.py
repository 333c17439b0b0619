from __future__ import annotations

from typing import Any, Dict, List, Optional

DEFAULT_FORM: Dict[str, Any] = {
    "age": 25,
    "phoneHours": 3,
    "sleepHours": 7,
    "productiveHours": 4,
    "activityMinutes": 30,
    "stressLevel": 5,
    "mood": "neutral",
}

MOOD_OPTIONS: List[Dict[str, str]] = [
    {"emoji": "😊", "label": "Happy", "value": "happy"},
    {"emoji": "😌", "label": "Calm", "value": "calm"},
    {"emoji": "😐", "label": "Neutral", "value": "neutral"},
    {"emoji": "😟", "label": "Worried", "value": "worried"},
    {"emoji": "😢", "label": "Sad", "value": "sad"},
]


def age_group(age: float) -> str:
    if age < 13:
        return "child"
    if age < 18:
        return "teen"
    if age < 30:
        return "young_adult"
    if age < 50:
        return "adult"
    return "senior"


def _is_student(age: float) -> bool:
    return age_group(age) in {"child", "teen"}


def productive_label(age: float) -> str:
    return "study or learning" if _is_student(age) else "work or focused tasks"


def build_questionnaire(age: Optional[float] = None) -> Dict[str, Any]:
    """Slider questions for the client form, worded for the given age."""

    age_val = DEFAULT_FORM["age"] if age is None else age
    questions = [
        {
            "id": "age",
            "question": "How old are you?",
            "min": 8,
            "max": 70,
            "step": 1,
            "unit": "years",
            "emoji": "🎂",
        },
        {
            "id": "phoneHours",
            "question": "How many hours do you spend on your phone daily?",
            "min": 0,
            "max": 16,
            "step": 0.5,
            "unit": "hours",
            "emoji": "📱",
        },
        {
            "id": "sleepHours",
            "question": "How many hours do you sleep each night?",
            "min": 3,
            "max": 12,
            "step": 0.5,
            "unit": "hours",
            "emoji": "😴",
        },
        {
            "id": "productiveHours",
            "question": f"How many hours do you spend on {productive_label(age_val)} daily?",
            "min": 0,
            "max": 16,
            "step": 0.5,
            "unit": "hours",
            "emoji": "📚" if _is_student(age_val) else "💼",
        },
        {
            "id": "activityMinutes",
            "question": "How many minutes of physical activity do you do daily?",
            "min": 0,
            "max": 180,
            "step": 5,
            "unit": "minutes",
            "emoji": "🏃",
        },
        {
            "id": "stressLevel",
            "question": "How stressed do you feel lately?",
            "min": 1,
            "max": 10,
            "step": 1,
            "unit": "",
            "emoji": "💭",
            "labels": {"1": "Very Calm", "10": "Very Stressed"},
        },
    ]
    return {
        "age_group": age_group(age_val),
        "questions": questions,
        "mood_options": [dict(option) for option in MOOD_OPTIONS],
        "defaults": dict(DEFAULT_FORM),
    }


__all__ = ["DEFAULT_FORM", "MOOD_OPTIONS", "age_group", "build_questionnaire", "productive_label"]
