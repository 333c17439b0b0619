"""Fixed copy used by the narrative engine."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# (upper bound exclusive, strength, label, description); scores past the last bound use TOP_MOMENTUM.
MOMENTUM_TIERS: Tuple[Tuple[float, str, str, str], ...] = (
    (4, "weak", "Needs Focus", "Things could be clearer, but small changes can help a lot."),
    (6, "stable", "Steady", "You are doing okay and keeping your path steady."),
    (8, "growing", "Growing", "Your good habits are starting to make a real difference."),
)
TOP_MOMENTUM = ("accelerating", "Great!", "Your habits are building strong momentum for a great future.")

# dimension -> ((task, duration), ...)
MICRO_ACTIONS: Mapping[str, Tuple[Tuple[str, str], ...]] = MappingProxyType(
    {
        "focus": (
            ("Set a 1-hour focus timer", "60 mins"),
            ("Phone-free meal", "20 mins"),
            ("Write down top 3 priorities", "5 mins"),
        ),
        "energy": (
            ("Quick sunlight walk", "10 mins"),
            ("Rest with a power nap", "15 mins"),
            ("Full glass of water now", "1 min"),
        ),
        "health": (
            ("Gentle stretching", "10 mins"),
            ("Stand up and move every hour", "5 mins"),
            ("Eat a healthy snack", "5 mins"),
        ),
        "learning": (
            ("Read 2 pages of a book", "5 mins"),
            ("Watch one helpful video", "10 mins"),
            ("Think about one new thing learned", "3 mins"),
        ),
        "emotional": (
            ("Slow breathing (4 times)", "2 mins"),
            ("Text a friend or family", "2 mins"),
            ("Write one thing you are thankful for", "1 min"),
        ),
        "growth": (
            ("Check your progress", "5 mins"),
            ("Think about your future goals", "5 mins"),
            ("Try one small new thing today", "10 mins"),
        ),
    }
)

WEAKEST_AREA_EXPLANATIONS: Mapping[str, str] = MappingProxyType(
    {
        "focus": "It's hard to get things done when you can't focus. Focusing better will make your life easier.",
        "energy": "You are low on energy. Getting more rest will help you stay on track.",
        "health": "Moving your body is very important. It helps you stay healthy and feel better.",
        "learning": "Learning new things keeps your mind sharp. Life is more exciting when you keep growing.",
        "emotional": "Being calm is a great skill. It helps you handle hard times much easier.",
        "growth": "Small improvements add up over time. Consistency is the key to a better life.",
    }
)

RISKS: Mapping[str, str] = MappingProxyType(
    {
        "phone": "High screen time may reduce focus and sleep quality over time",
        "sleep": "Low sleep can decrease energy, memory, and emotional stability",
        "activity": "Limited physical activity may impact mood and long-term health",
        "stress": "High stress can affect focus, sleep, and overall well-being",
    }
)

POSITIVES: Mapping[str, str] = MappingProxyType(
    {
        "sleep": "Good sleep duration supports brain health and energy",
        "activity": "Regular movement boosts mood, energy, and health",
        "productive": "Consistent focus time builds skills and progress",
    }
)

SUGGESTIONS: Mapping[str, str] = MappingProxyType(
    {
        "phone": "Reduce phone use by 1 hour, starting with the hour before bed",
        "sleep": "Go to sleep 30 minutes earlier to gradually reach 7-8 hours",
        "activity": "Start with 10-15 minutes of walking or stretching daily",
        "stress": "Try 5 minutes of breathing exercises when stress builds up",
    }
)
FALLBACK_SUGGESTION = "Keep your healthy routines and add one small positive habit each week"

# (persona upper age bound exclusive, persona)
PERSONAS: Tuple[Tuple[float, str], ...] = (
    (13, "Explorer"),
    (20, "Rising Star"),
    (60, "Steward of Life"),
    (float("inf"), "Guide"),
)

SUMMARY_POSITIVE = (
    "As a {persona}, your current habits are creating a bright, clear path. "
    "You are building a great life for the future."
)
SUMMARY_NEUTRAL = (
    "As a {persona}, you are staying on a steady path. "
    "A few small changes could give you more energy and focus."
)
SUMMARY_ENCOURAGING = (
    "As a {persona}, life might feel a bit hard right now. "
    "Remember, you can change your path—one small change today can help a lot."
)

TRAJECTORY_EXPLANATION = "Your trajectory is a reflection of today's choices, not a fixed point in the future."
DISCLAIMER = (
    "This is a direction simulation, not a prediction or medical advice. "
    "Your future is shaped by the choices you make. "
    "Small improvements can create meaningful change over time."
)
