"""Pydantic models and schema utilities."""

from .habits import HabitInput
from .results import (
    AnalysisResult,
    LifeScores,
    MicroAction,
    MomentumInfo,
    Narrative,
    PathSimulation,
    WeakestArea,
)
from .settings import AppSettings, get_settings

__all__ = [
    "AnalysisResult",
    "AppSettings",
    "HabitInput",
    "LifeScores",
    "MicroAction",
    "MomentumInfo",
    "Narrative",
    "PathSimulation",
    "WeakestArea",
    "get_settings",
]
