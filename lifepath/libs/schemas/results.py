"""Result envelopes produced by the life-direction engine."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Dimension = Literal["focus", "energy", "health", "learning", "emotional", "growth"]
MomentumStrength = Literal["weak", "stable", "growing", "accelerating"]


class _Frozen(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class LifeScores(_Frozen):
    """Six composite dimensions on a 0-10 scale plus their mean."""

    focus: float
    energy: float
    health: float
    learning: float
    emotional: float
    growth: float
    overall: float


class PathSimulation(_Frozen):
    name: str
    description: str
    scores: LifeScores
    color: str


class MomentumInfo(_Frozen):
    strength: MomentumStrength
    label: str
    description: str


class MicroAction(_Frozen):
    task: str
    duration: str
    impact_area: Dimension


class WeakestArea(_Frozen):
    name: str
    explanation: str


class Narrative(_Frozen):
    """Rule-based guidance derived from the current path."""

    weakest_area: WeakestArea
    micro_actions: list[MicroAction]
    risks: list[str]
    positives: list[str]
    suggestions: list[str]
    momentum: MomentumInfo
    summary: str


class AnalysisResult(_Frozen):
    """Complete response for one questionnaire submission."""

    current_path: PathSimulation
    improvement_path: PathSimulation
    optimal_path: PathSimulation
    momentum: MomentumInfo
    explanation: str
    weakest_area: WeakestArea
    micro_actions: list[MicroAction]
    emotionally_intelligent_summary: str
    risks: list[str]
    positives: list[str]
    suggestions: list[str]
    disclaimer: str


__all__ = [
    "AnalysisResult",
    "Dimension",
    "LifeScores",
    "MicroAction",
    "MomentumInfo",
    "MomentumStrength",
    "Narrative",
    "PathSimulation",
    "WeakestArea",
]
