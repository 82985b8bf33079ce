"""Inputs shared by every workout intent generator."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from coach_engine.models.enums import SplitType
from coach_engine.schemas.goal import Goal
from coach_engine.schemas.workout import RecentWorkout


@dataclass(frozen=True)
class PlanningContext:
    goal: Goal | None
    history: Sequence[RecentWorkout] = field(default_factory=tuple)
    split_preference: SplitType | str | None = None
    yesterday_date: str | None = None
    weight_loss_per_week: float | None = None
