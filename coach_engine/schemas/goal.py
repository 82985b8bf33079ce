"""Pydantic schemas for the active goal handed to the engine."""
from pydantic import Field, field_validator

from coach_engine.models.enums import GoalCategory, GoalDirection, GoalMetric, GoalPriority
from coach_engine.schemas.base import CamelModel


class GoalTarget(CamelModel):
    exercise: str | None = None
    movement: str | None = None
    metric: GoalMetric | None = None

    @field_validator("exercise", "movement")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def name(self) -> str | None:
        """Exercise if named, else movement."""
        return self.exercise or self.movement


class Goal(CamelModel):
    """The single active goal. Unknown categories are kept as plain strings."""

    category: GoalCategory | str = Field(union_mode="left_to_right")
    target: GoalTarget | None = None
    direction: GoalDirection | None = None
    value: float | None = None
    unit: str | None = None
    priority: GoalPriority = GoalPriority.MEDIUM

    @property
    def target_exercise(self) -> str | None:
        return self.target.exercise if self.target else None

    @property
    def target_name(self) -> str | None:
        return self.target.name if self.target else None

    @property
    def known_category(self) -> GoalCategory | None:
        """Category as an enum member, or None for categories the engine does not know."""
        try:
            return GoalCategory(self.category)
        except ValueError:
            return None
