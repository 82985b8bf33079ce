"""Everything an external caller hands the engine for one user on one day."""
from datetime import date

from pydantic import Field, field_validator

from coach_engine.models.enums import SplitType
from coach_engine.schemas.base import CamelModel
from coach_engine.schemas.goal import Goal
from coach_engine.schemas.nutrition import UserProfile
from coach_engine.schemas.workout import RecentWorkout


class PlanningSnapshot(CamelModel):
    active_goal: Goal | None = None
    recent_workouts: list[RecentWorkout] = Field(default_factory=list)
    split_preference: SplitType | None = None
    yesterday_date: str | None = None
    injury_constraints: list[str] = Field(default_factory=list)
    user_profile: UserProfile = Field(default_factory=UserProfile)
    weight_loss_per_week: float | None = Field(default=None, ge=0)

    @field_validator("yesterday_date", mode="before")
    @classmethod
    def normalize_date(cls, v):
        if isinstance(v, date):
            return v.isoformat()
        return v
