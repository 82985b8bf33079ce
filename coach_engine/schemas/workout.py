"""Pydantic schemas for workout history (input) and workout intent (output)."""
from datetime import date

from pydantic import Field, field_validator

from coach_engine.models.enums import CardioFrequency, CardioType, Intensity, WorkoutType
from coach_engine.schemas.base import CamelModel


# ============== History ==============

class LoggedSet(CamelModel):
    weight: float = Field(default=0, ge=0)
    reps: int = Field(default=0, ge=0)
    completed: bool = False


class LoggedExercise(CamelModel):
    name: str
    sets: list[LoggedSet] = Field(default_factory=list)


class RecentWorkout(CamelModel):
    """One logged session. Histories are supplied oldest to newest."""

    date: str
    body_parts: list[str] = Field(default_factory=list)
    intensity: str = ""
    exercises: list[LoggedExercise] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v):
        if isinstance(v, date):
            return v.isoformat()
        return str(v).strip()

    @field_validator("intensity", mode="before")
    @classmethod
    def normalize_intensity(cls, v):
        return (v or "").strip().lower()

    @property
    def body_parts_lower(self) -> set[str]:
        return {part.lower() for part in self.body_parts}


# ============== Intent ==============

class RepRanges(CamelModel):
    compound: str
    accessory: str


class WorkoutIntent(CamelModel):
    """What to train today. Recomputed daily, never stored as engine state."""

    body_parts: list[str]
    intensity: Intensity
    compound_sets: int = Field(ge=0)
    accessory_sets: int = Field(ge=0)
    rep_ranges: RepRanges
    target_exercise: str | None = None
    workout_type: WorkoutType = WorkoutType.MAIN
    include_stretch: bool = False
    stretch_template: str | None = None
    include_cardio: bool = False
    cardio_type: CardioType | None = None
    cardio_frequency: CardioFrequency | None = None
    split_day: int | None = None
