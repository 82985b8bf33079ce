from pydantic import Field

from coach_engine.models.enums import ExerciseClass
from coach_engine.schemas.base import CamelModel


class ProgressionTarget(CamelModel):
    """Next-session load and rep target for one exercise."""

    next_weight: float = Field(ge=0)
    target_reps: int = Field(ge=1)
    classification: ExerciseClass = ExerciseClass.ACCESSORY
    deload: bool = False
