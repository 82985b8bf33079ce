from pydantic import Field

from coach_engine.models.enums import CarbBias, ExperienceLevel
from coach_engine.schemas.base import CamelModel


class UserProfile(CamelModel):
    # snake_case on both sides, matching the profile records callers already hold
    weight_kg: float | None = Field(default=None, gt=0, alias="weight_kg")
    height_cm: float | None = Field(default=None, gt=0, alias="height_cm")
    experience_level: ExperienceLevel | None = Field(default=None, alias="experience_level")


class NutritionIntent(CamelModel):
    calorie_target: int = Field(ge=1200)
    protein_min: int = Field(ge=0)
    carb_bias: CarbBias
