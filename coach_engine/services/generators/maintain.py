"""Default plan when no goal is active."""

from __future__ import annotations

from coach_engine.models.enums import Intensity, WorkoutType
from coach_engine.schemas.workout import RepRanges, WorkoutIntent
from coach_engine.services.fatigue import check_fatigue
from coach_engine.services.generators.context import PlanningContext
from coach_engine.services.rotation import rotate_body_parts


def generate_maintain_workout(ctx: PlanningContext) -> WorkoutIntent:
    return WorkoutIntent(
        body_parts=rotate_body_parts(ctx.history),
        intensity=check_fatigue(Intensity.MAINTAIN, ctx.history),
        compound_sets=3,
        accessory_sets=2,
        rep_ranges=RepRanges(compound="8-10", accessory="10-12"),
        workout_type=WorkoutType.MAIN,
    )
