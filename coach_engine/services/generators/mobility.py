"""Mobility goals: high-rep range-of-motion work at maintain intensity."""

from __future__ import annotations

from coach_engine.catalog.keyword_tables import MOBILITY_MOVEMENT_TABLE
from coach_engine.models.enums import Intensity, WorkoutType
from coach_engine.schemas.workout import RepRanges, WorkoutIntent
from coach_engine.services.generators.context import PlanningContext
from coach_engine.services.matching import first_keyword_match
from coach_engine.services.rotation import rotate_body_parts


def _mobility_target(ctx: PlanningContext) -> str | None:
    if ctx.goal is None or ctx.goal.target is None:
        return None
    return ctx.goal.target.movement or ctx.goal.target.exercise


def generate_mobility_workout(ctx: PlanningContext) -> WorkoutIntent:
    # No fatigue check: mobility work is not load-limited
    target = _mobility_target(ctx)
    parts = first_keyword_match(target, MOBILITY_MOVEMENT_TABLE)
    body_parts = list(parts) if parts else rotate_body_parts(ctx.history)

    return WorkoutIntent(
        body_parts=body_parts,
        intensity=Intensity.MAINTAIN,
        compound_sets=2,
        accessory_sets=2,
        rep_ranges=RepRanges(compound="12-15", accessory="15-20"),
        workout_type=WorkoutType.MAIN,
        include_stretch=True,
        stretch_template="full body",
        target_exercise=target,
    )
