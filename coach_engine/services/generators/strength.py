"""
Strength Workout Generator

Two kinds of strength goal:

1. Specific primary lift (e.g. "bench press to 100 kg")
   - Follows the user's split; on the lift's day its supporting muscles
     lead the body-part list
   - The lift itself is only surfaced as the target exercise when a
     periodic test is due
2. Overall strength (no exercise named)
   - Follows the split with no target exercise

Both use 4 compound / 2 accessory sets at 4-6 / 8-10 reps with a separate
pre-lift stretch.
"""

from __future__ import annotations

import logging

from coach_engine.models.enums import Intensity, WorkoutType
from coach_engine.schemas.workout import RepRanges, WorkoutIntent
from coach_engine.services.fatigue import check_fatigue
from coach_engine.services.generators.context import PlanningContext
from coach_engine.services.primary_lift import match_primary_lift
from coach_engine.services.split_cycle import (
    determine_split_day,
    get_body_parts_for_split_day,
    is_primary_lift_day,
    should_test_primary_lift,
)

logger = logging.getLogger(__name__)


def _strength_intent(
    body_parts: list[str],
    intensity: Intensity,
    split_day: int | None,
    target_exercise: str | None = None,
) -> WorkoutIntent:
    return WorkoutIntent(
        body_parts=body_parts,
        intensity=intensity,
        compound_sets=4,
        accessory_sets=2,
        rep_ranges=RepRanges(compound="4-6", accessory="8-10"),
        workout_type=WorkoutType.MAIN,
        include_stretch=True,
        stretch_template="pre lift",
        target_exercise=target_exercise,
        split_day=split_day,
    )


def generate_strength_workout(ctx: PlanningContext) -> WorkoutIntent:
    intensity = check_fatigue(Intensity.STRENGTHEN, ctx.history)
    # Repeats yesterday's split day when a session was missed
    split_day = determine_split_day(ctx.split_preference, ctx.history, ctx.yesterday_date)

    exercise = ctx.goal.target_exercise if ctx.goal else None
    if not exercise:
        body_parts = get_body_parts_for_split_day(ctx.split_preference, split_day, None, ctx.history)
        return _strength_intent(body_parts, intensity, split_day)

    match = match_primary_lift(exercise)
    if match is None:
        logger.warning(f"Strength goal targets '{exercise}', which is not a primary lift")
        body_parts = get_body_parts_for_split_day(ctx.split_preference, split_day, None, ctx.history)
        return _strength_intent(body_parts, intensity, split_day)

    muscles = list(match.supporting_muscles)
    body_parts = get_body_parts_for_split_day(ctx.split_preference, split_day, muscles, ctx.history)
    lift_day = is_primary_lift_day(ctx.split_preference, split_day, muscles)
    test_due = should_test_primary_lift(
        match.lift, ctx.history, lift_day, ctx.split_preference, split_day
    )

    return _strength_intent(
        body_parts,
        intensity,
        split_day,
        target_exercise=match.lift if test_due else None,
    )
