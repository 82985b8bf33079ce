"""
Body Composition Workout Generator

Rep ranges follow the goal direction (higher reps when cutting, lower when
bulking). Cardio is scheduled as a separate session whose type and
frequency depend on direction and, when cutting, the weekly loss rate.
"""

from __future__ import annotations

from dataclasses import dataclass

from coach_engine.models.enums import CardioFrequency, CardioType, GoalDirection, Intensity, WorkoutType
from coach_engine.schemas.workout import RepRanges, WorkoutIntent
from coach_engine.services.fatigue import check_fatigue
from coach_engine.services.generators.context import PlanningContext
from coach_engine.services.rotation import rotate_body_parts

_REP_RANGES = {
    GoalDirection.DECREASE: RepRanges(compound="10-12", accessory="12-15"),
    GoalDirection.INCREASE: RepRanges(compound="6-8", accessory="8-10"),
}
_BALANCED_REPS = RepRanges(compound="8-10", accessory="10-12")


@dataclass(frozen=True)
class CardioDecision:
    include: bool
    type: CardioType | None = None
    frequency: CardioFrequency | None = None


NO_CARDIO = CardioDecision(include=False)


def decide_cardio(
    direction: GoalDirection | None,
    weight_loss_per_week: float | None = None,
) -> CardioDecision:
    if direction == GoalDirection.INCREASE:
        return CardioDecision(True, CardioType.WALK, CardioFrequency.WEEKLY)

    if direction != GoalDirection.DECREASE:
        return NO_CARDIO

    if not weight_loss_per_week:
        return CardioDecision(True, CardioType.INCLINE_WALK, CardioFrequency.EVERY_OTHER_DAY)
    if weight_loss_per_week > 2:
        return CardioDecision(True, CardioType.RUN, CardioFrequency.DAILY)
    if weight_loss_per_week >= 1:
        return CardioDecision(True, CardioType.INCLINE_WALK, CardioFrequency.EVERY_OTHER_DAY)
    return CardioDecision(True, CardioType.WALK, CardioFrequency.EVERY_OTHER_DAY)


def generate_body_composition_workout(ctx: PlanningContext) -> WorkoutIntent:
    direction = ctx.goal.direction if ctx.goal else None
    cardio = decide_cardio(direction, ctx.weight_loss_per_week)

    return WorkoutIntent(
        body_parts=rotate_body_parts(ctx.history),
        intensity=check_fatigue(Intensity.MAINTAIN, ctx.history),
        compound_sets=3,
        accessory_sets=3,
        rep_ranges=_REP_RANGES.get(direction, _BALANCED_REPS),
        workout_type=WorkoutType.MAIN,
        include_stretch=True,
        stretch_template="pre lift",
        include_cardio=cardio.include,
        cardio_type=cardio.type,
        cardio_frequency=cardio.frequency,
    )
