"""
Workout Intent Planner

Decides what to train today. Dispatches on the active goal's category to a
generator, then applies the injury override to whatever the generator
produced: if a reported injury touches any planned body part, the day is
forced to recovery intensity.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from coach_engine.core.logging import get_logger
from coach_engine.models.enums import Intensity, SplitType
from coach_engine.schemas.goal import Goal
from coach_engine.schemas.snapshot import PlanningSnapshot
from coach_engine.schemas.workout import RecentWorkout, WorkoutIntent
from coach_engine.services.generators import GENERATORS, PlanningContext, generate_maintain_workout
from coach_engine.services.injury import has_injury_for_body_parts

logger = get_logger(__name__)


class WorkoutIntentPlanner:
    """Root planner producing one WorkoutIntent per user per day."""

    def plan(
        self,
        goal: Goal | None,
        history: Sequence[RecentWorkout],
        split_preference: SplitType | str | None = None,
        yesterday_date: str | None = None,
        injuries: Iterable[str] | None = None,
        weight_loss_per_week: float | None = None,
    ) -> WorkoutIntent:
        """
        Plan today's workout.

        Args:
            goal: The active goal, or None for a default maintenance plan
            history: Recent sessions, oldest first
            split_preference: Split the user follows (strength goals only)
            yesterday_date: ISO date of yesterday, used to detect a missed day
            injuries: Free-text injury descriptions
            weight_loss_per_week: Target loss rate for body composition cuts

        Returns:
            WorkoutIntent for today
        """
        ctx = PlanningContext(
            goal=goal,
            history=tuple(history),
            split_preference=split_preference,
            yesterday_date=yesterday_date,
            weight_loss_per_week=weight_loss_per_week,
        )

        category = goal.known_category if goal else None
        generator = GENERATORS.get(category, generate_maintain_workout)
        intent = generator(ctx)
        generated_intensity = intent.intensity

        injuries = list(injuries or ())
        injury_override = (
            intent.intensity != Intensity.RECOVER
            and has_injury_for_body_parts(intent.body_parts, injuries)
        )
        if injury_override:
            intent = intent.model_copy(update={"intensity": Intensity.RECOVER})

        logger.info(
            "workout_intent_planned",
            category=category.value if category else None,
            generator=generator.__name__,
            split_day=intent.split_day,
            body_parts=intent.body_parts,
            generated_intensity=generated_intensity.value,
            intensity=intent.intensity.value,
            injury_override=injury_override,
            target_exercise=intent.target_exercise,
        )
        return intent

    def plan_snapshot(self, snapshot: PlanningSnapshot) -> WorkoutIntent:
        return self.plan(
            snapshot.active_goal,
            snapshot.recent_workouts,
            split_preference=snapshot.split_preference,
            yesterday_date=snapshot.yesterday_date,
            injuries=snapshot.injury_constraints,
            weight_loss_per_week=snapshot.weight_loss_per_week,
        )


def get_workout_intent_planner() -> WorkoutIntentPlanner:
    """Get WorkoutIntentPlanner instance."""
    return WorkoutIntentPlanner()
