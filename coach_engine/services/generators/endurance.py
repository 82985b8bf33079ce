"""
Endurance Workout Generator

Cardio-only sessions at maintain intensity. The goal's named exercise or
movement is used as-is; a general endurance goal rotates through the cardio
modalities, preferring one not seen in the recent window.
"""

from __future__ import annotations

from collections.abc import Sequence

from coach_engine.catalog.body_parts import CARDIO_BODY_PART
from coach_engine.catalog.keyword_tables import ENDURANCE_CARDIO_OPTIONS, RUN_KEYWORDS
from coach_engine.config.planning_config_loader import get_planning_config
from coach_engine.models.enums import Intensity, WorkoutType
from coach_engine.schemas.workout import RecentWorkout, RepRanges, WorkoutIntent
from coach_engine.services.generators.context import PlanningContext
from coach_engine.services.matching import names_overlap


def recent_cardio_modalities(history: Sequence[RecentWorkout], window: int) -> list[str]:
    """Modalities referenced in the window, in order of first appearance."""
    seen: dict[str, None] = {}
    for workout in history[-window:]:
        for exercise in workout.exercises:
            for option in ENDURANCE_CARDIO_OPTIONS:
                if names_overlap(exercise.name, option):
                    seen.setdefault(option)
    return list(seen)


def choose_cardio_modality(history: Sequence[RecentWorkout], window: int | None = None) -> str:
    if window is None:
        window = get_planning_config().endurance.history_window
    recent = recent_cardio_modalities(history, window)

    for option in ENDURANCE_CARDIO_OPTIONS:
        if option not in recent:
            return option

    # Every modality is recent: continue after the last one to show up
    last_index = ENDURANCE_CARDIO_OPTIONS.index(recent[-1])
    return ENDURANCE_CARDIO_OPTIONS[(last_index + 1) % len(ENDURANCE_CARDIO_OPTIONS)]


def stretch_template_for(exercise: str) -> str:
    lowered = exercise.lower()
    if any(keyword in lowered for keyword in RUN_KEYWORDS):
        return "pre run"
    return "full body"


def generate_endurance_workout(ctx: PlanningContext) -> WorkoutIntent:
    named = ctx.goal.target_name if ctx.goal else None
    target = named.lower() if named else choose_cardio_modality(ctx.history)

    return WorkoutIntent(
        body_parts=[CARDIO_BODY_PART],
        intensity=Intensity.MAINTAIN,
        compound_sets=0,
        accessory_sets=0,
        rep_ranges=RepRanges(compound="N/A", accessory="N/A"),
        target_exercise=target,
        workout_type=WorkoutType.ENDURANCE,
        include_stretch=True,
        stretch_template=stretch_template_for(target),
    )
