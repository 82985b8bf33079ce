"""
Skill Workout Generator

Known skills (pistol squat, pull-up, handstand, ...) map to the body parts
they depend on. Skills that reward a lighter bodyweight also get a separate
run session.
"""

from __future__ import annotations

from coach_engine.catalog.keyword_tables import SKILL_REQUIREMENTS_TABLE, SkillRequirements
from coach_engine.models.enums import CardioType, Intensity, WorkoutType
from coach_engine.schemas.workout import RepRanges, WorkoutIntent
from coach_engine.services.generators.context import PlanningContext
from coach_engine.services.matching import first_keyword_match
from coach_engine.services.rotation import rotate_body_parts


def get_skill_requirements(skill: str | None) -> SkillRequirements | None:
    return first_keyword_match(skill, SKILL_REQUIREMENTS_TABLE)


def generate_skill_workout(ctx: PlanningContext) -> WorkoutIntent:
    target = ctx.goal.target_name if ctx.goal else None
    requirements = get_skill_requirements(target)

    if requirements is None:
        body_parts = rotate_body_parts(ctx.history)
        needs_weight_loss = False
    else:
        body_parts = list(requirements.body_parts)
        needs_weight_loss = requirements.needs_weight_loss

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
        include_cardio=needs_weight_loss,
        cardio_type=CardioType.RUN if needs_weight_loss else None,
    )
