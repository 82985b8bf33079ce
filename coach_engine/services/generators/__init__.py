"""Per-category workout intent generators.

Each generator is a plain function ``(PlanningContext) -> WorkoutIntent``.
``GENERATORS`` maps goal categories to them; anything missing from the
table gets the default maintain plan.
"""
from coach_engine.models.enums import GoalCategory
from coach_engine.services.generators.body_composition import generate_body_composition_workout
from coach_engine.services.generators.context import PlanningContext
from coach_engine.services.generators.endurance import generate_endurance_workout
from coach_engine.services.generators.maintain import generate_maintain_workout
from coach_engine.services.generators.mobility import generate_mobility_workout
from coach_engine.services.generators.skill import generate_skill_workout
from coach_engine.services.generators.strength import generate_strength_workout

GENERATORS = {
    GoalCategory.STRENGTH: generate_strength_workout,
    GoalCategory.ENDURANCE: generate_endurance_workout,
    GoalCategory.BODY_COMPOSITION: generate_body_composition_workout,
    GoalCategory.MOBILITY: generate_mobility_workout,
    GoalCategory.SKILL: generate_skill_workout,
}

__all__ = [
    "GENERATORS",
    "PlanningContext",
    "generate_body_composition_workout",
    "generate_endurance_workout",
    "generate_maintain_workout",
    "generate_mobility_workout",
    "generate_skill_workout",
    "generate_strength_workout",
]
