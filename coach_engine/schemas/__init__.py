from coach_engine.schemas.goal import Goal, GoalTarget
from coach_engine.schemas.nutrition import NutritionIntent, UserProfile
from coach_engine.schemas.progression import ProgressionTarget
from coach_engine.schemas.snapshot import PlanningSnapshot
from coach_engine.schemas.workout import (
    LoggedExercise,
    LoggedSet,
    RecentWorkout,
    RepRanges,
    WorkoutIntent,
)

__all__ = [
    "Goal",
    "GoalTarget",
    "LoggedExercise",
    "LoggedSet",
    "NutritionIntent",
    "PlanningSnapshot",
    "ProgressionTarget",
    "RecentWorkout",
    "RepRanges",
    "UserProfile",
    "WorkoutIntent",
]
