"""Planning services.

Root services:
    - WorkoutIntentPlanner: what to train today
    - ProgressionCalculator: next weight and reps per exercise
    - NutritionPlanner: calorie, protein and carb targets

Leaf utilities (fatigue, rotation, split cycle, injury and primary lift
matching) live in their own modules and are shared by the generators.
"""
from coach_engine.services.nutrition import NutritionPlanner, get_nutrition_planner
from coach_engine.services.progression import ProgressionCalculator, get_progression_calculator
from coach_engine.services.workout_planner import WorkoutIntentPlanner, get_workout_intent_planner

__all__ = [
    "NutritionPlanner",
    "ProgressionCalculator",
    "WorkoutIntentPlanner",
    "get_nutrition_planner",
    "get_progression_calculator",
    "get_workout_intent_planner",
]
