"""
Nutrition Planner

Daily calorie, protein and carb targets from body metrics and the active
goal. Energy expenditure uses Mifflin-St Jeor (male coefficient, fixed
assumed age) scaled by a moderate activity multiplier.
"""

from __future__ import annotations

import logging

from coach_engine.config.planning_config_loader import NutritionConfig, get_planning_config
from coach_engine.models.enums import CarbBias, GoalCategory, GoalDirection
from coach_engine.schemas.goal import Goal
from coach_engine.schemas.nutrition import NutritionIntent, UserProfile
from coach_engine.services.rounding import round_half_up, round_to_increment

logger = logging.getLogger(__name__)


class NutritionPlanner:
    """Computes a NutritionIntent for the active goal."""

    def __init__(self, config: NutritionConfig | None = None):
        self._config = config or get_planning_config().nutrition

    def bmr(self, weight_kg: float, height_cm: float) -> float:
        return 10 * weight_kg + 6.25 * height_cm - 5 * self._config.assumed_age + 5

    def tdee(self, weight_kg: float, height_cm: float) -> float:
        return self.bmr(weight_kg, height_cm) * self._config.activity_multiplier

    def compute(
        self,
        goal: Goal | None,
        profile: UserProfile | None = None,
        weight_loss_per_week: float | None = None,
    ) -> NutritionIntent:
        """
        Compute today's nutrition targets.

        Args:
            goal: The active goal, or None
            profile: Body metrics; missing values use the configured defaults
            weight_loss_per_week: Target loss rate when cutting

        Returns:
            NutritionIntent with calories rounded to the nearest 50 (min 1200)
        """
        cfg = self._config
        profile = profile or UserProfile()
        weight_kg = profile.weight_kg or cfg.default_weight_kg
        height_cm = profile.height_cm or cfg.default_height_cm

        tdee = self.tdee(weight_kg, height_cm)
        calories = tdee + self._calorie_adjustment(goal, weight_loss_per_week)
        calorie_target = max(cfg.min_calories, self._round_calories(calories))
        protein_min = round_half_up(weight_kg * self._protein_per_kg(goal))

        logger.debug(
            f"Nutrition: tdee={tdee:.1f} target={calorie_target} protein={protein_min}"
        )
        return NutritionIntent(
            calorie_target=calorie_target,
            protein_min=protein_min,
            carb_bias=self._carb_bias(goal),
        )

    def _round_calories(self, calories: float) -> int:
        return int(round_to_increment(calories, self._config.calorie_rounding))

    def _calorie_adjustment(self, goal: Goal | None, weight_loss_per_week: float | None) -> float:
        cfg = self._config
        category = goal.known_category if goal else None

        if category == GoalCategory.BODY_COMPOSITION:
            if goal.direction == GoalDirection.DECREASE:
                if weight_loss_per_week:
                    return -min(weight_loss_per_week * cfg.deficit_per_unit_per_week, cfg.max_deficit)
                return -cfg.default_deficit
            if goal.direction == GoalDirection.INCREASE:
                return cfg.bulk_surplus
            return 0
        if category == GoalCategory.STRENGTH:
            return cfg.strength_surplus
        if category == GoalCategory.ENDURANCE:
            return cfg.endurance_surplus
        return 0

    def _protein_per_kg(self, goal: Goal | None) -> float:
        per_kg = self._config.protein_per_kg
        category = goal.known_category if goal else None
        if category == GoalCategory.STRENGTH:
            return per_kg.strength
        if category == GoalCategory.BODY_COMPOSITION and goal.direction == GoalDirection.DECREASE:
            return per_kg.cut
        return per_kg.default

    def _carb_bias(self, goal: Goal | None) -> CarbBias:
        category = goal.known_category if goal else None
        if category == GoalCategory.BODY_COMPOSITION:
            if goal.direction == GoalDirection.DECREASE:
                return CarbBias.LOW
            if goal.direction == GoalDirection.INCREASE:
                return CarbBias.HIGH
        if category == GoalCategory.ENDURANCE:
            return CarbBias.HIGH
        return CarbBias.MODERATE


def get_nutrition_planner() -> NutritionPlanner:
    """Get NutritionPlanner instance."""
    return NutritionPlanner()
