"""Tests for NutritionPlanner."""

import pytest

from coach_engine.models.enums import CarbBias, GoalCategory, GoalDirection
from coach_engine.schemas.nutrition import UserProfile
from coach_engine.services.nutrition import get_nutrition_planner


@pytest.fixture
def planner():
    return get_nutrition_planner()


class TestEnergyExpenditure:

    def test_bmr(self, planner):
        assert planner.bmr(70, 175) == pytest.approx(1648.75)

    def test_tdee(self, planner):
        assert planner.tdee(70, 175) == pytest.approx(2555.5625)


class TestNutritionTargets:

    def test_no_goal_uses_defaults(self, planner):
        intent = planner.compute(None)
        assert intent.calorie_target == 2550
        assert intent.protein_min == 112
        assert intent.carb_bias == CarbBias.MODERATE

    def test_strength_surplus_and_protein(self, planner, make_goal):
        profile = UserProfile(weight_kg=80, height_cm=180)
        intent = planner.compute(make_goal(GoalCategory.STRENGTH), profile)
        assert intent.calorie_target == 2950
        assert intent.protein_min == 160
        assert intent.carb_bias == CarbBias.MODERATE

    def test_cut_without_rate_uses_default_deficit(self, planner, make_goal):
        goal = make_goal(GoalCategory.BODY_COMPOSITION, direction=GoalDirection.DECREASE)
        intent = planner.compute(goal)
        assert intent.calorie_target == 1950
        assert intent.protein_min == 154
        assert intent.carb_bias == CarbBias.LOW

    def test_cut_rate_scales_deficit(self, planner, make_goal):
        goal = make_goal(GoalCategory.BODY_COMPOSITION, direction=GoalDirection.DECREASE)
        assert planner.compute(goal, weight_loss_per_week=1).calorie_target == 2050

    def test_deficit_is_capped_and_floored(self, planner, make_goal):
        goal = make_goal(GoalCategory.BODY_COMPOSITION, direction=GoalDirection.DECREASE)
        assert planner.compute(goal, weight_loss_per_week=4).calorie_target == 1200

        small = UserProfile(weight_kg=40, height_cm=140)
        assert planner.compute(goal, small, weight_loss_per_week=3).calorie_target == 1200

    def test_bulk(self, planner, make_goal):
        goal = make_goal(GoalCategory.BODY_COMPOSITION, direction=GoalDirection.INCREASE)
        intent = planner.compute(goal)
        assert intent.calorie_target == 2950
        assert intent.protein_min == 112
        assert intent.carb_bias == CarbBias.HIGH

    def test_recomposition_has_no_adjustment(self, planner, make_goal):
        goal = make_goal(GoalCategory.BODY_COMPOSITION, direction=GoalDirection.ACHIEVE)
        intent = planner.compute(goal)
        assert intent.calorie_target == 2550
        assert intent.carb_bias == CarbBias.MODERATE

    def test_endurance(self, planner, make_goal):
        intent = planner.compute(make_goal(GoalCategory.ENDURANCE))
        assert intent.calorie_target == 2850
        assert intent.carb_bias == CarbBias.HIGH

    @pytest.mark.parametrize("category", [GoalCategory.MOBILITY, GoalCategory.SKILL])
    def test_technique_goals_maintain(self, planner, make_goal, category):
        intent = planner.compute(make_goal(category))
        assert intent.calorie_target == 2550
        assert intent.protein_min == 112

    def test_targets_are_multiples_of_fifty(self, planner, make_goal):
        for weight in (55, 63.3, 71, 88.8, 104):
            intent = planner.compute(make_goal(GoalCategory.STRENGTH), UserProfile(weight_kg=weight))
            assert intent.calorie_target % 50 == 0
            assert intent.calorie_target >= 1200
