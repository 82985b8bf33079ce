"""Tests for WorkoutIntentPlanner dispatch and the injury override."""

import pytest

from coach_engine.catalog.body_parts import BODY_PARTS
from coach_engine.models.enums import GoalCategory, Intensity, SplitType, WorkoutType
from coach_engine.schemas.goal import Goal
from coach_engine.schemas.snapshot import PlanningSnapshot
from coach_engine.services.workout_planner import WorkoutIntentPlanner, get_workout_intent_planner


@pytest.fixture
def planner():
    return get_workout_intent_planner()


@pytest.fixture
def upper_body_week(make_workout):
    """Three sessions covering chest through core, so rotation lands on the legs."""
    return [
        make_workout("2026-10-16", ["chest", "upper back", "lats", "lower back", "traps"]),
        make_workout("2026-10-17", ["front delts", "lateral delts", "rear delts", "shoulders", "biceps"]),
        make_workout("2026-10-18", ["triceps", "forearms", "abs", "obliques", "core"]),
    ]


class TestDispatch:

    def test_no_goal_maintains(self, planner):
        intent = planner.plan(None, [])
        assert intent.intensity == Intensity.MAINTAIN
        assert intent.body_parts == ["chest", "back", "shoulders"]
        assert (intent.compound_sets, intent.accessory_sets) == (3, 2)

    def test_unknown_category_falls_back_to_maintain(self, planner):
        goal = Goal(category="yoga")
        assert goal.known_category is None

        intent = planner.plan(goal, [])
        assert intent.intensity == Intensity.MAINTAIN
        assert (intent.compound_sets, intent.accessory_sets) == (3, 2)

    def test_strength_goal_uses_split(self, planner, make_goal):
        goal = make_goal(GoalCategory.STRENGTH, exercise="bench press")
        intent = planner.plan(goal, [], split_preference=SplitType.PPL)
        assert intent.split_day == 1
        assert intent.body_parts == ["chest", "triceps", "front delts", "shoulders"]

    def test_endurance_goal(self, planner, make_goal):
        intent = planner.plan(make_goal(GoalCategory.ENDURANCE), [])
        assert intent.workout_type == WorkoutType.ENDURANCE

    def test_same_inputs_same_plan(self, planner, make_goal, make_workout):
        goal = make_goal(GoalCategory.BODY_COMPOSITION)
        history = [make_workout("2026-10-18", ["chest", "triceps"])]
        assert planner.plan(goal, history) == WorkoutIntentPlanner().plan(goal, history)


class TestInjuryOverride:
    """An injury touching any planned body part forces recovery."""

    def test_knee_injury_on_rotated_leg_day_without_goal(self, planner, upper_body_week):
        intent = planner.plan(None, upper_body_week)
        assert intent.body_parts == ["quads", "hamstrings", "glutes"]
        assert intent.intensity == Intensity.MAINTAIN

        intent = planner.plan(None, upper_body_week, injuries=["knee pain"])
        assert intent.intensity == Intensity.RECOVER
        assert intent.body_parts == ["quads", "hamstrings", "glutes"]

    def test_knee_injury_with_unknown_goal_category(self, planner, upper_body_week):
        intent = planner.plan(Goal(category="yoga"), upper_body_week, injuries=["knee pain"])
        assert (intent.compound_sets, intent.accessory_sets) == (3, 2)
        assert intent.intensity == Intensity.RECOVER

    def test_knee_injury_on_topped_up_rotation(self, planner, make_workout):
        history = [make_workout("2026-10-18", [part for part in BODY_PARTS if part != "quads"])]
        intent = planner.plan(None, history, injuries=["knee pain"])
        assert intent.body_parts[0] == "quads"
        assert intent.intensity == Intensity.RECOVER

    def test_knee_injury_on_leg_mobility_day(self, planner, make_goal):
        goal = make_goal(GoalCategory.MOBILITY, movement="hip mobility")
        intent = planner.plan(goal, [], injuries=["knee pain"])
        assert intent.intensity == Intensity.RECOVER
        assert intent.body_parts == ["quads", "hamstrings", "glutes", "hip flexors"]

    def test_shoulder_injury_on_push_day(self, planner, make_goal):
        goal = make_goal(GoalCategory.STRENGTH, exercise="bench press")
        intent = planner.plan(
            goal, [], split_preference=SplitType.PPL, injuries=["rotator cuff strain"]
        )
        assert intent.intensity == Intensity.RECOVER
        assert intent.stretch_template == "pre lift"

    def test_unrelated_injury_is_ignored(self, planner, make_goal):
        intent = planner.plan(make_goal(GoalCategory.ENDURANCE), [], injuries=["knee pain"])
        assert intent.intensity == Intensity.MAINTAIN

    def test_unrecognized_injury_text_is_ignored(self, planner):
        intent = planner.plan(None, [], injuries=["feeling tired"])
        assert intent.intensity == Intensity.MAINTAIN


class TestPlanSnapshot:

    def test_snapshot_payload(self, planner):
        snapshot = PlanningSnapshot.model_validate({
            "activeGoal": {"category": "strength", "target": {"exercise": "Bench Press"}},
            "recentWorkouts": [
                {"date": "2026-10-18", "bodyParts": ["Chest", "Shoulders", "Triceps"], "intensity": "strengthen"},
            ],
            "splitPreference": "PPL",
            "yesterdayDate": "2026-10-18",
            "injuryConstraints": [],
        })
        intent = planner.plan_snapshot(snapshot)

        assert intent.split_day == 2
        assert intent.body_parts == ["back", "biceps"]
        assert intent.intensity == Intensity.STRENGTHEN
        assert intent.to_payload()["splitDay"] == 2
