"""Tests for primary lift matching and validation."""

import pytest

from coach_engine.core.exceptions import ValidationError
from coach_engine.services.primary_lift import (
    find_matching_primary_lift,
    get_supporting_muscle_groups,
    is_primary_lift,
    match_primary_lift,
    require_primary_lift,
    validate_primary_lift_for_goal,
)


class TestFindMatchingPrimaryLift:
    """Exact match first, then substring in either direction."""

    @pytest.mark.parametrize("name, expected", [
        ("bench press", "bench press"),
        ("  Bench   PRESS ", "bench press"),
        ("Barbell Bench Press", "bench press"),
        ("Romanian Deadlift", "romanian deadlift"),
        ("Sumo Deadlift", "deadlift"),
        ("rdl", "rdl"),
        ("Back Squat", "squat"),
        ("pull ups", "pull ups"),
    ])
    def test_matches(self, name, expected):
        assert find_matching_primary_lift(name) == expected

    @pytest.mark.parametrize("name", ["cable crossover", "lateral raise", "", None])
    def test_no_match(self, name):
        assert find_matching_primary_lift(name) is None
        assert not is_primary_lift(name)

    def test_exact_match_wins_over_earlier_partial(self):
        # "squat" appears before "split squat" in the table
        assert find_matching_primary_lift("split squat") == "split squat"


class TestSupportingMuscles:

    def test_bench_press(self):
        assert get_supporting_muscle_groups("Bench Press") == ["chest", "triceps", "front delts"]

    def test_squat(self):
        match = match_primary_lift("squat")
        assert match.lift == "squat"
        assert match.supporting_muscles == ("quads", "glutes", "hamstrings")

    def test_unknown(self):
        assert get_supporting_muscle_groups("cable crossover") == []
        assert match_primary_lift("cable crossover") is None


class TestValidatePrimaryLiftForGoal:
    """Upstream validation for strength goal targets."""

    def test_blank_is_overall_strength(self):
        assert validate_primary_lift_for_goal(None).is_valid
        assert validate_primary_lift_for_goal("   ").is_valid

    def test_approved_lift(self):
        result = validate_primary_lift_for_goal("Deadlift")
        assert result.is_valid
        assert result.error is None

    def test_variation_gets_suggestion(self):
        result = validate_primary_lift_for_goal("Paused Bench Press")
        assert not result.is_valid
        assert result.suggestion == "bench press"
        assert 'Did you mean "bench press"?' in result.error

    def test_unrelated_exercise(self):
        result = validate_primary_lift_for_goal("cable crossover")
        assert not result.is_valid
        assert result.suggestion is None
        assert "approved primary lifts" in result.error

    def test_require_returns_canonical_lift(self):
        assert require_primary_lift("  SQUAT ") == "squat"
        assert require_primary_lift("") is None

    def test_require_raises_domain_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            require_primary_lift("Paused Bench Press")

        error = exc_info.value
        assert error.code == "VAL_EXERCISE_001"
        assert error.message.startswith("Validation failed for exercise:")
        assert error.details["suggestion"] == "bench press"
