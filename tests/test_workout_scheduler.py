"""Tests for the weekly workout scheduler. 2026-10-19 is a Monday."""

from datetime import date

import pytest

from coach_engine.services.schedule import (
    calculate_workout_schedule,
    get_workout_schedule,
    should_workout_today,
    weekday_index,
)


class TestSchedules:

    @pytest.mark.parametrize("per_week, expected", [
        (1, [3]),
        (2, [1, 4]),
        (3, [1, 3, 5]),
        (4, [1, 2, 4, 5]),
        (7, [0, 1, 2, 3, 4, 5, 6]),
        (0, [1, 3, 5]),
        (8, [1, 3, 5]),
    ])
    def test_calculate(self, per_week, expected):
        assert calculate_workout_schedule(per_week) == expected

    def test_weekday_index_starts_sunday(self):
        assert weekday_index(date(2026, 10, 18)) == 0
        assert weekday_index(date(2026, 10, 19)) == 1

    def test_named_schedule(self):
        assert get_workout_schedule(3) == ["Monday", "Wednesday", "Friday"]

    def test_custom_days_win(self):
        assert get_workout_schedule(3, [0, 6]) == ["Sunday", "Saturday"]

    def test_no_schedule(self):
        assert get_workout_schedule(None) == []
        assert get_workout_schedule(None, [9]) == []


class TestShouldWorkoutToday:

    def test_no_frequency_allows_every_day(self):
        assert should_workout_today("2026-10-20", None, [])

    def test_scheduled_day(self):
        assert should_workout_today("2026-10-19", 3, [])

    def test_accepts_date_objects(self):
        assert should_workout_today(date(2026, 10, 19), 3, [])

    def test_make_up_session_off_schedule(self, make_workout):
        history = [make_workout("2026-10-19", ["chest"])]
        assert should_workout_today("2026-10-20", 3, history)

    def test_off_schedule_already_trained_today(self, make_workout):
        history = [make_workout("2026-10-20", ["chest"])]
        assert not should_workout_today("2026-10-20", 3, history)

    def test_weekly_count_reached(self, make_workout):
        history = [
            make_workout("2026-10-18", ["chest"]),
            make_workout("2026-10-19", ["back"]),
            make_workout("2026-10-20", ["legs"]),
        ]
        assert not should_workout_today("2026-10-21", 3, history)

    def test_last_week_does_not_count(self, make_workout):
        history = [
            make_workout("2026-10-14", ["chest"]),
            make_workout("2026-10-15", ["back"]),
            make_workout("2026-10-16", ["legs"]),
        ]
        assert should_workout_today("2026-10-21", 3, history)

    def test_no_back_to_back_at_low_frequency(self, make_workout):
        history = [make_workout("2026-10-20", ["chest"])]
        assert not should_workout_today("2026-10-21", 3, history)

    def test_back_to_back_at_high_frequency(self, make_workout):
        history = [make_workout("2026-10-20", ["chest"])]
        assert should_workout_today("2026-10-21", 6, history)

    def test_custom_schedule_allows_back_to_back(self, make_workout):
        history = [make_workout("2026-10-20", ["chest"])]
        assert should_workout_today("2026-10-21", None, history, custom_days=[3])

    def test_custom_schedule_off_day(self):
        assert not should_workout_today("2026-10-20", 3, [], custom_days=[1, 3])

    def test_invalid_custom_days_are_ignored(self):
        assert should_workout_today("2026-10-19", 3, [], custom_days=[9, 12])
