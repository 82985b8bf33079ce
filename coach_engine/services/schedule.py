"""
Workout Scheduler

Decides which weekdays are training days for a weekly frequency, and
whether a given date should be a workout or a rest day given what has
already been logged this week. Weekdays are numbered 0 (Sunday) to
6 (Saturday).
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta

from coach_engine.schemas.workout import RecentWorkout

DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

# Spread sessions out, Monday first
OPTIMAL_SCHEDULES: dict[int, tuple[int, ...]] = {
    1: (3,),
    2: (1, 4),
    3: (1, 3, 5),
    4: (1, 2, 4, 5),
    5: (1, 2, 3, 4, 5),
    6: (1, 2, 3, 4, 5, 6),
    7: (0, 1, 2, 3, 4, 5, 6),
}
DEFAULT_SCHEDULE = OPTIMAL_SCHEDULES[3]

# At or above this frequency, back-to-back training days are expected
CONSECUTIVE_DAYS_MIN_FREQUENCY = 5


def _as_date(value: date | str) -> date:
    return value if isinstance(value, date) else date.fromisoformat(value)


def weekday_index(day: date) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


def _valid_custom_days(custom_days: Sequence[int] | None) -> list[int]:
    return [d for d in custom_days or () if 0 <= d <= 6]


def calculate_workout_schedule(workouts_per_week: int) -> list[int]:
    """Training weekdays for a frequency; Mon/Wed/Fri when out of range."""
    return list(OPTIMAL_SCHEDULES.get(workouts_per_week, DEFAULT_SCHEDULE))


def _workouts_this_week(day: date, history: Sequence[RecentWorkout]) -> list[RecentWorkout]:
    """Sessions logged in ``day``'s Sunday-to-Saturday week, excluding ``day`` itself."""
    week_start = day - timedelta(days=weekday_index(day))
    week_end = week_start + timedelta(days=6)
    start, end, today = week_start.isoformat(), week_end.isoformat(), day.isoformat()
    return [w for w in history if start <= w.date <= end and w.date != today]


def should_workout_today(
    day: date | str,
    workouts_per_week: int | None,
    history: Sequence[RecentWorkout],
    custom_days: Sequence[int] | None = None,
) -> bool:
    """
    Whether ``day`` should be a training day.

    - Custom weekdays take precedence over the calculated schedule.
    - With no usable schedule at all, every day is allowed.
    - On a scheduled day: rest once the weekly count is reached, and below
      five sessions a week avoid training two days running (custom
      schedules may train back to back).
    - Off schedule: a make-up session is allowed when behind for the week
      and the last session was at least a day ago.
    """
    day = _as_date(day)
    dow = weekday_index(day)

    custom = _valid_custom_days(custom_days)
    if custom:
        schedule = custom
    elif workouts_per_week and workouts_per_week > 0:
        schedule = calculate_workout_schedule(workouts_per_week)
    else:
        return True

    this_week = _workouts_this_week(day, history)

    if dow in schedule:
        max_workouts = len(custom) if custom else workouts_per_week
        if max_workouts and len(this_week) >= max_workouts:
            return False

        yesterday = (day - timedelta(days=1)).isoformat()
        if any(w.date == yesterday for w in history):
            if custom:
                return True
            return bool(workouts_per_week and workouts_per_week >= CONSECUTIVE_DAYS_MIN_FREQUENCY)
        return True

    if not custom and workouts_per_week and len(this_week) < workouts_per_week:
        if not history:
            return True
        days_since_last = (day - _as_date(history[-1].date)).days
        return days_since_last >= 1

    return False


def get_workout_schedule(
    workouts_per_week: int | None,
    custom_days: Sequence[int] | None = None,
) -> list[str]:
    """Weekday names of the active schedule; empty when none is set."""
    if custom_days:
        days = _valid_custom_days(custom_days)
    elif workouts_per_week and workouts_per_week > 0:
        days = calculate_workout_schedule(workouts_per_week)
    else:
        return []
    return [DAY_NAMES[d] for d in days]
