"""
Split cycle tracking.

Works out where the user is in their split from the most recent logged
session, and decides whether today is the day to test a primary lift.
Nothing is stored between calls; position is re-derived from history.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from coach_engine.config.planning_config_loader import StrengthConfig, get_planning_config
from coach_engine.models.enums import SplitType
from coach_engine.schemas.workout import RecentWorkout
from coach_engine.services.matching import any_overlap, names_overlap
from coach_engine.services.rotation import rotate_body_parts
from coach_engine.services.split_catalog import find_split_template

logger = logging.getLogger(__name__)


def _overlap_score(session_parts: set[str], day_parts: Sequence[str]) -> int:
    """Session body parts that match at least one split-day part."""
    day_lower = [part.lower() for part in day_parts]
    return sum(
        1 for part in session_parts
        if any(names_overlap(part, day_part) for day_part in day_lower)
    )


def determine_split_day(
    split_type: SplitType | str | None,
    history: Sequence[RecentWorkout],
    yesterday_date: str | None = None,
) -> int | None:
    """
    Today's 1-indexed position in the split cycle.

    Returns None without a (known) split type. The most recent session is
    matched to the template day it overlaps most (first day wins ties). If
    ``yesterday_date`` is given and nothing was logged that day, the matched
    day is repeated instead of advancing.
    """
    template = find_split_template(split_type)
    if template is None:
        return None

    if not history:
        return 1

    last_parts = history[-1].body_parts_lower
    best_day, best_score = template.days[0].day, -1
    for split_day in template.days:
        score = _overlap_score(last_parts, split_day.body_parts)
        if score > best_score:
            best_day, best_score = split_day.day, score

    if best_score <= 0:
        return 1

    if yesterday_date and not any(w.date == yesterday_date for w in history):
        logger.debug(f"No session logged on {yesterday_date}, repeating split day {best_day}")
        return best_day

    return (best_day % template.cycle_length) + 1


def get_body_parts_for_split_day(
    split_type: SplitType | str | None,
    split_day: int | None,
    primary_lift_body_parts: Sequence[str] | None,
    history: Sequence[RecentWorkout],
) -> list[str]:
    """
    Body parts for today's split day.

    Falls back to rotation without a split. When the primary lift's muscles
    overlap the day, they are listed first and the day's own parts follow,
    lower-cased and de-duplicated.
    """
    template = find_split_template(split_type)
    if template is None or not split_day:
        return rotate_body_parts(history)

    body_parts = list(template.day_at(split_day).body_parts)

    if primary_lift_body_parts and any_overlap(primary_lift_body_parts, body_parts):
        merged = dict.fromkeys(part.lower() for part in primary_lift_body_parts)
        merged.update(dict.fromkeys(part.lower() for part in body_parts))
        body_parts = list(merged)

    return body_parts


def is_primary_lift_day(
    split_type: SplitType | str | None,
    split_day: int | None,
    primary_lift_body_parts: Sequence[str] | None,
) -> bool:
    template = find_split_template(split_type)
    if template is None or not split_day or not primary_lift_body_parts:
        return False
    return any_overlap(primary_lift_body_parts, template.day_at(split_day).body_parts)


def should_test_primary_lift(
    primary_lift: str,
    history: Sequence[RecentWorkout],
    lift_day: bool,
    split_type: SplitType | str | None,
    split_day: int | None,
    config: StrengthConfig | None = None,
) -> bool:
    """
    Whether to put the primary lift in front of the user today.

    Only on the lift's own split day, and only if the lift is missing from
    the last ``primary_lift_test_window`` sessions of the same split-day type
    (roughly every two weeks at 3-4 sessions a week). With no history at all
    the test is not due yet; history without a same-type session makes it due.
    """
    template = find_split_template(split_type)
    if not lift_day or template is None or not split_day:
        return False

    if not history:
        return False

    config = config or get_planning_config().strength
    today_parts = template.day_at(split_day).body_parts

    same_type = [w for w in history if any_overlap(today_parts, w.body_parts)]
    window = same_type[-config.primary_lift_test_window:]
    for workout in window:
        if any(names_overlap(exercise.name, primary_lift) for exercise in workout.exercises):
            return False
    return True
