"""
Primary lift matching and validation.

Strength goals may only target an approved primary lift. Free-text exercise
names are resolved to the canonical lift (exact match first, then substring
in either direction) so the planner can look up supporting muscle groups.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from coach_engine.catalog.primary_lifts import PRIMARY_LIFT_SUPPORTING_MUSCLES, PRIMARY_LIFTS
from coach_engine.core.exceptions import ValidationError
from coach_engine.services.matching import names_overlap, normalize_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrimaryLiftMatch:
    """Canonical lift resolved from a free-text exercise name."""
    lift: str
    supporting_muscles: tuple[str, ...]


@dataclass(frozen=True)
class PrimaryLiftValidation:
    is_valid: bool
    error: str | None = None
    suggestion: str | None = None


def find_matching_primary_lift(exercise_name: str | None) -> str | None:
    normalized = normalize_name(exercise_name)
    if not normalized:
        return None

    if normalized in PRIMARY_LIFT_SUPPORTING_MUSCLES:
        return normalized

    for lift in PRIMARY_LIFTS:
        if names_overlap(normalized, lift):
            return lift
    return None


def is_primary_lift(exercise_name: str | None) -> bool:
    return find_matching_primary_lift(exercise_name) is not None


def get_supporting_muscle_groups(exercise_name: str | None) -> list[str]:
    """Supporting muscles for a lift, or an empty list when it does not resolve."""
    lift = find_matching_primary_lift(exercise_name)
    if lift is None:
        return []
    return list(PRIMARY_LIFT_SUPPORTING_MUSCLES[lift])


def match_primary_lift(exercise_name: str | None) -> PrimaryLiftMatch | None:
    lift = find_matching_primary_lift(exercise_name)
    if lift is None:
        return None
    return PrimaryLiftMatch(lift=lift, supporting_muscles=PRIMARY_LIFT_SUPPORTING_MUSCLES[lift])


def validate_primary_lift_for_goal(exercise_name: str | None) -> PrimaryLiftValidation:
    """
    Check a strength goal's target exercise before it is saved.

    A blank name is an overall-strength goal and is accepted. Otherwise the
    name must be one of the approved lifts; a variation that only resembles
    one (e.g. "paused bench press") is rejected with a suggestion.
    """
    normalized = normalize_name(exercise_name)
    if not normalized:
        return PrimaryLiftValidation(is_valid=True)

    if normalized in PRIMARY_LIFT_SUPPORTING_MUSCLES:
        return PrimaryLiftValidation(is_valid=True)

    suggestion = find_matching_primary_lift(normalized)
    if suggestion:
        return PrimaryLiftValidation(
            is_valid=False,
            error=(
                f'"{exercise_name}" is not an approved PRIMARY LIFT for strength goals. '
                f'Did you mean "{suggestion}"?'
            ),
            suggestion=suggestion,
        )

    return PrimaryLiftValidation(
        is_valid=False,
        error=(
            f'"{exercise_name}" is not an approved PRIMARY LIFT for strength goals. '
            "Strength goals can only target approved primary lifts such as: "
            "bench press, squat, deadlift, pull-ups, barbell row, etc."
        ),
    )


def require_primary_lift(exercise_name: str | None) -> str | None:
    """Canonical lift for ``exercise_name``; None for an overall-strength goal.

    Raises:
        ValidationError: If the name is not an approved primary lift.
    """
    result = validate_primary_lift_for_goal(exercise_name)
    if not result.is_valid:
        logger.info(f"Rejected strength goal target '{exercise_name}'")
        raise ValidationError(
            "exercise",
            result.error,
            details={"field": "exercise", "suggestion": result.suggestion},
        )
    return find_matching_primary_lift(exercise_name)
