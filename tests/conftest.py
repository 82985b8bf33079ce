"""Shared fixtures for planning engine tests."""

import pytest

from coach_engine.config.planning_config_loader import reset_planning_config_loader
from coach_engine.schemas.goal import Goal
from coach_engine.schemas.workout import RecentWorkout


def build_workout(
    date: str,
    body_parts: list[str] | None = None,
    intensity: str = "",
    exercises: dict[str, list[tuple[float, int]]] | None = None,
    completed: bool = True,
) -> RecentWorkout:
    """Build a RecentWorkout; exercises map name -> [(weight, reps), ...]."""
    return RecentWorkout(
        date=date,
        body_parts=body_parts or [],
        intensity=intensity,
        exercises=[
            {
                "name": name,
                "sets": [
                    {"weight": weight, "reps": reps, "completed": completed}
                    for weight, reps in sets
                ],
            }
            for name, sets in (exercises or {}).items()
        ],
    )


@pytest.fixture
def make_workout():
    return build_workout


@pytest.fixture
def make_goal():
    def _make_goal(category, exercise=None, movement=None, direction=None, value=None):
        target = None
        if exercise is not None or movement is not None:
            target = {"exercise": exercise, "movement": movement}
        return Goal(category=category, target=target, direction=direction, value=value)

    return _make_goal


@pytest.fixture(autouse=True)
def fresh_planning_config():
    """Every test starts from the packaged planning_config.yaml."""
    reset_planning_config_loader()
    yield
    reset_planning_config_loader()
