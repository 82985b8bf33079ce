"""Body-part rotation.

Picks the next body parts to train by walking the canonical taxonomy and
skipping anything touched in the recent window. Taxonomy order is fixed, so
the same history always yields the same answer.
"""

from __future__ import annotations

from collections.abc import Sequence

from coach_engine.catalog.body_parts import BODY_PARTS
from coach_engine.config.planning_config_loader import RotationConfig, get_planning_config
from coach_engine.schemas.workout import RecentWorkout


def recent_body_parts(history: Sequence[RecentWorkout], window: int) -> set[str]:
    parts: set[str] = set()
    for workout in history[-window:]:
        parts |= workout.body_parts_lower
    return parts


def rotate_body_parts(
    history: Sequence[RecentWorkout],
    config: RotationConfig | None = None,
) -> list[str]:
    """Next ``target_count`` body parts to train.

    - No history: the configured default list.
    - Enough untouched parts: the first ones in taxonomy order.
    - Only a few untouched: those, topped up from the taxonomy.
    - Everything touched: the parts following the first taxonomy entry
      trained in the most recent session, wrapping around.
    """
    config = config or get_planning_config().rotation
    count = config.target_count

    if not history:
        return list(config.default_body_parts)

    touched = recent_body_parts(history, config.window)
    available = [part for part in BODY_PARTS if part not in touched]

    if len(available) >= count:
        return available[:count]

    if available:
        top_up = [part for part in BODY_PARTS if part not in available]
        return (available + top_up)[:count]

    last_parts = history[-1].body_parts_lower
    last_index = next(
        (i for i, part in enumerate(BODY_PARTS) if part in last_parts),
        -1,
    )
    start = last_index + 1
    return [BODY_PARTS[(start + offset) % len(BODY_PARTS)] for offset in range(count)]
