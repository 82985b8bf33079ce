"""Fatigue detection over the most recent sessions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from coach_engine.config.planning_config_loader import FatigueConfig, get_planning_config
from coach_engine.models.enums import Intensity
from coach_engine.schemas.workout import RecentWorkout

logger = logging.getLogger(__name__)


def count_high_intensity_sessions(
    history: Sequence[RecentWorkout],
    config: FatigueConfig | None = None,
) -> int:
    config = config or get_planning_config().fatigue
    window = history[-config.window:]
    return sum(1 for w in window if w.intensity in config.high_intensity_labels)


def check_fatigue(
    base: Intensity,
    history: Sequence[RecentWorkout],
    config: FatigueConfig | None = None,
) -> Intensity:
    """Force a recovery day after a run of high-intensity sessions.

    Counts sessions labelled ``strengthen`` or ``heavy`` among the last
    ``window`` entries; at ``threshold`` or more the base intensity is
    replaced by ``recover``.
    """
    config = config or get_planning_config().fatigue
    high = count_high_intensity_sessions(history, config)
    if high >= config.threshold:
        logger.debug(f"{high} high-intensity sessions in last {config.window}, forcing recover")
        return Intensity.RECOVER
    return Intensity(base)
