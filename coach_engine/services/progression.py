"""
Progression Calculator

Computes next-session weight and rep targets for every exercise in the
history. Each exercise is classified once (primary lift, endurance,
mobility, skill, body composition or generic accessory) and gets exactly
one progression rule. A deload overlay runs last and can override the rule
when the same weight has stalled for several sessions.

Core rule: no regression on a single miss. A missed target holds weight and
reps; only a repeated stall reduces load.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from coach_engine.catalog.keyword_tables import ENDURANCE_CARDIO_OPTIONS
from coach_engine.config.planning_config_loader import ProgressionConfig, get_planning_config
from coach_engine.models.enums import ExerciseClass, GoalCategory, GoalDirection
from coach_engine.schemas.goal import Goal
from coach_engine.schemas.progression import ProgressionTarget
from coach_engine.schemas.workout import LoggedSet, RecentWorkout
from coach_engine.services.matching import names_overlap
from coach_engine.services.primary_lift import is_primary_lift
from coach_engine.services.rounding import round_half_up, round_to_increment

logger = logging.getLogger(__name__)

_TECHNIQUE_CLASSES = (ExerciseClass.MOBILITY, ExerciseClass.SKILL)


@dataclass(frozen=True)
class SetSummary:
    """Averages over the most recent completed sets of one exercise."""
    avg_weight: float
    avg_reps: float
    target_reps: int
    all_sets_hit_target: bool

    @classmethod
    def from_sets(cls, sets: Sequence[LoggedSet]) -> "SetSummary":
        avg_weight = sum(s.weight for s in sets) / len(sets)
        avg_reps = sum(s.reps for s in sets) / len(sets)
        target_reps = round_half_up(avg_reps)
        return cls(
            avg_weight=avg_weight,
            avg_reps=avg_reps,
            target_reps=target_reps,
            all_sets_hit_target=all(s.reps >= target_reps for s in sets),
        )


def is_cardio_exercise(name: str) -> bool:
    return any(names_overlap(name, option) for option in ENDURANCE_CARDIO_OPTIONS)


def classify_exercise(name: str, goal: Goal | None) -> ExerciseClass:
    """Progression rule family for an exercise under the active goal.

    First match wins: endurance, primary lift, mobility, skill, body
    composition, generic accessory.
    """
    category = goal.known_category if goal else None
    target_name = goal.target_name if goal else None

    if is_cardio_exercise(name):
        return ExerciseClass.ENDURANCE
    if category == GoalCategory.ENDURANCE and target_name and names_overlap(name, target_name):
        return ExerciseClass.ENDURANCE
    if category == GoalCategory.STRENGTH and is_primary_lift(name):
        return ExerciseClass.PRIMARY_LIFT
    if category == GoalCategory.MOBILITY:
        return ExerciseClass.MOBILITY
    if category == GoalCategory.SKILL:
        return ExerciseClass.SKILL
    if category == GoalCategory.BODY_COMPOSITION:
        return ExerciseClass.BODY_COMPOSITION
    return ExerciseClass.ACCESSORY


def collect_completed_sets(history: Sequence[RecentWorkout]) -> dict[str, list[LoggedSet]]:
    """Completed sets per exercise name, in first-seen order, oldest first."""
    sets_by_name: dict[str, list[LoggedSet]] = {}
    for workout in history:
        for exercise in workout.exercises:
            bucket = sets_by_name.setdefault(exercise.name, [])
            bucket.extend(s for s in exercise.sets if s.completed)
    return sets_by_name


class ProgressionCalculator:
    """Next-session targets from recent history and the active goal."""

    def __init__(self, config: ProgressionConfig | None = None):
        self._config = config or get_planning_config().progression

    def compute(
        self,
        history: Sequence[RecentWorkout],
        goal: Goal | None = None,
    ) -> dict[str, ProgressionTarget]:
        """
        Compute progression targets for every exercise seen in history.

        Args:
            history: Recent sessions, oldest first
            goal: The active goal (drives classification), if any

        Returns:
            Exercise name -> ProgressionTarget, in first-seen order
        """
        history = list(history)
        targets: dict[str, ProgressionTarget] = {}
        for name, completed in collect_completed_sets(history).items():
            targets[name] = self._target_for(name, completed, history, goal)
        return targets

    def _target_for(
        self,
        name: str,
        completed: list[LoggedSet],
        history: list[RecentWorkout],
        goal: Goal | None,
    ) -> ProgressionTarget:
        classification = classify_exercise(name, goal)

        if not completed:
            # Nothing to progress from; the caller seeds a starting weight
            return ProgressionTarget(
                next_weight=0,
                target_reps=self._config.new_exercise_reps,
                classification=classification,
            )

        summary = SetSummary.from_sets(completed[-self._config.sample_sets:])
        increment = self._increment_for(classification)

        if summary.all_sets_hit_target:
            next_weight, next_reps = self._progress(classification, summary, goal)
        else:
            next_weight = round_to_increment(summary.avg_weight, increment)
            next_reps = summary.target_reps

        deload = self._is_stalled(name, summary, history)
        if deload:
            factor, rep_bonus = self._deload_rule(classification, goal)
            next_weight = round_to_increment(summary.avg_weight * factor, increment)
            next_reps = summary.target_reps + rep_bonus
            logger.debug(
                f"Deload for '{name}': {summary.avg_weight} -> {next_weight}, "
                f"reps {summary.target_reps} -> {next_reps}"
            )

        return ProgressionTarget(
            next_weight=max(0.0, next_weight),
            target_reps=max(1, next_reps),
            classification=classification,
            deload=deload,
        )

    def _increment_for(self, classification: ExerciseClass) -> float:
        if classification in _TECHNIQUE_CLASSES:
            return self._config.fine_weight_increment
        return self._config.weight_increment

    # ============== Progression rules ==============

    def _progress(
        self,
        classification: ExerciseClass,
        summary: SetSummary,
        goal: Goal | None,
    ) -> tuple[float, int]:
        if classification == ExerciseClass.ENDURANCE:
            weight = round_to_increment(summary.avg_weight, self._config.weight_increment)
            return weight, self._endurance_reps(summary.target_reps, goal)

        if classification in _TECHNIQUE_CLASSES:
            return self._technique_progression(summary)

        if classification == ExerciseClass.PRIMARY_LIFT:
            weight = self._primary_lift_weight(summary.avg_weight)
        elif classification == ExerciseClass.BODY_COMPOSITION:
            weight = self._body_composition_weight(summary.avg_weight, goal)
        else:
            weight = self._accessory_weight(summary.avg_weight)

        return round_to_increment(weight, self._config.weight_increment), summary.target_reps

    def _endurance_reps(self, reps: int, goal: Goal | None) -> int:
        """Endurance progresses reps only.

        The carried load (a vest, a sled) is held but still snapped to the
        plate increment, so every target weight stays a multiple of 2.5: an
        11 kg vest comes back as 10.
        """
        cfg = self._config.endurance
        goal_value = None
        if goal and goal.known_category == GoalCategory.ENDURANCE and goal.value and goal.value > 0:
            goal_value = goal.value

        if goal_value is None:
            return max(reps + 1, round_half_up(reps * (1 + cfg.rep_pct)))

        step = max(reps + 1, round_half_up(reps * (1 + cfg.goal_step_pct)))
        cap = round_half_up(goal_value * (1 + cfg.goal_cap_pct))
        return max(reps, min(step, cap))

    def _technique_progression(self, summary: SetSummary) -> tuple[float, int]:
        """Mobility and skill: +2.5% (at most +2.5) on 1.25 plates, or +1 rep unloaded.

        Below 25 kg the step is under half a 1.25 plate and rounds away, so
        light loaded technique work holds its weight until reps or load are
        changed by hand.
        """
        cfg = self._config.technique
        if summary.avg_weight <= 0:
            return 0.0, summary.target_reps + cfg.bodyweight_rep_step

        step = min(cfg.max_increase, summary.avg_weight * cfg.pct)
        weight = round_to_increment(summary.avg_weight + step, self._config.fine_weight_increment)
        return weight, summary.target_reps

    def _primary_lift_weight(self, weight: float) -> float:
        cfg = self._config.primary_lift
        if weight < self._config.light_weight_threshold:
            return max(weight + cfg.light_min_increase, weight * (1 + cfg.light_pct))
        if weight < self._config.heavy_weight_threshold:
            return weight * (1 + cfg.mid_pct)
        return weight * (1 + cfg.heavy_pct)

    def _body_composition_weight(self, weight: float, goal: Goal | None) -> float:
        cfg = self._config.body_composition
        direction = goal.direction if goal else None

        if direction == GoalDirection.DECREASE:
            pct = cfg.decrease_pct
        elif direction == GoalDirection.INCREASE:
            pct = cfg.increase_heavy_pct if weight >= self._config.heavy_weight_threshold else cfg.increase_pct
        else:
            pct = cfg.achieve_pct

        next_weight = weight * (1 + pct)
        if weight < self._config.light_weight_threshold:
            next_weight = max(next_weight, weight + cfg.light_min_increase)
        return next_weight

    def _accessory_weight(self, weight: float) -> float:
        cfg = self._config.accessory
        if weight < self._config.light_weight_threshold:
            return max(weight + cfg.light_min_increase, weight * (1 + cfg.pct))
        return weight * (1 + cfg.pct)

    # ============== Deload ==============

    def _is_stalled(self, name: str, summary: SetSummary, history: list[RecentWorkout]) -> bool:
        """Same weight, reps short of target, in every session of the deload window."""
        window_size = self._config.deload.window
        if len(history) < window_size:
            return False

        for workout in history[-window_size:]:
            stalled = any(
                s.completed
                and math.isclose(s.weight, summary.avg_weight)
                and s.reps < summary.target_reps
                for exercise in workout.exercises
                if exercise.name == name
                for s in exercise.sets
            )
            if not stalled:
                return False
        return True

    def _deload_rule(self, classification: ExerciseClass, goal: Goal | None) -> tuple[float, int]:
        cfg = self._config.deload
        gentle = (cfg.gentle_weight_factor, cfg.gentle_rep_bonus)
        standard = (cfg.standard_weight_factor, cfg.standard_rep_bonus)

        if classification in _TECHNIQUE_CLASSES:
            return gentle
        if (
            classification == ExerciseClass.BODY_COMPOSITION
            and goal is not None
            and goal.direction == GoalDirection.DECREASE
        ):
            return gentle
        return standard


def get_progression_calculator() -> ProgressionCalculator:
    """Get ProgressionCalculator instance."""
    return ProgressionCalculator()
