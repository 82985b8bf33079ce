"""
Split templates.

A split is a named, ordered cycle of days; each day trains a fixed list of
body parts. Also holds the per-day exercise slot templates and the stretch
session templates callers use to materialize a WorkoutIntent.
"""

from __future__ import annotations

from dataclasses import dataclass

from coach_engine.models.enums import ExerciseSlotType as Slot, SplitType


@dataclass(frozen=True)
class SplitDay:
    day: int  # 1-indexed position in the cycle
    name: str
    body_parts: tuple[str, ...]


@dataclass(frozen=True)
class SplitTemplate:
    type: SplitType
    name: str
    days_per_week: int
    days: tuple[SplitDay, ...]

    @property
    def cycle_length(self) -> int:
        return len(self.days)

    def day_at(self, split_day: int) -> SplitDay:
        """Day for a 1-indexed position, wrapping past the cycle end."""
        return self.days[(split_day - 1) % self.cycle_length]


@dataclass(frozen=True)
class ExerciseSlot:
    type: Slot
    body_part: str
    priority: int  # 1 = first exercise of the session


@dataclass(frozen=True)
class SessionTemplate:
    name: str
    exercises: tuple[ExerciseSlot, ...]


def _slots(*entries: tuple[Slot, str]) -> tuple[ExerciseSlot, ...]:
    return tuple(
        ExerciseSlot(type=slot_type, body_part=body_part, priority=index)
        for index, (slot_type, body_part) in enumerate(entries, start=1)
    )


_PUSH = SplitDay(1, "Push", ("chest", "shoulders", "triceps"))
_PULL = SplitDay(2, "Pull", ("back", "biceps"))
_LEGS = SplitDay(3, "Legs", ("legs", "glutes"))

SPLIT_TEMPLATES: dict[SplitType, SplitTemplate] = {
    SplitType.PPL: SplitTemplate(
        type=SplitType.PPL,
        name="Push/Pull/Legs",
        days_per_week=6,  # two cycles per week
        days=(_PUSH, _PULL, _LEGS),
    ),
    SplitType.UPPER_LOWER: SplitTemplate(
        type=SplitType.UPPER_LOWER,
        name="Upper/Lower",
        days_per_week=4,
        days=(
            SplitDay(1, "Upper", ("chest", "back", "shoulders", "biceps", "triceps")),
            SplitDay(2, "Lower", ("legs", "glutes")),
        ),
    ),
    SplitType.FULL_BODY: SplitTemplate(
        type=SplitType.FULL_BODY,
        name="Full Body",
        days_per_week=3,
        days=(SplitDay(1, "Full Body", ("chest", "back", "legs", "shoulders")),),
    ),
    SplitType.BRO_SPLIT: SplitTemplate(
        type=SplitType.BRO_SPLIT,
        name="Bro Split",
        days_per_week=5,
        days=(
            SplitDay(1, "Chest", ("chest", "triceps")),
            SplitDay(2, "Back", ("back", "biceps")),
            SplitDay(3, "Shoulders", ("shoulders", "traps")),
            SplitDay(4, "Arms", ("biceps", "triceps")),
            SplitDay(5, "Legs", ("legs", "glutes")),
        ),
    ),
    SplitType.PUSH_PULL_LEGS_ARMS: SplitTemplate(
        type=SplitType.PUSH_PULL_LEGS_ARMS,
        name="Push/Pull/Legs/Arms",
        days_per_week=4,
        days=(_PUSH, _PULL, _LEGS, SplitDay(4, "Arms", ("biceps", "triceps"))),
    ),
    SplitType.CHEST_BACK_SHOULDERS_ARMS_LEGS: SplitTemplate(
        type=SplitType.CHEST_BACK_SHOULDERS_ARMS_LEGS,
        name="Chest & Back / Shoulders & Arms / Legs",
        days_per_week=3,
        days=(
            SplitDay(1, "Chest & Back", ("chest", "upper back", "lats")),
            SplitDay(2, "Shoulders & Arms", ("front delts", "lateral delts", "rear delts", "biceps", "triceps")),
            SplitDay(3, "Legs", ("quads", "hamstrings", "glutes")),
        ),
    ),
}


# Exercise slots per split day, keyed by lower-cased day name.
SPLIT_DAY_TEMPLATES: dict[str, SessionTemplate] = {
    "push": SessionTemplate("Push", _slots(
        (Slot.COMPOUND, "chest"),
        (Slot.COMPOUND, "chest"),
        (Slot.ACCESSORY, "chest"),
        (Slot.ACCESSORY, "triceps"),
        (Slot.ACCESSORY, "triceps"),
        (Slot.ACCESSORY, "front delts"),
    )),
    "pull": SessionTemplate("Pull", _slots(
        (Slot.COMPOUND, "upper back"),
        (Slot.COMPOUND, "lats"),
        (Slot.ACCESSORY, "lats"),
        (Slot.ACCESSORY, "biceps"),
        (Slot.ACCESSORY, "biceps"),
        (Slot.ACCESSORY, "rear delts"),
    )),
    "legs": SessionTemplate("Legs", _slots(
        (Slot.COMPOUND, "quads"),
        (Slot.COMPOUND, "hamstrings"),
        (Slot.ACCESSORY, "quads"),
        (Slot.ACCESSORY, "hamstrings"),
        (Slot.ACCESSORY, "glutes"),
        (Slot.ACCESSORY, "calves"),
    )),
    "upper": SessionTemplate("Upper", _slots(
        (Slot.COMPOUND, "chest"),
        (Slot.COMPOUND, "upper back"),
        (Slot.COMPOUND, "front delts"),
        (Slot.ACCESSORY, "chest"),
        (Slot.ACCESSORY, "lats"),
        (Slot.ACCESSORY, "biceps"),
        (Slot.ACCESSORY, "triceps"),
    )),
    "lower": SessionTemplate("Lower", _slots(
        (Slot.COMPOUND, "quads"),
        (Slot.COMPOUND, "hamstrings"),
        (Slot.ACCESSORY, "quads"),
        (Slot.ACCESSORY, "hamstrings"),
        (Slot.ACCESSORY, "glutes"),
        (Slot.ACCESSORY, "calves"),
    )),
    "full body": SessionTemplate("Full Body", _slots(
        (Slot.COMPOUND, "chest"),
        (Slot.COMPOUND, "upper back"),
        (Slot.COMPOUND, "quads"),
        (Slot.ACCESSORY, "lateral delts"),
        (Slot.ACCESSORY, "biceps"),
        (Slot.ACCESSORY, "triceps"),
    )),
    "chest": SessionTemplate("Chest", _slots(
        (Slot.COMPOUND, "chest"),
        (Slot.COMPOUND, "chest"),
        (Slot.ACCESSORY, "chest"),
        (Slot.ACCESSORY, "chest"),
        (Slot.ACCESSORY, "triceps"),
    )),
    "back": SessionTemplate("Back", _slots(
        (Slot.COMPOUND, "upper back"),
        (Slot.COMPOUND, "lats"),
        (Slot.ACCESSORY, "lats"),
        (Slot.ACCESSORY, "lower back"),
        (Slot.ACCESSORY, "biceps"),
    )),
    "shoulders": SessionTemplate("Shoulders", _slots(
        (Slot.COMPOUND, "front delts"),
        (Slot.COMPOUND, "lateral delts"),
        (Slot.ACCESSORY, "lateral delts"),
        (Slot.ACCESSORY, "rear delts"),
        (Slot.ACCESSORY, "traps"),
    )),
    "arms": SessionTemplate("Arms", _slots(
        (Slot.COMPOUND, "biceps"),
        (Slot.COMPOUND, "triceps"),
        (Slot.ACCESSORY, "biceps"),
        (Slot.ACCESSORY, "triceps"),
        (Slot.ACCESSORY, "forearms"),
    )),
    "chest & back": SessionTemplate("Chest & Back", _slots(
        (Slot.COMPOUND, "chest"),
        (Slot.COMPOUND, "upper back"),
        (Slot.COMPOUND, "lats"),
        (Slot.ACCESSORY, "chest"),
        (Slot.ACCESSORY, "upper back"),
        (Slot.ACCESSORY, "lats"),
    )),
    "shoulders & arms": SessionTemplate("Shoulders & Arms", _slots(
        (Slot.COMPOUND, "front delts"),
        (Slot.COMPOUND, "lateral delts"),
        (Slot.ACCESSORY, "rear delts"),
        (Slot.ACCESSORY, "biceps"),
        (Slot.ACCESSORY, "triceps"),
        (Slot.ACCESSORY, "biceps"),
        (Slot.ACCESSORY, "triceps"),
    )),
}


# Separate stretch sessions, keyed by the WorkoutIntent.stretch_template value.
STRETCH_TEMPLATES: dict[str, SessionTemplate] = {
    "full body": SessionTemplate("Full Body Stretch", _slots(
        (Slot.ACCESSORY, "quads"),
        (Slot.ACCESSORY, "hamstrings"),
        (Slot.ACCESSORY, "glutes"),
        (Slot.ACCESSORY, "hip flexors"),
        (Slot.ACCESSORY, "upper back"),
        (Slot.ACCESSORY, "front delts"),
        (Slot.ACCESSORY, "lateral delts"),
        (Slot.ACCESSORY, "rear delts"),
        (Slot.ACCESSORY, "chest"),
        (Slot.ACCESSORY, "calves"),
    )),
    "lower body": SessionTemplate("Lower Body Stretch", _slots(
        (Slot.ACCESSORY, "quads"),
        (Slot.ACCESSORY, "hamstrings"),
        (Slot.ACCESSORY, "glutes"),
        (Slot.ACCESSORY, "hip flexors"),
        (Slot.ACCESSORY, "calves"),
        (Slot.ACCESSORY, "lower back"),
    )),
    "upper body": SessionTemplate("Upper Body Stretch", _slots(
        (Slot.ACCESSORY, "upper back"),
        (Slot.ACCESSORY, "front delts"),
        (Slot.ACCESSORY, "lateral delts"),
        (Slot.ACCESSORY, "rear delts"),
        (Slot.ACCESSORY, "chest"),
        (Slot.ACCESSORY, "biceps"),
        (Slot.ACCESSORY, "triceps"),
        (Slot.ACCESSORY, "traps"),
    )),
    "pre run": SessionTemplate("Pre-Run Stretch", _slots(
        (Slot.ACCESSORY, "quads"),
        (Slot.ACCESSORY, "hamstrings"),
        (Slot.ACCESSORY, "calves"),
        (Slot.ACCESSORY, "hip flexors"),
        (Slot.ACCESSORY, "glutes"),
    )),
    "pre lift": SessionTemplate("Pre-Lift Stretch", _slots(
        (Slot.ACCESSORY, "upper back"),
        (Slot.ACCESSORY, "front delts"),
        (Slot.ACCESSORY, "hip flexors"),
        (Slot.ACCESSORY, "quads"),
        (Slot.ACCESSORY, "hamstrings"),
        (Slot.ACCESSORY, "glutes"),
    )),
}
