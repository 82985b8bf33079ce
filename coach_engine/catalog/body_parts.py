"""Canonical trainable body regions, in rotation order."""

from __future__ import annotations

BODY_PARTS: tuple[str, ...] = (
    # Chest
    "chest",
    # Back
    "upper back",
    "lats",
    "lower back",
    "traps",
    # Shoulders
    "front delts",
    "lateral delts",
    "rear delts",
    "shoulders",  # all three heads
    # Arms
    "biceps",
    "triceps",
    "forearms",
    # Core
    "abs",
    "obliques",
    "core",
    # Legs
    "quads",
    "hamstrings",
    "glutes",
    "calves",
    "hip flexors",
    "inner thighs",  # adductors
    "outer thighs",  # abductors
    "outer hips",  # external rotators
    # Joints
    "ankles",
    "wrists",
    "neck",
    # Conditioning
    "cardio",
)

CARDIO_BODY_PART = "cardio"
