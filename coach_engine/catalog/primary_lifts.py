"""
Approved primary lifts and their supporting muscle groups.

Only these exercises can be the target of a strength goal. Order matters:
matching scans the table top to bottom and the first hit wins.
"""

from __future__ import annotations

PRIMARY_LIFT_SUPPORTING_MUSCLES: dict[str, tuple[str, ...]] = {
    # Upper push
    "bench press": ("chest", "triceps", "front delts"),
    "incline dumbbell press": ("chest", "triceps", "front delts"),
    "chest press": ("chest", "triceps", "front delts"),
    "dumbbell chest press": ("chest", "triceps", "front delts"),
    "dips": ("triceps", "chest", "front delts"),
    "push-ups": ("chest", "triceps", "front delts"),
    "push ups": ("chest", "triceps", "front delts"),
    "shoulder press": ("front delts", "triceps", "lateral delts"),
    "incline dumbbell chest press": ("chest", "triceps", "front delts"),
    "chest cable fly": ("chest", "front delts"),
    # Upper pull
    "pull-ups": ("lats", "biceps", "upper back", "rear delts"),
    "pull ups": ("lats", "biceps", "upper back", "rear delts"),
    "chin-ups": ("lats", "biceps", "upper back", "rear delts"),
    "chin ups": ("lats", "biceps", "upper back", "rear delts"),
    "lat pulldown": ("lats", "biceps", "upper back"),
    "barbell row": ("upper back", "lats", "biceps", "rear delts"),
    "dumbbell row": ("upper back", "lats", "biceps", "rear delts"),
    "seated cable row": ("upper back", "lats", "biceps", "rear delts"),
    # Lower body
    "squat": ("quads", "glutes", "hamstrings"),
    "deadlift": ("hamstrings", "glutes", "lower back"),
    "romanian deadlift": ("hamstrings", "glutes", "lower back"),
    "rdl": ("hamstrings", "glutes", "lower back"),
    "leg press": ("quads", "glutes"),
    "split squat": ("quads", "glutes"),
    "bulgarian split squat": ("quads", "glutes"),
    # Arms (secondary strength goals only)
    "barbell curl": ("biceps", "forearms"),
    "dumbbell curl": ("biceps", "forearms"),
    # Core
    "plank": ("abs", "obliques"),
    "sit-ups": ("abs", "obliques"),
    "sit ups": ("abs", "obliques"),
}

PRIMARY_LIFTS: tuple[str, ...] = tuple(PRIMARY_LIFT_SUPPORTING_MUSCLES)
