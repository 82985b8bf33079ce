"""
Keyword lookup tables.

Each table is a tuple of (keywords, result) rows. A row matches when any of
its keywords is a substring of the lower-cased input text.
"""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# Injury sites -> affected body parts
# =============================================================================

INJURY_SITE_TABLE: tuple[tuple[str, tuple[str, ...], tuple[str, ...]], ...] = (
    # (site, keywords, affected body parts)
    ("knee",
     ("knee", "patella", "acl", "meniscus", "mcl", "pcl"),
     ("quads", "hamstrings", "calves")),
    ("shoulder",
     ("shoulder", "rotator", "deltoid", "ac joint", "impingement", "labrum"),
     ("front delts", "lateral delts", "rear delts", "upper back")),
    ("back",
     ("back", "spine", "disc", "lumbar", "thoracic", "herniated"),
     ("upper back", "lower back", "lats")),
    ("elbow",
     ("elbow", "tennis elbow", "golfer", "lateral epicondylitis", "medial epicondylitis"),
     ("biceps", "triceps", "forearms")),
    ("wrist_hand",
     ("wrist", "hand", "carpal", "thumb", "finger"),
     ("forearms",)),
    ("ankle_foot",
     ("ankle", "foot", "achilles", "plantar", "heel"),
     ("calves",)),
    ("hip",
     ("hip", "groin", "hip flexor", "it band", "iliotibial"),
     ("glutes", "quads", "hamstrings")),
    ("neck",
     ("neck", "cervical", "whiplash"),
     ("traps", "upper back")),
    ("chest",
     ("chest", "pectoral", "rib", "sternum"),
     ("chest",)),
    ("shin",
     ("shin", "tibia", "fibula"),
     ("calves", "quads")),
)


# =============================================================================
# Mobility movement -> body parts
# =============================================================================

MOBILITY_MOVEMENT_TABLE: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("hip", "squat", "leg"), ("quads", "hamstrings", "glutes", "hip flexors")),
    (("shoulder", "overhead", "arm"), ("front delts", "lateral delts", "rear delts", "upper back")),
    (("spine", "back", "twist"), ("upper back", "lower back", "core")),
    (("ankle", "foot", "calf"), ("calves", "ankles")),
)


# =============================================================================
# Skill -> requirements
# =============================================================================

@dataclass(frozen=True)
class SkillRequirements:
    body_parts: tuple[str, ...]
    needs_weight_loss: bool = False
    daily_practice: bool = False


SKILL_REQUIREMENTS_TABLE: tuple[tuple[tuple[str, ...], SkillRequirements], ...] = (
    (("pistol", "single leg squat"),
     SkillRequirements(("quads", "hamstrings", "glutes", "calves", "core"), needs_weight_loss=True)),
    (("pull-up", "chin-up"),
     SkillRequirements(("lats", "biceps", "upper back", "rear delts"), needs_weight_loss=True, daily_practice=True)),
    (("muscle-up",),
     SkillRequirements(("lats", "biceps", "upper back", "rear delts", "chest", "triceps"), needs_weight_loss=True)),
    (("handstand",),
     SkillRequirements(("front delts", "lateral delts", "rear delts", "core", "upper back"), daily_practice=True)),
    (("push-up",),
     SkillRequirements(("chest", "triceps", "front delts", "core"))),
    (("dip",),
     SkillRequirements(("chest", "triceps", "front delts"))),
    (("squat", "lunge"),
     SkillRequirements(("quads", "hamstrings", "glutes", "calves"))),
    (("deadlift", "hinge"),
     SkillRequirements(("hamstrings", "glutes", "lower back", "traps"))),
)


# =============================================================================
# Cardio modalities
# =============================================================================

ENDURANCE_CARDIO_OPTIONS: tuple[str, ...] = (
    "running",
    "swimming",
    "biking",
    "cycling",
    "rowing",
    "stair climber",
    "elliptical",
    "jump rope",
    "hiking",
)

RUN_KEYWORDS: tuple[str, ...] = ("run", "jog")
