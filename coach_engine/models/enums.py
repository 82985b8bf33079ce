"""Closed vocabularies shared by schemas, catalog tables and services."""
from enum import Enum


class GoalCategory(str, Enum):
    BODY_COMPOSITION = "body_composition"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    MOBILITY = "mobility"
    SKILL = "skill"


class GoalDirection(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    ACHIEVE = "achieve"


class GoalMetric(str, Enum):
    WEIGHT = "weight"
    REPS = "reps"
    TIME = "time"
    DISTANCE = "distance"
    ROM = "rom"


class GoalPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Intensity(str, Enum):
    STRENGTHEN = "strengthen"
    MAINTAIN = "maintain"
    RECOVER = "recover"


class WorkoutType(str, Enum):
    MAIN = "main"
    ENDURANCE = "endurance"
    CARDIO = "cardio"
    STRETCH = "stretch"


class CardioType(str, Enum):
    RUN = "run"
    INCLINE_WALK = "incline_walk"
    WALK = "walk"


class CardioFrequency(str, Enum):
    DAILY = "daily"
    EVERY_OTHER_DAY = "every_other_day"
    WEEKLY = "weekly"


class CarbBias(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class SplitType(str, Enum):
    PPL = "PPL"
    UPPER_LOWER = "UPPER_LOWER"
    FULL_BODY = "FULL_BODY"
    BRO_SPLIT = "BRO_SPLIT"
    PUSH_PULL_LEGS_ARMS = "PUSH_PULL_LEGS_ARMS"
    CHEST_BACK_SHOULDERS_ARMS_LEGS = "CHEST_BACK_SHOULDERS_ARMS_LEGS"


class ExerciseSlotType(str, Enum):
    COMPOUND = "compound"
    ACCESSORY = "accessory"


class ExerciseClass(str, Enum):
    """Progression rule family an exercise is routed to."""
    PRIMARY_LIFT = "primary_lift"
    ENDURANCE = "endurance"
    MOBILITY = "mobility"
    SKILL = "skill"
    BODY_COMPOSITION = "body_composition"
    ACCESSORY = "accessory"
