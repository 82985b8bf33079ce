"""
Planning Configuration Loader

Centralized, type-safe loader for the numeric constants the planning engine
uses: fatigue and rotation windows, progression percentages, deload factors
and nutrition coefficients.

Configuration is loaded from planning_config.yaml and validated on parse.
Supports explicit reloads for updates without restart.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from threading import RLock
from typing import Any, Callable

import yaml


class PlanningConfigLoadError(Exception):
    """Raised when configuration cannot be loaded or is invalid."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details = details or {}


class PlanningConfigValidationError(PlanningConfigLoadError):
    """Raised when configuration fails validation."""


def _require_fraction(name: str, value: float) -> None:
    if not 0 <= value <= 1:
        raise PlanningConfigValidationError(
            f"{name} ({value}) must be between 0 and 1"
        )


@dataclass(frozen=True)
class FatigueConfig:
    """Consecutive high-intensity detection."""

    window: int = 3
    threshold: int = 3
    high_intensity_labels: tuple[str, ...] = ("strengthen", "heavy")

    def __post_init__(self):
        if not 0 < self.threshold <= self.window:
            raise PlanningConfigValidationError(
                f"fatigue threshold ({self.threshold}) must be between 1 and window ({self.window})"
            )


@dataclass(frozen=True)
class RotationConfig:
    """Body-part rotation settings."""

    window: int = 3
    target_count: int = 3
    default_body_parts: tuple[str, ...] = ("chest", "back", "shoulders")

    def __post_init__(self):
        if self.window < 1:
            raise PlanningConfigValidationError(f"rotation window must be >= 1, got {self.window}")
        if len(self.default_body_parts) != self.target_count:
            raise PlanningConfigValidationError(
                f"default_body_parts must contain {self.target_count} entries, got {list(self.default_body_parts)}"
            )


@dataclass(frozen=True)
class EnduranceConfig:
    history_window: int = 7


@dataclass(frozen=True)
class StrengthConfig:
    primary_lift_test_window: int = 8

    def __post_init__(self):
        if self.primary_lift_test_window < 1:
            raise PlanningConfigValidationError(
                f"primary_lift_test_window must be >= 1, got {self.primary_lift_test_window}"
            )


@dataclass(frozen=True)
class PrimaryLiftProgressionConfig:
    light_pct: float = 0.075
    light_min_increase: float = 2.5
    mid_pct: float = 0.075
    heavy_pct: float = 0.05

    def __post_init__(self):
        for name in ("light_pct", "mid_pct", "heavy_pct"):
            _require_fraction(name, getattr(self, name))


@dataclass(frozen=True)
class AccessoryProgressionConfig:
    pct: float = 0.05
    light_min_increase: float = 2.5

    def __post_init__(self):
        _require_fraction("pct", self.pct)


@dataclass(frozen=True)
class BodyCompositionProgressionConfig:
    decrease_pct: float = 0.025
    increase_pct: float = 0.075
    increase_heavy_pct: float = 0.05
    achieve_pct: float = 0.05
    light_min_increase: float = 2.5

    def __post_init__(self):
        for name in ("decrease_pct", "increase_pct", "increase_heavy_pct", "achieve_pct"):
            _require_fraction(name, getattr(self, name))


@dataclass(frozen=True)
class TechniqueProgressionConfig:
    """Mobility and skill progression (form first, small load steps)."""

    pct: float = 0.025
    max_increase: float = 2.5
    bodyweight_rep_step: int = 1

    def __post_init__(self):
        _require_fraction("pct", self.pct)


@dataclass(frozen=True)
class EnduranceProgressionConfig:
    rep_pct: float = 0.05
    goal_step_pct: float = 0.10
    goal_cap_pct: float = 0.05

    def __post_init__(self):
        for name in ("rep_pct", "goal_step_pct", "goal_cap_pct"):
            _require_fraction(name, getattr(self, name))


@dataclass(frozen=True)
class DeloadConfig:
    window: int = 3
    standard_weight_factor: float = 0.90
    standard_rep_bonus: int = 2
    gentle_weight_factor: float = 0.95
    gentle_rep_bonus: int = 1

    def __post_init__(self):
        for name in ("standard_weight_factor", "gentle_weight_factor"):
            value = getattr(self, name)
            if not 0 < value <= 1:
                raise PlanningConfigValidationError(f"{name} ({value}) must be in (0, 1]")
        if self.window < 1:
            raise PlanningConfigValidationError(f"deload window must be >= 1, got {self.window}")


@dataclass(frozen=True)
class ProgressionConfig:
    sample_sets: int = 3
    new_exercise_reps: int = 10
    weight_increment: float = 2.5
    fine_weight_increment: float = 1.25
    light_weight_threshold: float = 50
    heavy_weight_threshold: float = 100
    primary_lift: PrimaryLiftProgressionConfig = field(default_factory=PrimaryLiftProgressionConfig)
    accessory: AccessoryProgressionConfig = field(default_factory=AccessoryProgressionConfig)
    body_composition: BodyCompositionProgressionConfig = field(default_factory=BodyCompositionProgressionConfig)
    technique: TechniqueProgressionConfig = field(default_factory=TechniqueProgressionConfig)
    endurance: EnduranceProgressionConfig = field(default_factory=EnduranceProgressionConfig)
    deload: DeloadConfig = field(default_factory=DeloadConfig)

    def __post_init__(self):
        if self.sample_sets < 1:
            raise PlanningConfigValidationError(f"sample_sets must be >= 1, got {self.sample_sets}")
        if self.weight_increment <= 0 or self.fine_weight_increment <= 0:
            raise PlanningConfigValidationError("weight increments must be > 0")
        if self.light_weight_threshold > self.heavy_weight_threshold:
            raise PlanningConfigValidationError(
                f"light_weight_threshold ({self.light_weight_threshold}) must be <= "
                f"heavy_weight_threshold ({self.heavy_weight_threshold})"
            )


@dataclass(frozen=True)
class ProteinPerKgConfig:
    strength: float = 2.0
    cut: float = 2.2
    default: float = 1.6


@dataclass(frozen=True)
class NutritionConfig:
    assumed_age: int = 30
    activity_multiplier: float = 1.55
    default_weight_kg: float = 70
    default_height_cm: float = 175
    min_calories: int = 1200
    calorie_rounding: int = 50
    default_deficit: float = 625
    deficit_per_unit_per_week: float = 500
    max_deficit: float = 1500
    bulk_surplus: float = 400
    strength_surplus: float = 200
    endurance_surplus: float = 300
    protein_per_kg: ProteinPerKgConfig = field(default_factory=ProteinPerKgConfig)

    def __post_init__(self):
        if self.activity_multiplier < 1:
            raise PlanningConfigValidationError(
                f"activity_multiplier ({self.activity_multiplier}) must be >= 1"
            )
        if self.calorie_rounding <= 0:
            raise PlanningConfigValidationError(
                f"calorie_rounding must be > 0, got {self.calorie_rounding}"
            )


@dataclass(frozen=True)
class PlanningConfig:
    """Unified planning configuration."""

    version: str
    last_updated: str
    fatigue: FatigueConfig
    rotation: RotationConfig
    endurance: EnduranceConfig
    strength: StrengthConfig
    progression: ProgressionConfig
    nutrition: NutritionConfig


class PlanningConfigLoader:
    """Loader for the planning configuration with reload support."""

    def __init__(self, config_path: Path | None = None):
        self._lock = RLock()
        self._config: PlanningConfig | None = None
        self._config_path = Path(config_path) if config_path else self._default_config_path()
        self._reload_callbacks: list[Callable[[PlanningConfig], None]] = []
        self._reload_count = 0

        self._load_config()

    @staticmethod
    def _default_config_path() -> Path:
        """Get default configuration file path."""
        return Path(__file__).parent / "planning_config.yaml"

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            with open(self._config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise PlanningConfigLoadError(
                f"Configuration file not found: {self._config_path}"
            )
        except yaml.YAMLError as e:
            raise PlanningConfigLoadError(
                f"Failed to parse YAML configuration: {e}",
                details={"file_path": str(self._config_path)},
            )

        try:
            self._config = self._parse_config(data)
            self._reload_count += 1
            self._notify_callbacks()
        except PlanningConfigValidationError:
            raise
        except Exception as e:
            raise PlanningConfigLoadError(
                f"Failed to parse configuration: {e}",
                details={"file_path": str(self._config_path)},
            )

    def _parse_config(self, data: dict[str, Any]) -> PlanningConfig:
        """Parse raw YAML data into PlanningConfig.

        Raises:
            PlanningConfigValidationError: If validation fails.
        """
        fatigue_data = dict(data.get("fatigue", {}))
        if "high_intensity_labels" in fatigue_data:
            fatigue_data["high_intensity_labels"] = tuple(
                label.lower() for label in fatigue_data["high_intensity_labels"]
            )
        fatigue_config = FatigueConfig(**fatigue_data)

        rotation_data = dict(data.get("rotation", {}))
        if "default_body_parts" in rotation_data:
            rotation_data["default_body_parts"] = tuple(rotation_data["default_body_parts"])
        rotation_config = RotationConfig(**rotation_data)

        return PlanningConfig(
            version=str(data.get("version", "1.0.0")),
            last_updated=str(data.get("last_updated", "")),
            fatigue=fatigue_config,
            rotation=rotation_config,
            endurance=EnduranceConfig(**data.get("endurance", {})),
            strength=StrengthConfig(**data.get("strength", {})),
            progression=self._parse_progression_config(data.get("progression", {})),
            nutrition=self._parse_nutrition_config(data.get("nutrition", {})),
        )

    def _parse_progression_config(self, data: dict[str, Any]) -> ProgressionConfig:
        """Parse the progression section, nested rule blocks included."""
        nested = {
            "primary_lift": PrimaryLiftProgressionConfig,
            "accessory": AccessoryProgressionConfig,
            "body_composition": BodyCompositionProgressionConfig,
            "technique": TechniqueProgressionConfig,
            "endurance": EnduranceProgressionConfig,
            "deload": DeloadConfig,
        }
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key in nested:
                kwargs[key] = nested[key](**(value or {}))
            else:
                kwargs[key] = value
        return ProgressionConfig(**kwargs)

    def _parse_nutrition_config(self, data: dict[str, Any]) -> NutritionConfig:
        kwargs = dict(data)
        if "protein_per_kg" in kwargs:
            kwargs["protein_per_kg"] = ProteinPerKgConfig(**(kwargs["protein_per_kg"] or {}))
        return NutritionConfig(**kwargs)

    @property
    def config(self) -> PlanningConfig:
        """Get current configuration (thread-safe)."""
        with self._lock:
            if self._config is None:
                self._load_config()
            return self._config

    @property
    def config_path(self) -> Path:
        return self._config_path

    def reload(self) -> None:
        """Force reload configuration from file."""
        with self._lock:
            self._load_config()

    def register_reload_callback(
        self, callback: Callable[[PlanningConfig], None]
    ) -> None:
        """Register a callback to be called with the new configuration on reload."""
        self._reload_callbacks.append(callback)

    def _notify_callbacks(self) -> None:
        """Notify all registered callbacks of configuration reload."""
        if self._config is None:
            return
        for callback in self._reload_callbacks:
            callback(self._config)

    @property
    def reload_count(self) -> int:
        """Get number of times configuration has been loaded."""
        return self._reload_count


_loader_instance: PlanningConfigLoader | None = None
_loader_lock = RLock()


def get_planning_config_loader(config_path: Path | None = None) -> PlanningConfigLoader:
    """Get or create the singleton PlanningConfigLoader instance.

    Example:
        >>> loader = get_planning_config_loader()
        >>> loader.config.fatigue.window
        3
    """
    global _loader_instance
    with _loader_lock:
        if _loader_instance is None:
            if config_path is None:
                from coach_engine.config.settings import get_settings

                config_path = get_settings().planning_config_path
            _loader_instance = PlanningConfigLoader(config_path)
        return _loader_instance


def get_planning_config() -> PlanningConfig:
    """Get current planning configuration."""
    return get_planning_config_loader().config


def reload_planning_config() -> None:
    """Force reload planning configuration from file."""
    get_planning_config_loader().reload()


def reset_planning_config_loader() -> None:
    """Drop the singleton so the next access re-reads settings and file."""
    global _loader_instance
    with _loader_lock:
        _loader_instance = None
