"""Engine configuration module.

- **settings.py**: Environment-based settings (Pydantic BaseSettings)
  - Debug flag, log rendering, planning config location
  - Loaded from .env file via pydantic-settings (``COACH_`` prefix)

- **planning_config.yaml**: Numeric planning constants
  - Fatigue and rotation windows, progression percentages, deload factors,
    nutrition coefficients
  - Loaded and validated by PlanningConfigLoader (frozen dataclasses)
"""
from coach_engine.config.settings import Settings, get_settings

# Planning constants: from coach_engine.config.planning_config_loader import get_planning_config

__all__ = ["Settings", "get_settings"]
