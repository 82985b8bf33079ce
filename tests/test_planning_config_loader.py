"""Tests for the planning configuration loader."""

from pathlib import Path

import pytest
import yaml

from coach_engine.config.planning_config_loader import (
    PlanningConfigLoadError,
    PlanningConfigLoader,
    PlanningConfigValidationError,
    get_planning_config,
    get_planning_config_loader,
    reload_planning_config,
    reset_planning_config_loader,
)
from coach_engine.config.settings import get_settings

DEFAULT_CONFIG = Path(__file__).resolve().parents[1] / "coach_engine" / "config" / "planning_config.yaml"


def write_config(tmp_path, data):
    path = tmp_path / "planning_config.yaml"
    path.write_text(yaml.safe_dump(data))
    return path


@pytest.fixture
def default_data():
    return yaml.safe_load(DEFAULT_CONFIG.read_text())


class TestLoading:

    def test_packaged_defaults(self):
        config = get_planning_config()
        assert config.fatigue.window == 3
        assert config.fatigue.high_intensity_labels == ("strengthen", "heavy")
        assert config.rotation.default_body_parts == ("chest", "back", "shoulders")
        assert config.progression.weight_increment == 2.5
        assert config.progression.deload.standard_weight_factor == 0.90
        assert config.nutrition.protein_per_kg.cut == 2.2

    def test_custom_file(self, tmp_path, default_data):
        default_data["fatigue"]["threshold"] = 2
        default_data["fatigue"]["high_intensity_labels"] = ["Heavy"]
        loader = PlanningConfigLoader(write_config(tmp_path, default_data))

        assert loader.config.fatigue.threshold == 2
        assert loader.config.fatigue.high_intensity_labels == ("heavy",)

    def test_missing_sections_use_defaults(self, tmp_path):
        loader = PlanningConfigLoader(write_config(tmp_path, {"version": "2.0"}))
        assert loader.config.version == "2.0"
        assert loader.config.strength.primary_lift_test_window == 8
        assert loader.config.nutrition.min_calories == 1200

    def test_invalid_threshold(self, tmp_path, default_data):
        default_data["fatigue"]["threshold"] = 5
        with pytest.raises(PlanningConfigValidationError):
            PlanningConfigLoader(write_config(tmp_path, default_data))

    def test_invalid_deload_factor(self, tmp_path, default_data):
        default_data["progression"]["deload"]["gentle_weight_factor"] = 1.5
        with pytest.raises(PlanningConfigValidationError):
            PlanningConfigLoader(write_config(tmp_path, default_data))

    def test_missing_file(self, tmp_path):
        with pytest.raises(PlanningConfigLoadError, match="not found"):
            PlanningConfigLoader(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "planning_config.yaml"
        path.write_text("fatigue: [unclosed\n")
        with pytest.raises(PlanningConfigLoadError) as exc_info:
            PlanningConfigLoader(path)
        assert exc_info.value.details == {"file_path": str(path)}

    def test_unknown_key(self, tmp_path, default_data):
        default_data["rotation"]["lookback"] = 4
        with pytest.raises(PlanningConfigLoadError) as exc_info:
            PlanningConfigLoader(write_config(tmp_path, default_data))
        assert not isinstance(exc_info.value, PlanningConfigValidationError)


class TestReload:

    def test_reload_notifies_callbacks(self, tmp_path, default_data):
        path = write_config(tmp_path, default_data)
        loader = PlanningConfigLoader(path)
        seen = []
        loader.register_reload_callback(lambda config: seen.append(config.rotation.target_count))

        default_data["rotation"]["target_count"] = 4
        path.write_text(yaml.safe_dump(default_data))
        loader.reload()

        assert loader.reload_count == 2
        assert seen == [4]
        assert loader.config.rotation.target_count == 4

    def test_singleton(self):
        assert get_planning_config_loader() is get_planning_config_loader()
        reset_planning_config_loader()
        loader = get_planning_config_loader()
        reload_planning_config()
        assert loader.reload_count == 2

    def test_path_from_environment(self, tmp_path, default_data, monkeypatch):
        default_data["endurance"]["history_window"] = 5
        path = write_config(tmp_path, default_data)
        monkeypatch.setenv("COACH_PLANNING_CONFIG_PATH", str(path))
        get_settings.cache_clear()
        try:
            assert get_planning_config_loader().config_path == path
            assert get_planning_config().endurance.history_window == 5
        finally:
            monkeypatch.delenv("COACH_PLANNING_CONFIG_PATH")
            get_settings.cache_clear()
