"""Tests for injury text mapping and the injury check."""

import pytest

from coach_engine.services.injury import has_injury_for_body_parts, map_injury_to_body_parts


class TestMapInjuryToBodyParts:
    """Keyword scan over injury sites."""

    @pytest.mark.parametrize("description, expected", [
        ("knee pain", ["quads", "hamstrings", "calves"]),
        ("Torn ACL", ["quads", "hamstrings", "calves"]),
        ("rotator cuff strain", ["front delts", "lateral delts", "rear delts", "upper back"]),
        ("herniated disc", ["upper back", "lower back", "lats"]),
        ("tennis elbow", ["biceps", "triceps", "forearms"]),
        ("carpal tunnel", ["forearms"]),
        ("achilles tendinitis", ["calves"]),
        ("IT band syndrome", ["glutes", "quads", "hamstrings"]),
        ("cervical strain", ["traps", "upper back"]),
        ("bruised sternum", ["chest"]),
        ("shin splints", ["calves", "quads"]),
    ])
    def test_single_site(self, description, expected):
        assert map_injury_to_body_parts(description) == expected

    def test_multiple_sites_concatenate_in_table_order(self):
        result = map_injury_to_body_parts("sore ankle and knee")
        assert result == ["quads", "hamstrings", "calves", "calves"]

    def test_unmatched_text(self):
        assert map_injury_to_body_parts("general tiredness") == []
        assert map_injury_to_body_parts("") == []
        assert map_injury_to_body_parts(None) == []


class TestHasInjuryForBodyParts:
    """Planned body parts are checked against all mapped injury parts."""

    def test_knee_pain_blocks_quads(self):
        assert has_injury_for_body_parts(["quads", "back", "shoulders"], ["knee pain"])

    def test_no_injuries(self):
        assert not has_injury_for_body_parts(["quads"], [])
        assert not has_injury_for_body_parts(["quads"], None)

    def test_unrelated_injury(self):
        assert not has_injury_for_body_parts(["chest", "triceps"], ["knee pain"])

    def test_substring_match_in_either_direction(self):
        # "back" is contained in "upper back" from the neck mapping
        assert has_injury_for_body_parts(["back"], ["stiff neck"])
        # "forearms" from the wrist mapping is contained in the planned part
        assert has_injury_for_body_parts(["Forearms and grip"], ["sprained wrist"])

    def test_case_insensitive(self):
        assert has_injury_for_body_parts(["QUADS"], ["KNEE PAIN"])
