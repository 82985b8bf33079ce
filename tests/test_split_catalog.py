"""Tests for split template lookups."""

import pytest

from coach_engine.catalog.splits import SPLIT_TEMPLATES
from coach_engine.core.exceptions import NotFoundError
from coach_engine.models.enums import SplitType
from coach_engine.services.split_catalog import (
    all_split_types,
    get_split_day_template,
    get_split_template,
    get_stretch_template,
    resolve_split_type,
    split_day_name,
)


class TestSplitTemplates:

    def test_every_split_type_has_a_template(self):
        assert set(all_split_types()) == set(SplitType)

    def test_lookup_by_string(self):
        template = get_split_template("UPPER_LOWER")
        assert template.cycle_length == 2
        assert template.days[1].body_parts == ("legs", "glutes")

    def test_unknown_split_raises(self):
        with pytest.raises(NotFoundError) as exc_info:
            get_split_template("ARNOLD")
        assert exc_info.value.code == "NF_SPLIT_001"
        assert exc_info.value.details == {"split_type": "ARNOLD"}

    @pytest.mark.parametrize("value", [None, "", "arnold"])
    def test_resolve_unknown(self, value):
        assert resolve_split_type(value) is None

    @pytest.mark.parametrize("split_day, expected", [(1, "Push"), (3, "Legs"), (4, "Push"), (5, "Pull")])
    def test_day_names_wrap(self, split_day, expected):
        assert split_day_name(SplitType.PPL, split_day) == expected

    def test_days_are_numbered_in_order(self):
        for template in SPLIT_TEMPLATES.values():
            assert [day.day for day in template.days] == list(range(1, template.cycle_length + 1))


class TestSessionTemplates:

    def test_every_split_day_has_exercise_slots(self):
        for template in SPLIT_TEMPLATES.values():
            for day in template.days:
                session = get_split_day_template(day.name)
                assert session is not None, day.name
                assert session.exercises
                assert [slot.priority for slot in session.exercises] == list(
                    range(1, len(session.exercises) + 1)
                )

    def test_day_lookup_ignores_case(self):
        assert get_split_day_template("  PUSH ").name == "Push"

    @pytest.mark.parametrize("name", ["full body", "lower body", "upper body", "pre run", "pre lift"])
    def test_stretch_templates(self, name):
        assert get_stretch_template(name) is not None

    def test_unknown_stretch_template(self):
        assert get_stretch_template("cool down") is None
        assert get_stretch_template(None) is None
