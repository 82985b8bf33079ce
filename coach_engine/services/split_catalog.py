"""Lookups over the static split, session-slot and stretch templates."""

from __future__ import annotations

from coach_engine.catalog.splits import (
    SPLIT_DAY_TEMPLATES,
    SPLIT_TEMPLATES,
    STRETCH_TEMPLATES,
    SessionTemplate,
    SplitTemplate,
)
from coach_engine.core.exceptions import NotFoundError
from coach_engine.models.enums import SplitType
from coach_engine.services.matching import normalize_name


def resolve_split_type(split_type: SplitType | str | None) -> SplitType | None:
    """Enum member for a split type name, or None when absent or unknown."""
    if split_type is None or split_type == "":
        return None
    try:
        return SplitType(split_type)
    except ValueError:
        return None


def find_split_template(split_type: SplitType | str | None) -> SplitTemplate | None:
    resolved = resolve_split_type(split_type)
    return SPLIT_TEMPLATES.get(resolved) if resolved else None


def get_split_template(split_type: SplitType | str) -> SplitTemplate:
    """
    Get a split template by type.

    Raises:
        NotFoundError: If the split type is unknown.
    """
    template = find_split_template(split_type)
    if template is None:
        raise NotFoundError(
            "split",
            f"Unknown split type: {split_type}",
            details={"split_type": str(split_type)},
        )
    return template


def all_split_types() -> list[SplitType]:
    return list(SPLIT_TEMPLATES)


def split_day_name(split_type: SplitType | str, split_day: int) -> str:
    """Display name of a 1-indexed split day, wrapping past the cycle end."""
    return get_split_template(split_type).day_at(split_day).name


def get_split_day_template(day_name: str) -> SessionTemplate | None:
    """Exercise slots for a split day name such as "Push" or "Chest & Back"."""
    return SPLIT_DAY_TEMPLATES.get(normalize_name(day_name))


def get_stretch_template(template_name: str | None) -> SessionTemplate | None:
    return STRETCH_TEMPLATES.get(normalize_name(template_name))
