"""Injury text to affected body parts."""

from __future__ import annotations

from collections.abc import Iterable

from coach_engine.catalog.keyword_tables import INJURY_SITE_TABLE
from coach_engine.services.matching import keyword_matches, names_overlap

_INJURY_ROWS = tuple((keywords, parts) for _site, keywords, parts in INJURY_SITE_TABLE)


def map_injury_to_body_parts(description: str | None) -> list[str]:
    """Body parts affected by a free-text injury description.

    Every matching site contributes its parts, in table order. Unrecognized
    text maps to nothing.
    """
    affected: list[str] = []
    for parts in keyword_matches(description, _INJURY_ROWS):
        affected.extend(parts)
    return affected


def injured_body_parts(injuries: Iterable[str] | None) -> set[str]:
    injured: set[str] = set()
    for injury in injuries or ():
        injured.update(part.lower() for part in map_injury_to_body_parts(injury))
    return injured


def has_injury_for_body_parts(
    body_parts: Iterable[str],
    injuries: Iterable[str] | None,
) -> bool:
    """True when any body part matches an injured part (substring either way)."""
    injured = injured_body_parts(injuries)
    if not injured:
        return False
    for part in body_parts:
        lowered = part.lower()
        if lowered in injured:
            return True
        if any(names_overlap(lowered, hurt) for hurt in injured):
            return True
    return False
