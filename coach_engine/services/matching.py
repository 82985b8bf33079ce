"""Name normalization and fuzzy matching shared by the lookup services."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def normalize_name(name: str | None) -> str:
    """Lower-case, trim and collapse inner whitespace."""
    if not name:
        return ""
    return " ".join(name.lower().split())


def names_overlap(a: str, b: str) -> bool:
    """True when either name contains the other (case-insensitive).

    Empty names never match anything.
    """
    a, b = a.lower(), b.lower()
    if not a or not b:
        return False
    return a in b or b in a


def any_overlap(left: Iterable[str], right: Iterable[str]) -> bool:
    right = list(right)
    return any(names_overlap(l, r) for l in left for r in right)


def keyword_matches(
    text: str | None,
    table: Iterable[tuple[tuple[str, ...], T]],
) -> list[T]:
    """Results of every table row with a keyword contained in ``text``, in table order."""
    lowered = (text or "").lower()
    if not lowered:
        return []
    return [result for keywords, result in table if any(k in lowered for k in keywords)]


def first_keyword_match(
    text: str | None,
    table: Iterable[tuple[tuple[str, ...], T]],
) -> T | None:
    matches = keyword_matches(text, table)
    return matches[0] if matches else None
