from __future__ import annotations

from collections.abc import Iterable, Set
from dataclasses import dataclass, replace

from exam_catalog.domain.exam import ExamEntry


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """
    The user's current constraints.

    Empty strings mean "unset". ``search`` is matched case-insensitively as a
    substring; the other text fields are exact, case-sensitive matches.
    """

    search: str = ""
    subject: str = ""
    difficulty: str = ""
    source: str = ""
    grade: str = ""
    favorites_only: bool = False

    def with_changes(self, **changes: object) -> FilterSpec:
        return replace(self, **changes)  # type: ignore[arg-type]

    @property
    def is_empty(self) -> bool:
        return self == FilterSpec()


def build_haystack(entry: ExamEntry) -> str:
    """Lowercase text searched by FilterSpec.search: name, description, subject and tags."""
    return " ".join(
        [entry.name, entry.description, entry.subject, " ".join(entry.tags)]
    ).lower()


def matches(entry: ExamEntry, favorites: Set[str], spec: FilterSpec) -> bool:
    if spec.search and spec.search.lower() not in build_haystack(entry):
        return False
    if spec.subject and entry.subject != spec.subject:
        return False
    if spec.difficulty and entry.difficulty != spec.difficulty:
        return False
    if spec.source and entry.source != spec.source:
        return False
    if spec.grade and entry.grade != spec.grade:
        return False
    if spec.favorites_only and entry.id not in favorites:
        return False
    return True


def compute_view(
    entries: Iterable[ExamEntry], favorites: Set[str], spec: FilterSpec
) -> list[ExamEntry]:
    """
    Filter entries by spec and order them favorites-first, then by downloads descending.

    sorted() is stable, so ties keep their collection order.
    """
    matching = [entry for entry in entries if matches(entry, favorites, spec)]
    return sorted(matching, key=lambda entry: (entry.id not in favorites, -entry.downloads))
