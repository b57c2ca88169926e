from __future__ import annotations

from abc import ABC, abstractmethod

from exam_catalog.domain.exam import CatalogStats, Counter, ExamEntry


class ExamRepository(ABC):
    """
    Port for the server-side catalog.

    Entries are kept newest-first. Every mutating call re-derives and
    persists the aggregate CatalogStats as a side effect.
    """

    @abstractmethod
    def list_exams(self) -> list[ExamEntry]:
        """Return all entries in catalog order."""
        ...

    @abstractmethod
    def get_by_id(self, exam_id: str) -> ExamEntry | None: ...

    @abstractmethod
    def add(self, entry: ExamEntry) -> CatalogStats:
        """Insert entry at the front of the catalog and return the new stats."""
        ...

    @abstractmethod
    def increment(self, exam_id: str, counter: Counter) -> int | None:
        """
        Increment one counter of one entry.

        Returns:
            The new counter value, or None if exam_id is unknown
        """
        ...

    @abstractmethod
    def stats(self) -> CatalogStats: ...
