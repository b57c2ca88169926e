from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

from exam_catalog.domain.exam import CatalogStats, Counter, ExamEntry
from exam_catalog.ports.exam_repository import ExamRepository


class InMemoryExamRepository(ExamRepository):
    """
    Canonical contract implementation for tests.

    - Stores entries newest-first (add() prepends)
    - Recomputes stats after every mutation
    """

    def __init__(self, exams: list[ExamEntry] | None = None) -> None:
        self._exams = list(exams or [])
        self._stats = CatalogStats.from_entries(self._exams)

    def list_exams(self) -> list[ExamEntry]:
        return list(self._exams)

    def get_by_id(self, exam_id: str) -> ExamEntry | None:
        return next((exam for exam in self._exams if exam.id == exam_id), None)

    def add(self, entry: ExamEntry) -> CatalogStats:
        self._exams.insert(0, entry)
        return self._refresh_stats()

    def increment(self, exam_id: str, counter: Counter) -> int | None:
        for position, exam in enumerate(self._exams):
            if exam.id == exam_id:
                value = getattr(exam, counter.value) + 1
                self._exams[position] = replace(exam, **{counter.value: value})
                self._refresh_stats()
                return value
        return None

    def stats(self) -> CatalogStats:
        return self._stats

    def _refresh_stats(self) -> CatalogStats:
        self._stats = CatalogStats.from_entries(self._exams, last_updated=datetime.now(timezone.utc))
        return self._stats
