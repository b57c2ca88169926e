from __future__ import annotations

from dataclasses import dataclass

from exam_catalog.domain.exam import CatalogStats, ExamEntry
from exam_catalog.ports.exam_repository import ExamRepository

RECENT_UPLOADS = 5


@dataclass(frozen=True, slots=True)
class GetCatalogResponse:
    exams: list[ExamEntry]
    stats: CatalogStats


@dataclass(frozen=True, slots=True)
class GetCatalogStatsResponse:
    stats: CatalogStats
    recent_uploads: list[ExamEntry]


@dataclass(frozen=True, slots=True)
class SubjectCount:
    name: str
    count: int


class GetCatalog:
    """Full catalog document, as consumed by browsing clients."""

    def __init__(self, exam_repository: ExamRepository) -> None:
        self._repository = exam_repository

    def execute(self) -> GetCatalogResponse:
        return GetCatalogResponse(
            exams=self._repository.list_exams(),
            stats=self._repository.stats(),
        )


class GetCatalogStats:
    """Aggregate statistics plus the most recent uploads (catalog is newest-first)."""

    def __init__(self, exam_repository: ExamRepository) -> None:
        self._repository = exam_repository

    def execute(self) -> GetCatalogStatsResponse:
        return GetCatalogStatsResponse(
            stats=self._repository.stats(),
            recent_uploads=self._repository.list_exams()[:RECENT_UPLOADS],
        )


class ListSubjects:
    """Per-subject entry counts in order of first appearance."""

    def __init__(self, exam_repository: ExamRepository) -> None:
        self._repository = exam_repository

    def execute(self) -> list[SubjectCount]:
        counts: dict[str, int] = {}
        for exam in self._repository.list_exams():
            if exam.subject:
                counts[exam.subject] = counts.get(exam.subject, 0) + 1
        return [SubjectCount(name=name, count=count) for name, count in counts.items()]
