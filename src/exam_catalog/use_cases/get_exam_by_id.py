"""Get exam by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from exam_catalog.domain.errors import NotFoundError
from exam_catalog.domain.exam import Counter, ExamEntry
from exam_catalog.ports.exam_repository import ExamRepository


@dataclass(frozen=True, slots=True)
class GetExamByIdRequest:
    exam_id: str


@dataclass(frozen=True, slots=True)
class GetExamByIdResponse:
    exam: ExamEntry


class GetExamById:
    """
    Retrieve a single exam, counting the lookup as a view.

    Raises NotFoundError if the exam doesn't exist.
    """

    def __init__(self, exam_repository: ExamRepository) -> None:
        self._repository = exam_repository

    def execute(self, request: GetExamByIdRequest) -> GetExamByIdResponse:
        if self._repository.increment(request.exam_id, Counter.VIEWS) is None:
            raise NotFoundError(resource="Exam", identifier=request.exam_id)

        exam = self._repository.get_by_id(request.exam_id)
        if exam is None:
            raise NotFoundError(resource="Exam", identifier=request.exam_id)

        return GetExamByIdResponse(exam=exam)
