from __future__ import annotations

from dataclasses import dataclass

from exam_catalog.domain.errors import NotFoundError
from exam_catalog.domain.exam import Counter
from exam_catalog.ports.exam_repository import ExamRepository


@dataclass(frozen=True, slots=True)
class IncrementExamCounterRequest:
    exam_id: str
    counter: Counter


@dataclass(frozen=True, slots=True)
class IncrementExamCounterResponse:
    exam_id: str
    counter: Counter
    value: int


class IncrementExamCounter:
    def __init__(self, exam_repository: ExamRepository) -> None:
        self._repository = exam_repository

    def execute(self, request: IncrementExamCounterRequest) -> IncrementExamCounterResponse:
        """
        Raises:
            NotFoundError: If the exam id is unknown
        """
        value = self._repository.increment(request.exam_id, request.counter)
        if value is None:
            raise NotFoundError(resource="Exam", identifier=request.exam_id)

        return IncrementExamCounterResponse(
            exam_id=request.exam_id,
            counter=request.counter,
            value=value,
        )
