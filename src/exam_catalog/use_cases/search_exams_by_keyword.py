from __future__ import annotations

from dataclasses import dataclass

from exam_catalog.domain.errors import ValidationError
from exam_catalog.domain.exam import ExamEntry, matches_keyword
from exam_catalog.ports.exam_repository import ExamRepository

MAX_KEYWORD_RESULTS = 50


@dataclass(frozen=True, slots=True)
class SearchExamsByKeywordRequest:
    keyword: str
    limit: int = MAX_KEYWORD_RESULTS


@dataclass(frozen=True, slots=True)
class SearchExamsByKeywordResponse:
    count: int  # All matches, before the result limit
    results: list[ExamEntry]


class SearchExamsByKeyword:
    """Keyword search across name, description, tags and knowledge points."""

    def __init__(self, exam_repository: ExamRepository) -> None:
        self._repository = exam_repository

    def execute(self, request: SearchExamsByKeywordRequest) -> SearchExamsByKeywordResponse:
        keyword = request.keyword.strip()
        if not keyword:
            raise ValidationError(
                errors=[{"field": "keyword", "message": "Must not be blank", "code": "BLANK"}]
            )

        results = [exam for exam in self._repository.list_exams() if matches_keyword(exam, keyword)]
        return SearchExamsByKeywordResponse(count=len(results), results=results[: request.limit])
