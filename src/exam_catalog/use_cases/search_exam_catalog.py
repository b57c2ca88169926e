from __future__ import annotations

import math
from dataclasses import dataclass

from exam_catalog.domain.exam import CatalogFilters, ExamEntry, Paging, matches_filters
from exam_catalog.ports.exam_repository import ExamRepository


@dataclass(frozen=True, slots=True)
class SearchExamCatalogRequest:
    filters: CatalogFilters
    paging: Paging


@dataclass(frozen=True, slots=True)
class SearchExamCatalogResponse:
    exams: list[ExamEntry]
    total_count: int  # Total matching exams before paging
    total_pages: int


class SearchExamCatalog:
    """
    Server-side catalog listing with filters and pagination.

    Filters use AND semantics and catalog order is preserved (newest first).
    Unlike the browsing client, the requested page is not clamped: a page past
    the end returns no exams, and an empty result reports zero pages.
    """

    def __init__(self, exam_repository: ExamRepository) -> None:
        self._repository = exam_repository

    def execute(self, request: SearchExamCatalogRequest) -> SearchExamCatalogResponse:
        """
        Execute catalog search.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        request.paging.validate()

        matches = [
            exam for exam in self._repository.list_exams() if matches_filters(exam, request.filters)
        ]
        start = request.paging.offset
        end = start + request.paging.limit

        return SearchExamCatalogResponse(
            exams=matches[start:end],
            total_count=len(matches),
            total_pages=math.ceil(len(matches) / request.paging.limit),
        )
