"""Test suite for single-exam lookups, counters and keyword search."""

from __future__ import annotations

from typing import Callable
from unittest.mock import Mock

import pytest

from exam_catalog.adapters.in_memory_exam_repository import InMemoryExamRepository
from exam_catalog.domain.errors import NotFoundError, ValidationError
from exam_catalog.domain.exam import Counter, ExamEntry
from exam_catalog.ports.exam_repository import ExamRepository
from exam_catalog.use_cases.get_exam_by_id import GetExamById, GetExamByIdRequest
from exam_catalog.use_cases.increment_exam_counter import (
    IncrementExamCounter,
    IncrementExamCounterRequest,
)
from exam_catalog.use_cases.search_exams_by_keyword import (
    SearchExamsByKeyword,
    SearchExamsByKeywordRequest,
)

ExamFactory = Callable[..., ExamEntry]


@pytest.fixture()
def mock_repository() -> Mock:
    return Mock(spec=ExamRepository)


# ==============================================================================
# GetExamById
# ==============================================================================


def test_get_exam_counts_a_view(make_exam: ExamFactory) -> None:
    repository = InMemoryExamRepository([make_exam("exam-1", views=2)])

    result = GetExamById(exam_repository=repository).execute(GetExamByIdRequest("exam-1"))

    assert result.exam.id == "exam-1"
    assert result.exam.views == 3


def test_get_unknown_exam_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.increment.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        GetExamById(exam_repository=mock_repository).execute(GetExamByIdRequest("missing"))

    assert exc_info.value.context["identifier"] == "missing"
    mock_repository.increment.assert_called_once_with("missing", Counter.VIEWS)
    mock_repository.get_by_id.assert_not_called()


# ==============================================================================
# IncrementExamCounter
# ==============================================================================


def test_increment_downloads(make_exam: ExamFactory) -> None:
    repository = InMemoryExamRepository([make_exam("exam-1", downloads=9)])

    result = IncrementExamCounter(exam_repository=repository).execute(
        IncrementExamCounterRequest(exam_id="exam-1", counter=Counter.DOWNLOADS)
    )

    assert result.exam_id == "exam-1"
    assert result.counter is Counter.DOWNLOADS
    assert result.value == 10


def test_increment_unknown_exam_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.increment.return_value = None

    with pytest.raises(NotFoundError):
        IncrementExamCounter(exam_repository=mock_repository).execute(
            IncrementExamCounterRequest(exam_id="missing", counter=Counter.VIEWS)
        )


# ==============================================================================
# SearchExamsByKeyword
# ==============================================================================


def test_keyword_search_limits_results_but_counts_all(make_exam: ExamFactory) -> None:
    repository = InMemoryExamRepository(
        [make_exam(f"exam-{i}", name=f"Mock exam {i}") for i in range(60)]
    )

    result = SearchExamsByKeyword(exam_repository=repository).execute(
        SearchExamsByKeywordRequest(keyword="MOCK")
    )

    assert result.count == 60
    assert len(result.results) == 50
    assert result.results[0].id == "exam-0"


def test_keyword_search_covers_knowledge_points(make_exam: ExamFactory) -> None:
    repository = InMemoryExamRepository(
        [make_exam("a", knowledge_points=("三角函数",)), make_exam("b")]
    )

    result = SearchExamsByKeyword(exam_repository=repository).execute(
        SearchExamsByKeywordRequest(keyword="三角")
    )

    assert [exam.id for exam in result.results] == ["a"]


def test_blank_keyword_is_rejected(mock_repository: Mock) -> None:
    with pytest.raises(ValidationError):
        SearchExamsByKeyword(exam_repository=mock_repository).execute(
            SearchExamsByKeywordRequest(keyword="   ")
        )

    mock_repository.list_exams.assert_not_called()
