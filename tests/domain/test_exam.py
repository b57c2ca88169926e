from __future__ import annotations

from typing import Callable

import pytest

from exam_catalog.domain.exam import (
    CatalogFilters,
    CatalogStats,
    ExamEntry,
    Paging,
    PagingValidationError,
    matches_filters,
    matches_keyword,
)


# ==============================================================================
# Paging
# ==============================================================================


def test_paging_defaults_are_valid() -> None:
    paging = Paging()

    paging.validate()

    assert paging.page == 1
    assert paging.limit == 20
    assert paging.offset == 0


def test_paging_offset_is_derived_from_page_and_limit() -> None:
    assert Paging(page=3, limit=10).offset == 20


@pytest.mark.parametrize(
    ("page", "limit", "message"),
    [
        (0, 20, "page must be >= 1"),
        (1, 0, "limit must be > 0"),
        (1, 201, "limit must be <= 200"),
    ],
)
def test_paging_rejects_out_of_range_values(page: int, limit: int, message: str) -> None:
    with pytest.raises(PagingValidationError, match=message):
        Paging(page=page, limit=limit).validate()


# ==============================================================================
# Stats
# ==============================================================================


def test_stats_from_entries_totals_counts_and_subjects(
    make_exam: Callable[..., ExamEntry],
) -> None:
    entries = [
        make_exam("a", subject="数学", views=10, downloads=2),
        make_exam("b", subject="英语", views=5, downloads=1),
        make_exam("c", subject="数学", views=1, downloads=0),
        make_exam("d", subject="", views=0, downloads=0),
    ]

    stats = CatalogStats.from_entries(entries)

    assert stats.total_exams == 4
    assert stats.total_views == 16
    assert stats.total_downloads == 3
    assert stats.subjects == {"数学": 2, "英语": 1}
    assert stats.last_updated is None


def test_stats_of_empty_catalog() -> None:
    stats = CatalogStats.from_entries([])

    assert stats == CatalogStats()


# ==============================================================================
# Server-side predicates
# ==============================================================================


def test_matches_filters_uses_and_semantics(make_exam: Callable[..., ExamEntry]) -> None:
    entry = make_exam(subject="数学", grade="高二", year=2024)

    assert matches_filters(entry, CatalogFilters(subject="数学", grade="高二", year=2024))
    assert not matches_filters(entry, CatalogFilters(subject="数学", grade="高三"))
    assert not matches_filters(entry, CatalogFilters(year=2023))


def test_matches_filters_search_covers_name_description_and_tags(
    make_exam: Callable[..., ExamEntry],
) -> None:
    entry = make_exam(name="Midterm", description="Algebra review", tags=("Functions",))

    assert matches_filters(entry, CatalogFilters(search="midterm"))
    assert matches_filters(entry, CatalogFilters(search="ALGEBRA"))
    assert matches_filters(entry, CatalogFilters(search="function"))
    assert not matches_filters(entry, CatalogFilters(search="geometry"))


def test_matches_filters_search_ignores_knowledge_points(
    make_exam: Callable[..., ExamEntry],
) -> None:
    entry = make_exam(name="Final", knowledge_points=("导数",))

    assert not matches_filters(entry, CatalogFilters(search="导数"))
    assert matches_keyword(entry, "导数")


def test_empty_filters_match_everything(make_exam: Callable[..., ExamEntry]) -> None:
    assert matches_filters(make_exam(), CatalogFilters())


def test_matches_keyword_is_case_insensitive(make_exam: Callable[..., ExamEntry]) -> None:
    entry = make_exam(name="Physics Final", tags=("Optics",))

    assert matches_keyword(entry, "physics")
    assert matches_keyword(entry, "OPTICS")
    assert not matches_keyword(entry, "chemistry")


def test_exam_entry_only_requires_id() -> None:
    entry = ExamEntry(id="exam-1")

    assert entry.name == ""
    assert entry.grade is None
    assert entry.tags == ()
    assert entry.downloads == 0
