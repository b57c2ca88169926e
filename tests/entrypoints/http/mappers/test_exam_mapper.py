from __future__ import annotations

from exam_catalog.domain.exam import CatalogFilters, ExamEntry, Paging
from exam_catalog.entrypoints.http.dtos.exams import ExamsQueryDTO
from exam_catalog.entrypoints.http.mappers.exam_mapper import ExamMapper
from exam_catalog.use_cases.search_exam_catalog import SearchExamCatalogResponse


def test_to_domain_request_treats_blank_filters_as_unset() -> None:
    request = ExamMapper.to_domain_request(
        ExamsQueryDTO(subject="", grade="高三", search="", page=2, limit=5)
    )

    assert request.filters == CatalogFilters(grade="高三")
    assert request.paging == Paging(page=2, limit=5)


def test_to_exam_response_serializes_camel_case() -> None:
    entry = ExamEntry(
        id="exam-1",
        name="Final",
        preview_images=("./uploads/previews/a.png",),
        file_size_formatted="1 MB",
        is_original=True,
    )

    document = ExamMapper.to_exam_response(entry).model_dump(by_alias=True)

    assert document["previewImages"] == ["./uploads/previews/a.png"]
    assert document["fileSizeFormatted"] == "1 MB"
    assert document["isOriginal"] is True
    assert document["grade"] is None


def test_to_list_response_echoes_paging() -> None:
    result = SearchExamCatalogResponse(exams=[ExamEntry(id="a")], total_count=41, total_pages=3)

    response = ExamMapper.to_list_response(result, page=2, limit=20)

    document = response.model_dump(by_alias=True, include={"total", "page", "limit", "total_pages"})

    assert document == {
        "total": 41,
        "page": 2,
        "limit": 20,
        "totalPages": 3,
    }
