from __future__ import annotations

from exam_catalog.domain.exam import CatalogFilters, CatalogStats, ExamEntry, Paging
from exam_catalog.entrypoints.http.dtos.exams import (
    ExamListResponseDTO,
    ExamResponseDTO,
    ExamsQueryDTO,
    KeywordSearchResponseDTO,
)
from exam_catalog.entrypoints.http.dtos.stats import (
    CatalogResponseDTO,
    RecentUploadDTO,
    StatsDTO,
    StatsResponseDTO,
    SubjectCountDTO,
)
from exam_catalog.use_cases.get_catalog import (
    GetCatalogResponse,
    GetCatalogStatsResponse,
    SubjectCount,
)
from exam_catalog.use_cases.search_exam_catalog import (
    SearchExamCatalogRequest,
    SearchExamCatalogResponse,
)
from exam_catalog.use_cases.search_exams_by_keyword import SearchExamsByKeywordResponse


class ExamMapper:
    """Maps between REST DTOs and domain models for catalog reads."""

    @staticmethod
    def to_domain_request(dto: ExamsQueryDTO) -> SearchExamCatalogRequest:
        """
        Builds the listing request from query params.

        Blank text filters are treated as unset.
        """
        return SearchExamCatalogRequest(
            filters=CatalogFilters(
                subject=dto.subject or None,
                grade=dto.grade or None,
                year=dto.year,
                search=dto.search or None,
            ),
            paging=Paging(page=dto.page, limit=dto.limit),
        )

    @staticmethod
    def to_exam_response(exam: ExamEntry) -> ExamResponseDTO:
        return ExamResponseDTO(
            id=exam.id,
            name=exam.name,
            description=exam.description,
            subject=exam.subject,
            difficulty=exam.difficulty,
            grade=exam.grade,
            source=exam.source,
            views=exam.views,
            downloads=exam.downloads,
            tags=list(exam.tags),
            preview_images=list(exam.preview_images),
            file_url=exam.file_url,
            file_size=exam.file_size,
            file_size_formatted=exam.file_size_formatted,
            file_format=exam.file_format,
            year=exam.year,
            author=exam.author,
            page_count=exam.page_count,
            recommended_time=exam.recommended_time,
            upload_date=exam.upload_date,
            upload_timestamp=exam.upload_timestamp,
            last_modified=exam.last_modified,
            knowledge_points=list(exam.knowledge_points),
            question_count=exam.question_count,
            total_score=exam.total_score,
            has_answer=exam.has_answer,
            answer_included=exam.answer_included,
            is_original=exam.is_original,
            region=exam.region,
            remarks=exam.remarks,
        )

    @staticmethod
    def to_list_response(
        result: SearchExamCatalogResponse,
        page: int,
        limit: int,
    ) -> ExamListResponseDTO:
        """Echoes page and limit from the request alongside the totals."""
        return ExamListResponseDTO(
            total=result.total_count,
            page=page,
            limit=limit,
            total_pages=result.total_pages,
            exams=[ExamMapper.to_exam_response(exam) for exam in result.exams],
        )

    @staticmethod
    def to_keyword_response(result: SearchExamsByKeywordResponse) -> KeywordSearchResponseDTO:
        return KeywordSearchResponseDTO(
            count=result.count,
            results=[ExamMapper.to_exam_response(exam) for exam in result.results],
        )

    @staticmethod
    def to_stats(stats: CatalogStats) -> StatsDTO:
        return StatsDTO(
            total_exams=stats.total_exams,
            total_views=stats.total_views,
            total_downloads=stats.total_downloads,
            subjects=dict(stats.subjects),
            last_updated=stats.last_updated,
        )

    @staticmethod
    def to_stats_response(result: GetCatalogStatsResponse) -> StatsResponseDTO:
        return StatsResponseDTO(
            stats=ExamMapper.to_stats(result.stats),
            recent_uploads=[
                RecentUploadDTO(
                    id=exam.id,
                    name=exam.name,
                    subject=exam.subject,
                    upload_date=exam.upload_date,
                )
                for exam in result.recent_uploads
            ],
        )

    @staticmethod
    def to_catalog_response(result: GetCatalogResponse) -> CatalogResponseDTO:
        return CatalogResponseDTO(
            exams=[ExamMapper.to_exam_response(exam) for exam in result.exams],
            last_updated=result.stats.last_updated,
            stats=ExamMapper.to_stats(result.stats),
        )

    @staticmethod
    def to_subjects_response(subjects: list[SubjectCount]) -> list[SubjectCountDTO]:
        return [SubjectCountDTO(name=subject.name, count=subject.count) for subject in subjects]
