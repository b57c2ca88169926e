from fastapi import APIRouter, Depends

from exam_catalog.entrypoints.http.dependencies import (
    get_catalog_stats_use_case,
    get_catalog_use_case,
    get_list_subjects_use_case,
)
from exam_catalog.entrypoints.http.dtos.stats import (
    CatalogResponseDTO,
    StatsResponseDTO,
    SubjectCountDTO,
)
from exam_catalog.entrypoints.http.mappers.exam_mapper import ExamMapper
from exam_catalog.use_cases.get_catalog import GetCatalog, GetCatalogStats, ListSubjects

router = APIRouter(tags=["Catalog"])


@router.get(
    "/catalog",
    response_model=CatalogResponseDTO,
    summary="Full catalog document",
    description="""
    The complete catalog as loaded by browsing clients:
    `{exams, lastUpdated, stats}`, newest uploads first.
    """,
)
def get_catalog(use_case: GetCatalog = Depends(get_catalog_use_case)) -> CatalogResponseDTO:
    return ExamMapper.to_catalog_response(use_case.execute())


@router.get(
    "/stats",
    response_model=StatsResponseDTO,
    summary="Catalog statistics",
)
def get_stats(use_case: GetCatalogStats = Depends(get_catalog_stats_use_case)) -> StatsResponseDTO:
    return ExamMapper.to_stats_response(use_case.execute())


@router.get(
    "/subjects",
    response_model=list[SubjectCountDTO],
    summary="Exam counts per subject",
)
def list_subjects(
    use_case: ListSubjects = Depends(get_list_subjects_use_case),
) -> list[SubjectCountDTO]:
    return ExamMapper.to_subjects_response(use_case.execute())
