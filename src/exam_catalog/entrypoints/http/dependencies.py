"""
Dependency injection for FastAPI routes.

The catalog file and the upload directory are process-wide resources, so
their adapters are cached singletons. Use cases are cheap and built per request.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from exam_catalog.adapters.json_exam_repository import JsonExamRepository
from exam_catalog.adapters.local_file_storage import LocalFileStorage
from exam_catalog.infra.config import metadata_path, upload_dir
from exam_catalog.ports.exam_repository import ExamRepository
from exam_catalog.ports.file_storage import FileStorage
from exam_catalog.use_cases.get_catalog import GetCatalog, GetCatalogStats, ListSubjects
from exam_catalog.use_cases.get_exam_by_id import GetExamById
from exam_catalog.use_cases.increment_exam_counter import IncrementExamCounter
from exam_catalog.use_cases.search_exam_catalog import SearchExamCatalog
from exam_catalog.use_cases.search_exams_by_keyword import SearchExamsByKeyword
from exam_catalog.use_cases.upload_exam import UploadExam


@lru_cache
def get_exam_repository() -> ExamRepository:
    """
    Shared repository for the catalog file.

    A single instance is required: it owns the lock that serializes writes.
    """
    return JsonExamRepository(metadata_path())


@lru_cache
def get_file_storage() -> FileStorage:
    storage = LocalFileStorage(upload_dir())
    storage.ensure_directories()
    return storage


def get_search_catalog_use_case(
    repository: ExamRepository = Depends(get_exam_repository),
) -> SearchExamCatalog:
    return SearchExamCatalog(exam_repository=repository)


def get_keyword_search_use_case(
    repository: ExamRepository = Depends(get_exam_repository),
) -> SearchExamsByKeyword:
    return SearchExamsByKeyword(exam_repository=repository)


def get_exam_by_id_use_case(
    repository: ExamRepository = Depends(get_exam_repository),
) -> GetExamById:
    return GetExamById(exam_repository=repository)


def get_increment_counter_use_case(
    repository: ExamRepository = Depends(get_exam_repository),
) -> IncrementExamCounter:
    return IncrementExamCounter(exam_repository=repository)


def get_catalog_use_case(
    repository: ExamRepository = Depends(get_exam_repository),
) -> GetCatalog:
    return GetCatalog(exam_repository=repository)


def get_catalog_stats_use_case(
    repository: ExamRepository = Depends(get_exam_repository),
) -> GetCatalogStats:
    return GetCatalogStats(exam_repository=repository)


def get_list_subjects_use_case(
    repository: ExamRepository = Depends(get_exam_repository),
) -> ListSubjects:
    return ListSubjects(exam_repository=repository)


def get_upload_exam_use_case(
    repository: ExamRepository = Depends(get_exam_repository),
    storage: FileStorage = Depends(get_file_storage),
) -> UploadExam:
    """
    Factory for the upload use case.

    Args:
        repository: Catalog repository (shared singleton)
        storage: Upload directory storage (shared singleton)

    Returns:
        UploadExam: Configured use case with default upload limits
    """
    return UploadExam(exam_repository=repository, file_storage=storage)
