"""
Unit tests for dependency wiring.

The repository and file storage are process-wide singletons; use cases are
built per request around them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator
from unittest.mock import Mock

import pytest

from exam_catalog.adapters.json_exam_repository import JsonExamRepository
from exam_catalog.adapters.local_file_storage import LocalFileStorage
from exam_catalog.entrypoints.http.dependencies import (
    get_exam_repository,
    get_file_storage,
    get_search_catalog_use_case,
    get_upload_exam_use_case,
)
from exam_catalog.use_cases.search_exam_catalog import SearchExamCatalog
from exam_catalog.use_cases.upload_exam import UploadExam


@pytest.fixture
def data_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.setenv("EXAM_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("EXAM_METADATA_PATH", raising=False)
    monkeypatch.delenv("EXAM_UPLOAD_DIR", raising=False)
    get_exam_repository.cache_clear()
    get_file_storage.cache_clear()
    yield tmp_path
    get_exam_repository.cache_clear()
    get_file_storage.cache_clear()


def test_repository_is_a_cached_json_repository(data_env: Path) -> None:
    repository = get_exam_repository()

    assert isinstance(repository, JsonExamRepository)
    assert repository.path == data_env / "metadata.json"
    assert get_exam_repository() is repository


def test_file_storage_creates_upload_directories(data_env: Path) -> None:
    storage = get_file_storage()

    assert isinstance(storage, LocalFileStorage)
    assert (data_env / "uploads" / "files").is_dir()
    assert (data_env / "uploads" / "previews").is_dir()
    assert get_file_storage() is storage


def test_use_cases_are_built_per_call() -> None:
    repository = Mock()

    first = get_search_catalog_use_case(repository=repository)
    second = get_search_catalog_use_case(repository=repository)

    assert isinstance(first, SearchExamCatalog)
    assert first is not second


def test_upload_use_case_wiring() -> None:
    use_case = get_upload_exam_use_case(repository=Mock(), storage=Mock())

    assert isinstance(use_case, UploadExam)
