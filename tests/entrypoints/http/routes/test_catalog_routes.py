from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from exam_catalog.adapters.exam_record import parse_catalog_payload
from exam_catalog.adapters.in_memory_exam_repository import InMemoryExamRepository
from exam_catalog.domain.exam import CatalogStats, ExamEntry
from exam_catalog.entrypoints.http.dependencies import (
    get_catalog_use_case,
    get_exam_repository,
)
from exam_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from exam_catalog.entrypoints.http.routes.catalog import router
from exam_catalog.use_cases.get_catalog import GetCatalogResponse

ExamFactory = Callable[..., ExamEntry]


@pytest.fixture
def repository(make_exam: ExamFactory) -> InMemoryExamRepository:
    repository = InMemoryExamRepository()
    for i, subject in enumerate(["数学", "英语", "数学", "物理", "数学", "英语", "化学"]):
        repository.add(make_exam(f"exam-{i}", subject=subject, views=i, upload_date="2024-05-01"))
    return repository


@pytest.fixture
def app(repository: InMemoryExamRepository) -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/api")
    test_app.dependency_overrides[get_exam_repository] = lambda: repository
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def test_catalog_document(client: TestClient) -> None:
    response = client.get("/api/catalog")

    assert response.status_code == 200
    data = response.json()
    assert [exam["id"] for exam in data["exams"]][:2] == ["exam-6", "exam-5"]
    assert data["stats"]["totalExams"] == 7
    assert data["stats"]["totalViews"] == 21
    assert data["lastUpdated"] is not None


def test_catalog_document_is_readable_by_catalog_parser(app: FastAPI, client: TestClient) -> None:
    mock_use_case = Mock()
    mock_use_case.execute.return_value = GetCatalogResponse(
        exams=[ExamEntry(id="only", tags=("t",))],
        stats=CatalogStats(total_exams=1, last_updated=datetime(2024, 1, 1, tzinfo=timezone.utc)),
    )
    app.dependency_overrides[get_catalog_use_case] = lambda: mock_use_case

    payload = parse_catalog_payload(client.get("/api/catalog").json())

    assert payload.entries == [ExamEntry(id="only", tags=("t",))]
    assert payload.last_updated == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_stats(client: TestClient) -> None:
    data = client.get("/api/stats").json()

    assert data["stats"]["subjects"] == {"数学": 3, "英语": 2, "物理": 1, "化学": 1}
    assert [upload["id"] for upload in data["recentUploads"]] == [
        "exam-6",
        "exam-5",
        "exam-4",
        "exam-3",
        "exam-2",
    ]
    assert data["recentUploads"][0] == {
        "id": "exam-6",
        "name": "试卷 exam-6",
        "subject": "化学",
        "uploadDate": "2024-05-01",
    }


def test_subjects(client: TestClient) -> None:
    data = client.get("/api/subjects").json()

    assert data == [
        {"name": "化学", "count": 1},
        {"name": "英语", "count": 2},
        {"name": "数学", "count": 3},
        {"name": "物理", "count": 1},
    ]
