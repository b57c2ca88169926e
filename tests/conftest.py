from __future__ import annotations

from typing import Any, Callable

import pytest

from exam_catalog.domain.exam import ExamEntry

ExamFactory = Callable[..., ExamEntry]


@pytest.fixture
def make_exam() -> ExamFactory:
    """Factory for exam entries with realistic defaults; keyword arguments override fields."""

    def factory(exam_id: str = "exam-1", **overrides: Any) -> ExamEntry:
        fields: dict[str, Any] = {
            "name": f"试卷 {exam_id}",
            "description": "",
            "subject": "数学",
            "difficulty": "中等",
            "grade": "高三",
            "source": "内部上传",
            "views": 0,
            "downloads": 0,
            "file_url": f"./uploads/files/{exam_id}.pdf",
            "file_size": 1024,
            "file_format": "PDF",
        }
        fields.update(overrides)
        return ExamEntry(id=exam_id, **fields)

    return factory
