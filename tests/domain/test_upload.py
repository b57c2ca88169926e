from __future__ import annotations

import io

import pytest

from exam_catalog.domain.upload import (
    ExamSubmission,
    UploadedFile,
    UploadLimits,
    format_file_size,
)


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 Bytes"),
        (512, "512 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1024 * 1024, "1 MB"),
        (int(2.25 * 1024 * 1024), "2.25 MB"),
        (3 * 1024**3, "3 GB"),
    ],
)
def test_format_file_size(size: int, expected: str) -> None:
    assert format_file_size(size) == expected


def test_uploaded_file_extension_is_lowercased() -> None:
    upload = UploadedFile(field="examFile", filename="Final.PDF", stream=io.BytesIO())

    assert upload.extension == ".pdf"


def test_uploaded_file_without_extension() -> None:
    upload = UploadedFile(field="examFile", filename="README", stream=io.BytesIO())

    assert upload.extension == ""


def test_submission_defaults() -> None:
    submission = ExamSubmission()

    assert submission.name == "未命名试卷"
    assert submission.subject == "其他"
    assert submission.difficulty == "中等"
    assert submission.source == "内部上传"
    assert submission.grade == "高三"
    assert submission.author == "管理员"
    assert submission.page_count == 1
    assert submission.recommended_time == 60
    assert submission.tags == []


def test_upload_limits_defaults() -> None:
    limits = UploadLimits()

    assert limits.max_file_size == 50 * 1024 * 1024
    assert limits.max_files == 6
    assert limits.max_previews == 5
