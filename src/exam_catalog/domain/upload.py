from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import BinaryIO

EXAM_FILE_FIELD = "examFile"
PREVIEWS_FIELD = "previews"

ALLOWED_EXTENSIONS: dict[str, tuple[str, ...]] = {
    EXAM_FILE_FIELD: (".pdf", ".doc", ".docx"),
    PREVIEWS_FIELD: (".jpg", ".jpeg", ".png", ".gif", ".webp"),
}

MAX_FILE_SIZE = 50 * 1024 * 1024  # 50MB per file
MAX_FILES = 6  # 1 exam file + up to 5 previews
MAX_PREVIEWS = 5


@dataclass(frozen=True, slots=True)
class UploadLimits:
    max_file_size: int = MAX_FILE_SIZE
    max_files: int = MAX_FILES
    max_previews: int = MAX_PREVIEWS


@dataclass(frozen=True, slots=True)
class UploadedFile:
    """A file received from a client, not yet written to storage."""

    field: str
    filename: str
    stream: BinaryIO

    @property
    def extension(self) -> str:
        return PurePath(self.filename).suffix.lower()


@dataclass(frozen=True, slots=True)
class StoredFile:
    """A file written to storage."""

    field: str
    original_name: str
    stored_name: str
    url: str
    size: int


@dataclass(frozen=True, slots=True)
class ExamSubmission:
    """Metadata fields submitted alongside an upload, already type-converted."""

    name: str = "未命名试卷"
    description: str = ""
    subject: str = "其他"
    difficulty: str = "中等"
    source: str = "内部上传"
    year: int | None = None
    grade: str = "高三"
    author: str = "管理员"
    page_count: int = 1
    question_count: int | None = None
    total_score: int | None = None
    has_answer: bool = False
    answer_included: bool = False
    is_original: bool = False
    recommended_time: int = 60
    region: str = ""
    remarks: str = ""
    tags: list[str] = field(default_factory=list)
    knowledge_points: list[str] = field(default_factory=list)


def format_file_size(size: int) -> str:
    """Human readable size using 1024-based units, e.g. ``1.5 MB``."""
    if size <= 0:
        return "0 Bytes"

    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1

    return f"{round(value, 2):g} {units[index]}"
