"""Upload exam use case."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Callable

from exam_catalog.domain.errors import FileTypeError, MissingFileError, TooManyFilesError
from exam_catalog.domain.exam import CatalogStats, ExamEntry
from exam_catalog.domain.upload import (
    ALLOWED_EXTENSIONS,
    EXAM_FILE_FIELD,
    PREVIEWS_FIELD,
    ExamSubmission,
    StoredFile,
    UploadedFile,
    UploadLimits,
    format_file_size,
)
from exam_catalog.ports.exam_repository import ExamRepository
from exam_catalog.ports.file_storage import FileStorage

logger = logging.getLogger(__name__)


def new_exam_id() -> str:
    return f"exam-{str(uuid.uuid4())[:12]}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class UploadExamRequest:
    submission: ExamSubmission
    exam_file: UploadedFile | None
    previews: list[UploadedFile] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class UploadExamResponse:
    exam: ExamEntry
    stats: CatalogStats


class UploadExam:
    """
    Store an exam document with its previews and prepend a new catalog entry.

    Responsibilities:
    - Reject too many files, a missing exam file, or disallowed extensions
      before anything is written
    - Delegate writing (and the per-file size limit) to FileStorage
    - Remove every file already stored for the request if any later step fails
    """

    def __init__(
        self,
        exam_repository: ExamRepository,
        file_storage: FileStorage,
        limits: UploadLimits | None = None,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = new_exam_id,
    ) -> None:
        self._repository = exam_repository
        self._storage = file_storage
        self._limits = limits or UploadLimits()
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, request: UploadExamRequest) -> UploadExamResponse:
        """
        Raises:
            TooManyFilesError: More than the allowed previews or files in total
            MissingFileError: No exam file was submitted
            FileTypeError: A file's extension is not allowed for its field
            FileTooLargeError: A file exceeds the per-file size limit
        """
        exam_upload = self._validate(request)

        stored: list[StoredFile] = []
        try:
            exam_file = self._storage.save(exam_upload, self._limits.max_file_size)
            stored.append(exam_file)
            for preview in request.previews:
                stored.append(self._storage.save(preview, self._limits.max_file_size))

            entry = self._build_entry(request.submission, exam_file, stored[1:])
            stats = self._repository.add(entry)
        except Exception:
            for item in stored:
                self._storage.delete(item)
            logger.info("Upload rolled back", extra={"removed_files": len(stored)})
            raise

        logger.info(
            "Exam uploaded",
            extra={"exam_id": entry.id, "subject": entry.subject, "previews": len(stored) - 1},
        )
        return UploadExamResponse(exam=entry, stats=stats)

    def _validate(self, request: UploadExamRequest) -> UploadedFile:
        if len(request.previews) > self._limits.max_previews:
            raise TooManyFilesError(PREVIEWS_FIELD, len(request.previews), self._limits.max_previews)

        total = len(request.previews) + (1 if request.exam_file is not None else 0)
        if total > self._limits.max_files:
            raise TooManyFilesError("files", total, self._limits.max_files)

        if request.exam_file is None:
            raise MissingFileError(EXAM_FILE_FIELD)

        for upload in [request.exam_file, *request.previews]:
            allowed = ALLOWED_EXTENSIONS.get(upload.field, ())
            if allowed and upload.extension not in allowed:
                raise FileTypeError(upload.field, upload.filename, list(allowed))

        return request.exam_file

    def _build_entry(
        self,
        submission: ExamSubmission,
        exam_file: StoredFile,
        previews: list[StoredFile],
    ) -> ExamEntry:
        now = self._clock()
        return ExamEntry(
            id=self._id_factory(),
            name=submission.name,
            description=submission.description,
            subject=submission.subject,
            difficulty=submission.difficulty,
            grade=submission.grade,
            source=submission.source,
            views=0,
            downloads=0,
            tags=tuple(submission.tags),
            preview_images=tuple(preview.url for preview in previews),
            file_url=exam_file.url,
            file_size=exam_file.size,
            file_size_formatted=format_file_size(exam_file.size),
            file_format=PurePath(exam_file.original_name).suffix.lstrip(".").upper(),
            year=submission.year or now.year,
            author=submission.author,
            page_count=submission.page_count,
            recommended_time=submission.recommended_time,
            upload_date=now.date().isoformat(),
            upload_timestamp=int(now.timestamp() * 1000),
            last_modified=now.isoformat(),
            knowledge_points=tuple(submission.knowledge_points),
            question_count=submission.question_count,
            total_score=submission.total_score,
            has_answer=submission.has_answer,
            answer_included=submission.answer_included,
            is_original=submission.is_original,
            region=submission.region,
            remarks=submission.remarks,
        )
