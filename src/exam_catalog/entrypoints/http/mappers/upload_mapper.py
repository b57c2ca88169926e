from __future__ import annotations

from fastapi import UploadFile

from exam_catalog.domain.errors import ValidationError
from exam_catalog.domain.upload import (
    EXAM_FILE_FIELD,
    PREVIEWS_FIELD,
    ExamSubmission,
    UploadedFile,
)
from exam_catalog.entrypoints.http.dtos.upload import UploadFormDTO, UploadResponseDTO
from exam_catalog.entrypoints.http.mappers.exam_mapper import ExamMapper
from exam_catalog.use_cases.upload_exam import UploadExamRequest, UploadExamResponse

UPLOAD_SUCCESS_MESSAGE = "试卷资源发布成功！"

_DEFAULTS = ExamSubmission()


def split_list(value: str | None, separator: str) -> list[str]:
    """``"a, b,,c"`` -> ``["a", "b", "c"]``."""
    if not value:
        return []
    return [item.strip() for item in value.split(separator) if item.strip()]


def is_checked(value: str | None) -> bool:
    return value == "true"


class UploadMapper:
    """Maps the multipart upload form to the upload use case and back."""

    @staticmethod
    def to_domain_request(form: UploadFormDTO) -> UploadExamRequest:
        """
        Builds the upload request, applying defaults for blank fields.

        Raises:
            ValidationError: If a numeric field is present but not an integer
        """
        errors: list[dict[str, str]] = []

        def to_int(field: str, value: str | None, default: int | None) -> int | None:
            if value is None or not value.strip():
                return default
            try:
                return int(value)
            except ValueError:
                errors.append(
                    {
                        "field": field,
                        "message": f"Must be an integer: {value}",
                        "code": "INVALID_INTEGER",
                    }
                )
                return default

        submission = ExamSubmission(
            name=form.name or _DEFAULTS.name,
            description=form.description or "",
            subject=form.subject or _DEFAULTS.subject,
            difficulty=form.difficulty or _DEFAULTS.difficulty,
            source=form.source or _DEFAULTS.source,
            year=to_int("year", form.year, None),
            grade=form.grade or _DEFAULTS.grade,
            author=form.author or _DEFAULTS.author,
            page_count=to_int("pageCount", form.page_count, _DEFAULTS.page_count),
            question_count=to_int("questionCount", form.question_count, None),
            total_score=to_int("totalScore", form.total_score, None),
            has_answer=is_checked(form.has_answer),
            answer_included=is_checked(form.answer_included),
            is_original=is_checked(form.is_original),
            recommended_time=to_int(
                "recommendedTime", form.recommended_time, _DEFAULTS.recommended_time
            ),
            region=form.region or "",
            remarks=form.remarks or "",
            tags=split_list(form.tags, ","),
            knowledge_points=split_list(form.knowledge_points, "\n"),
        )

        if errors:
            raise ValidationError(errors=errors)

        return UploadExamRequest(
            submission=submission,
            exam_file=UploadMapper.to_uploaded_file(EXAM_FILE_FIELD, form.exam_file),
            previews=[
                uploaded
                for preview in form.previews
                if (uploaded := UploadMapper.to_uploaded_file(PREVIEWS_FIELD, preview)) is not None
            ],
        )

    @staticmethod
    def to_uploaded_file(field: str, upload: UploadFile | None) -> UploadedFile | None:
        """Browsers send an empty part for an untouched file input; treat it as absent."""
        if upload is None or not upload.filename:
            return None
        return UploadedFile(field=field, filename=upload.filename, stream=upload.file)

    @staticmethod
    def to_response(result: UploadExamResponse) -> UploadResponseDTO:
        return UploadResponseDTO(
            message=UPLOAD_SUCCESS_MESSAGE,
            exam=ExamMapper.to_exam_response(result.exam),
            stats=ExamMapper.to_stats(result.stats),
        )
