"""Catalog document format shared by metadata.json, the HTTP service and catalog sources.

Entries use camelCase keys. Unknown keys are ignored on read, and optional
fields that are absent or null fall back to empty values.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from exam_catalog.domain.errors import DataFormatError
from exam_catalog.domain.exam import CatalogPayload, CatalogStats, ExamEntry

logger = logging.getLogger(__name__)

_timestamp_adapter = TypeAdapter(datetime)


class ExamRecord(BaseModel):
    """One catalog entry as stored in metadata.json."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str
    name: str = ""
    description: str = ""
    subject: str = ""
    difficulty: str = ""
    grade: str | None = None
    source: str = ""
    views: int = 0
    downloads: int = 0
    tags: list[str] = Field(default_factory=list)
    preview_images: list[str] = Field(default_factory=list)
    file_url: str = ""
    file_size: int = 0
    file_size_formatted: str | None = None
    file_format: str = ""
    year: int | None = None
    author: str | None = None
    page_count: int | None = None
    recommended_time: int | None = None
    upload_date: str | None = None
    upload_timestamp: int | None = None
    last_modified: str | None = None
    knowledge_points: list[str] = Field(default_factory=list)
    question_count: int | None = None
    total_score: int | None = None
    has_answer: bool = False
    answer_included: bool = False
    is_original: bool = False
    region: str = ""
    remarks: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator(
        "name",
        "description",
        "subject",
        "difficulty",
        "source",
        "file_url",
        "file_format",
        "region",
        "remarks",
        mode="before",
    )
    @classmethod
    def _none_to_empty_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("views", "downloads", "file_size", mode="before")
    @classmethod
    def _none_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("tags", "preview_images", "knowledge_points", mode="before")
    @classmethod
    def _none_to_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("has_answer", "answer_included", "is_original", mode="before")
    @classmethod
    def _none_to_false(cls, value: Any) -> Any:
        return False if value is None else value

    def to_domain(self) -> ExamEntry:
        return ExamEntry(
            id=self.id,
            name=self.name,
            description=self.description,
            subject=self.subject,
            difficulty=self.difficulty,
            grade=self.grade,
            source=self.source,
            views=self.views,
            downloads=self.downloads,
            tags=tuple(self.tags),
            preview_images=tuple(self.preview_images),
            file_url=self.file_url,
            file_size=self.file_size,
            file_format=self.file_format,
            year=self.year,
            author=self.author,
            page_count=self.page_count,
            recommended_time=self.recommended_time,
            upload_date=self.upload_date,
            knowledge_points=tuple(self.knowledge_points),
            question_count=self.question_count,
            total_score=self.total_score,
            has_answer=self.has_answer,
            answer_included=self.answer_included,
            is_original=self.is_original,
            region=self.region,
            remarks=self.remarks,
            file_size_formatted=self.file_size_formatted,
            upload_timestamp=self.upload_timestamp,
            last_modified=self.last_modified,
        )

    @classmethod
    def from_domain(cls, entry: ExamEntry) -> ExamRecord:
        return cls(
            id=entry.id,
            name=entry.name,
            description=entry.description,
            subject=entry.subject,
            difficulty=entry.difficulty,
            grade=entry.grade,
            source=entry.source,
            views=entry.views,
            downloads=entry.downloads,
            tags=list(entry.tags),
            preview_images=list(entry.preview_images),
            file_url=entry.file_url,
            file_size=entry.file_size,
            file_size_formatted=entry.file_size_formatted,
            file_format=entry.file_format,
            year=entry.year,
            author=entry.author,
            page_count=entry.page_count,
            recommended_time=entry.recommended_time,
            upload_date=entry.upload_date,
            upload_timestamp=entry.upload_timestamp,
            last_modified=entry.last_modified,
            knowledge_points=list(entry.knowledge_points),
            question_count=entry.question_count,
            total_score=entry.total_score,
            has_answer=entry.has_answer,
            answer_included=entry.answer_included,
            is_original=entry.is_original,
            region=entry.region,
            remarks=entry.remarks,
        )

    def to_document(self) -> dict[str, Any]:
        """Serialize with camelCase keys for metadata.json."""
        return self.model_dump(by_alias=True, mode="json")


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None for absent or unparseable values."""
    if value in (None, ""):
        return None
    try:
        return _timestamp_adapter.validate_python(value)
    except PydanticValidationError:
        logger.info("Ignoring unparseable catalog timestamp", extra={"value": value})
        return None


def parse_entry(index: int, raw: Any) -> ExamEntry:
    """
    Validate one raw entry.

    Raises:
        DataFormatError: If the entry is not a valid catalog record (names its index)
    """
    try:
        return ExamRecord.model_validate(raw).to_domain()
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or "<entry>"
        raise DataFormatError(
            f"Catalog entry {index} is malformed: {field}: {first['msg']}",
            index=index,
            field=field,
        ) from exc


def parse_entries(exams: list[Any]) -> list[ExamEntry]:
    """
    Validate raw entries in order.

    Raises:
        DataFormatError: If any entry is not a valid catalog record (names its index)
    """
    return [parse_entry(index, raw) for index, raw in enumerate(exams)]


def parse_valid_entries(exams: list[Any]) -> list[ExamEntry]:
    """Validate raw entries in order, skipping (and logging) the malformed ones."""
    entries: list[ExamEntry] = []
    for index, raw in enumerate(exams):
        try:
            entries.append(parse_entry(index, raw))
        except DataFormatError as exc:
            logger.warning(
                "Skipping malformed catalog entry",
                extra={"index": index, "error": exc.message},
            )
    return entries


def parse_catalog_payload(data: Any) -> CatalogPayload:
    """
    Convert a decoded ``{exams: [...], lastUpdated?}`` document into a CatalogPayload.

    Raises:
        DataFormatError: If the document is not an object or ``exams`` is missing or not a list
    """
    if not isinstance(data, dict):
        raise DataFormatError("Catalog payload must be a JSON object")

    exams = data.get("exams")
    if not isinstance(exams, list):
        raise DataFormatError("Catalog payload is missing the 'exams' array", field="exams")

    return CatalogPayload(
        entries=parse_entries(exams),
        last_updated=parse_timestamp(data.get("lastUpdated")),
    )


def stats_to_document(stats: CatalogStats) -> dict[str, Any]:
    return {
        "totalExams": stats.total_exams,
        "totalViews": stats.total_views,
        "totalDownloads": stats.total_downloads,
        "lastUpdated": stats.last_updated.isoformat() if stats.last_updated else None,
        "subjects": dict(stats.subjects),
    }
