from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from exam_catalog.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


@dataclass(frozen=True, slots=True)
class ExamEntry:
    """One downloadable exam document and its metadata.

    Immutable once loaded. The browsing client replaces an entry with an
    updated copy for the optimistic download-count increment.
    """

    id: str
    name: str = ""
    description: str = ""
    subject: str = ""
    difficulty: str = ""
    grade: str | None = None
    source: str = ""
    views: int = 0
    downloads: int = 0
    tags: tuple[str, ...] = ()
    preview_images: tuple[str, ...] = ()
    file_url: str = ""
    file_size: int = 0
    file_format: str = ""
    # Extended attributes
    year: int | None = None
    author: str | None = None
    page_count: int | None = None
    recommended_time: int | None = None
    upload_date: str | None = None
    knowledge_points: tuple[str, ...] = ()
    question_count: int | None = None
    total_score: int | None = None
    has_answer: bool = False
    answer_included: bool = False
    is_original: bool = False
    region: str = ""
    remarks: str = ""
    file_size_formatted: str | None = None
    upload_timestamp: int | None = None
    last_modified: str | None = None


@dataclass(frozen=True, slots=True)
class CatalogPayload:
    """The catalog document as delivered by a data source."""

    entries: list[ExamEntry]
    last_updated: datetime | None = None


@dataclass(frozen=True, slots=True)
class CatalogStats:
    total_exams: int = 0
    total_views: int = 0
    total_downloads: int = 0
    subjects: dict[str, int] = field(default_factory=dict)
    last_updated: datetime | None = None

    @classmethod
    def from_entries(cls, entries: list[ExamEntry], last_updated: datetime | None = None) -> CatalogStats:
        subjects: dict[str, int] = {}
        for entry in entries:
            if entry.subject:
                subjects[entry.subject] = subjects.get(entry.subject, 0) + 1

        return cls(
            total_exams=len(entries),
            total_views=sum(entry.views for entry in entries),
            total_downloads=sum(entry.downloads for entry in entries),
            subjects=subjects,
            last_updated=last_updated,
        )


class Counter(str, Enum):
    """Per-entry counters that the HTTP service can increment."""

    VIEWS = "views"
    DOWNLOADS = "downloads"


@dataclass(frozen=True, slots=True)
class CatalogFilters:
    """Server-side listing filters (AND semantics, empty means unset)."""

    subject: str | None = None
    grade: str | None = None
    year: int | None = None
    search: str | None = None


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    limit: int = 20

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > 200:
            raise PagingValidationError("limit must be <= 200")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def matches_filters(entry: ExamEntry, filters: CatalogFilters) -> bool:
    """Server-side listing predicate: exact subject/grade/year, substring search."""
    if filters.subject and entry.subject != filters.subject:
        return False
    if filters.grade and entry.grade != filters.grade:
        return False
    if filters.year is not None and entry.year != filters.year:
        return False
    if filters.search:
        needle = filters.search.lower()
        if not (
            needle in entry.name.lower()
            or needle in entry.description.lower()
            or any(needle in tag.lower() for tag in entry.tags)
        ):
            return False
    return True


def matches_keyword(entry: ExamEntry, keyword: str) -> bool:
    """Keyword search predicate; unlike listing search it also covers knowledge points."""
    needle = keyword.lower()
    return (
        needle in entry.name.lower()
        or needle in entry.description.lower()
        or any(needle in tag.lower() for tag in entry.tags)
        or any(needle in point.lower() for point in entry.knowledge_points)
    )
