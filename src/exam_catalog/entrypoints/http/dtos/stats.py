from datetime import datetime

from pydantic import Field

from exam_catalog.entrypoints.http.dtos.exams import CamelModel, ExamResponseDTO


class StatsDTO(CamelModel):
    total_exams: int
    total_views: int
    total_downloads: int
    subjects: dict[str, int]
    last_updated: datetime | None = None


class RecentUploadDTO(CamelModel):
    id: str
    name: str
    subject: str
    upload_date: str | None = None


class StatsResponseDTO(CamelModel):
    stats: StatsDTO
    recent_uploads: list[RecentUploadDTO] = Field(description="Five most recent uploads")


class SubjectCountDTO(CamelModel):
    name: str
    count: int


class CatalogResponseDTO(CamelModel):
    """The full catalog document consumed by browsing clients."""

    exams: list[ExamResponseDTO]
    last_updated: datetime | None = None
    stats: StatsDTO
