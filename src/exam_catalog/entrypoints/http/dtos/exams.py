from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response models serialize with the camelCase keys browsing clients expect."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExamResponseDTO(CamelModel):
    id: str
    name: str
    description: str
    subject: str
    difficulty: str
    grade: str | None = None
    source: str
    views: int
    downloads: int
    tags: list[str]
    preview_images: list[str]
    file_url: str
    file_size: int
    file_size_formatted: str | None = None
    file_format: str
    year: int | None = None
    author: str | None = None
    page_count: int | None = None
    recommended_time: int | None = None
    upload_date: str | None = None
    upload_timestamp: int | None = None
    last_modified: str | None = None
    knowledge_points: list[str]
    question_count: int | None = None
    total_score: int | None = None
    has_answer: bool
    answer_included: bool
    is_original: bool
    region: str
    remarks: str


class ExamsQueryDTO(BaseModel):
    """Query parameters for listing exams."""

    subject: str | None = Field(
        default=None,
        description="Filter by subject (exact match)",
        examples=["数学"],
    )
    grade: str | None = Field(
        default=None,
        description="Filter by grade (exact match)",
        examples=["高三"],
    )
    year: int | None = Field(
        default=None,
        description="Filter by exam year",
        examples=[2024],
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive substring of name, description or any tag",
        examples=["期中"],
    )
    page: int = Field(
        default=1,
        description="1-based page number",
        examples=[1],
        ge=1,
    )
    limit: int = Field(
        default=20,
        description="Maximum number of exams per page",
        examples=[20],
        ge=1,
        le=200,
    )


class ExamListResponseDTO(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int
    exams: list[ExamResponseDTO]


class ExamDetailResponseDTO(CamelModel):
    exam: ExamResponseDTO


class KeywordSearchResponseDTO(CamelModel):
    count: int = Field(description="Number of matching exams before the result limit")
    results: list[ExamResponseDTO]


class CounterResponseDTO(CamelModel):
    """New value of an incremented counter."""

    id: str
    counter: str = Field(examples=["downloads"])
    value: int = Field(examples=[42])
