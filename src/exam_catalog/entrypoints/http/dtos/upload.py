from fastapi import File, Form, UploadFile
from pydantic import Field

from exam_catalog.entrypoints.http.dtos.exams import CamelModel, ExamResponseDTO
from exam_catalog.entrypoints.http.dtos.stats import StatsDTO


class UploadFormDTO:
    """
    Multipart form of ``POST /api/upload``, used as a class dependency.

    Text fields arrive as strings exactly as the upload page sends them; the
    mapper applies defaults, splits lists and converts numbers and flags.
    """

    def __init__(
        self,
        name: str | None = Form(default=None),
        description: str | None = Form(default=None),
        subject: str | None = Form(default=None),
        difficulty: str | None = Form(default=None),
        source: str | None = Form(default=None),
        year: str | None = Form(default=None),
        grade: str | None = Form(default=None),
        author: str | None = Form(default=None),
        page_count: str | None = Form(default=None, alias="pageCount"),
        question_count: str | None = Form(default=None, alias="questionCount"),
        total_score: str | None = Form(default=None, alias="totalScore"),
        has_answer: str | None = Form(default=None, alias="hasAnswer"),
        answer_included: str | None = Form(default=None, alias="answerIncluded"),
        is_original: str | None = Form(default=None, alias="isOriginal"),
        recommended_time: str | None = Form(default=None, alias="recommendedTime"),
        region: str | None = Form(default=None),
        remarks: str | None = Form(default=None),
        tags: str | None = Form(default=None),
        knowledge_points: str | None = Form(default=None, alias="knowledgePoints"),
        exam_file: UploadFile | None = File(default=None, alias="examFile"),
        previews: list[UploadFile] | None = File(default=None),
    ) -> None:
        self.name = name
        self.description = description
        self.subject = subject
        self.difficulty = difficulty
        self.source = source
        self.year = year
        self.grade = grade
        self.author = author
        self.page_count = page_count
        self.question_count = question_count
        self.total_score = total_score
        self.has_answer = has_answer
        self.answer_included = answer_included
        self.is_original = is_original
        self.recommended_time = recommended_time
        self.region = region
        self.remarks = remarks
        self.tags = tags
        self.knowledge_points = knowledge_points
        self.exam_file = exam_file
        self.previews = previews or []


class UploadResponseDTO(CamelModel):
    message: str = Field(examples=["试卷资源发布成功！"])
    exam: ExamResponseDTO
    stats: StatsDTO
