"""REST API error response models.

Every error body shares one shape so that the upload form and the catalog
pages can show the same kind of message.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error, used by validation failures."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "limit",
                "message": "Input should be less than or equal to 200",
                "code": "less_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Exam with identifier 'exam-1' not found", "code": "NOT_FOUND"}

        Upload rejection:
            {
                "detail": "Unsupported file type. Exam file only supports: .pdf, .doc, .docx",
                "code": "FILE_TYPE_NOT_ALLOWED"
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Exam with identifier 'exam-1' not found", "code": "NOT_FOUND"},
                {"detail": "File size exceeds the limit (max 50MB)", "code": "FILE_TOO_LARGE"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "page",
                            "message": "Input should be greater than or equal to 1",
                            "code": "greater_than_equal",
                        }
                    ],
                },
            ]
        }
    )
