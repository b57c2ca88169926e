"""Tests for REST API error response models."""

from exam_catalog.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


def test_simple_error_response() -> None:
    response = ErrorResponse(detail="Please upload an exam file", code="MISSING_FILE")

    assert response.model_dump(exclude_none=True) == {
        "detail": "Please upload an exam file",
        "code": "MISSING_FILE",
    }


def test_error_response_with_field_errors() -> None:
    response = ErrorResponse(
        detail="Validation failed",
        code="VALIDATION_ERROR",
        errors=[ErrorDetail(field="pageCount", message="Must be an integer: many")],
    )

    data = response.model_dump()

    assert data["errors"] == [
        {"field": "pageCount", "message": "Must be an integer: many", "code": None}
    ]


def test_error_response_schema_has_examples() -> None:
    schema = ErrorResponse.model_json_schema()

    assert schema["examples"][0]["code"] == "NOT_FOUND"
