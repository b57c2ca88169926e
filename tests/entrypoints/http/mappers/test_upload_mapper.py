from __future__ import annotations

import inspect
import io

import pytest
from fastapi import UploadFile

from exam_catalog.domain.errors import ValidationError
from exam_catalog.entrypoints.http.dtos.upload import UploadFormDTO
from exam_catalog.entrypoints.http.mappers.upload_mapper import (
    UploadMapper,
    is_checked,
    split_list,
)


def _form(**fields: object) -> UploadFormDTO:
    values: dict[str, object] = {name: None for name in inspect.signature(UploadFormDTO).parameters}
    values.update(fields)
    return UploadFormDTO(**values)  # type: ignore[arg-type]


def test_split_list() -> None:
    assert split_list(" a, b,,c ,", ",") == ["a", "b", "c"]
    assert split_list("x\n\n y \n", "\n") == ["x", "y"]
    assert split_list(None, ",") == []
    assert split_list("", ",") == []


@pytest.mark.parametrize(
    ("value", "expected"),
    [("true", True), ("false", False), ("on", False), (None, False)],
)
def test_is_checked(value: str | None, expected: bool) -> None:
    assert is_checked(value) is expected


def test_blank_form_maps_to_defaults() -> None:
    request = UploadMapper.to_domain_request(_form())

    submission = request.submission
    assert submission.name == "未命名试卷"
    assert submission.subject == "其他"
    assert submission.year is None
    assert submission.page_count == 1
    assert submission.recommended_time == 60
    assert request.exam_file is None
    assert request.previews == []


def test_numbers_are_parsed() -> None:
    request = UploadMapper.to_domain_request(
        _form(year="2023", total_score="150", recommended_time=" 90 ")
    )

    assert request.submission.year == 2023
    assert request.submission.total_score == 150
    assert request.submission.recommended_time == 90


def test_invalid_numbers_are_collected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        UploadMapper.to_domain_request(_form(year="next", question_count="x"))

    fields = [error["field"] for error in exc_info.value.errors or []]
    assert fields == ["year", "questionCount"]


def test_files_are_mapped_to_their_fields() -> None:
    exam_file = UploadFile(file=io.BytesIO(b"pdf"), filename="a.pdf")
    preview = UploadFile(file=io.BytesIO(b"png"), filename="p.png")
    empty = UploadFile(file=io.BytesIO(b""), filename="")

    request = UploadMapper.to_domain_request(_form(exam_file=exam_file, previews=[preview, empty]))

    assert request.exam_file is not None
    assert request.exam_file.field == "examFile"
    assert request.exam_file.filename == "a.pdf"
    assert [upload.field for upload in request.previews] == ["previews"]
