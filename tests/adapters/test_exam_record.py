from __future__ import annotations

from datetime import datetime, timezone

import pytest

from exam_catalog.adapters.exam_record import (
    ExamRecord,
    parse_catalog_payload,
    parse_entries,
    parse_timestamp,
    stats_to_document,
)
from exam_catalog.domain.errors import DataFormatError
from exam_catalog.domain.exam import CatalogStats, ExamEntry


def test_record_reads_camel_case_keys_and_ignores_unknown() -> None:
    record = ExamRecord.model_validate(
        {
            "id": "exam-1",
            "name": "期中",
            "previewImages": ["./uploads/previews/a.png"],
            "fileUrl": "./uploads/files/a.pdf",
            "knowledgePoints": ["函数"],
            "hasAnswer": True,
            "somethingNew": "ignored",
        }
    )

    entry = record.to_domain()

    assert entry.preview_images == ("./uploads/previews/a.png",)
    assert entry.file_url == "./uploads/files/a.pdf"
    assert entry.knowledge_points == ("函数",)
    assert entry.has_answer is True


def test_record_defaults_absent_and_null_fields() -> None:
    entry = ExamRecord.model_validate(
        {"id": "x", "name": None, "tags": None, "views": None, "hasAnswer": None}
    ).to_domain()

    assert entry == ExamEntry(id="x")


def test_numeric_id_is_converted_to_string() -> None:
    assert ExamRecord.model_validate({"id": 42}).id == "42"


def test_to_document_round_trips_through_domain() -> None:
    entry = ExamEntry(id="exam-1", name="Final", tags=("a", "b"), file_size=2048, year=2024)

    document = ExamRecord.from_domain(entry).to_document()

    assert document["fileSize"] == 2048
    assert document["tags"] == ["a", "b"]
    assert ExamRecord.model_validate(document).to_domain() == entry


# ==============================================================================
# Payload parsing
# ==============================================================================


def test_parse_catalog_payload() -> None:
    payload = parse_catalog_payload(
        {
            "exams": [{"id": "a"}, {"id": "b", "subject": "数学"}],
            "lastUpdated": "2024-05-01T08:00:00+00:00",
        }
    )

    assert [entry.id for entry in payload.entries] == ["a", "b"]
    assert payload.last_updated == datetime(2024, 5, 1, 8, tzinfo=timezone.utc)


def test_parse_catalog_payload_without_timestamp() -> None:
    assert parse_catalog_payload({"exams": []}).last_updated is None


@pytest.mark.parametrize("data", [[], "exams", None, {}, {"exams": {"id": "a"}}])
def test_parse_catalog_payload_rejects_malformed_documents(data: object) -> None:
    with pytest.raises(DataFormatError):
        parse_catalog_payload(data)


def test_malformed_entry_error_names_its_index() -> None:
    with pytest.raises(DataFormatError) as exc_info:
        parse_entries([{"id": "ok"}, {"name": "no id"}])

    assert exc_info.value.context["index"] == 1
    assert "Catalog entry 1" in exc_info.value.message


def test_non_object_entry_is_rejected() -> None:
    with pytest.raises(DataFormatError):
        parse_entries(["exam-1"])


def test_parse_timestamp_tolerates_garbage() -> None:
    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None
    assert parse_timestamp("yesterday") is None


def test_stats_to_document() -> None:
    stats = CatalogStats(
        total_exams=2,
        total_views=5,
        total_downloads=1,
        subjects={"数学": 2},
        last_updated=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )

    assert stats_to_document(stats) == {
        "totalExams": 2,
        "totalViews": 5,
        "totalDownloads": 1,
        "lastUpdated": "2024-01-01T00:00:00+00:00",
        "subjects": {"数学": 2},
    }
