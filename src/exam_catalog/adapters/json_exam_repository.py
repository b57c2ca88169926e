"""metadata.json implementation of ExamRepository."""

from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from exam_catalog.adapters.exam_record import (
    ExamRecord,
    parse_entry,
    parse_valid_entries,
    parse_timestamp,
    stats_to_document,
)
from exam_catalog.domain.errors import DataFormatError, StorageError
from exam_catalog.domain.exam import CatalogStats, Counter, ExamEntry
from exam_catalog.ports.exam_repository import ExamRepository

logger = logging.getLogger(__name__)

METADATA_VERSION = "1.1.0"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JsonExamRepository(ExamRepository):
    """
    Catalog stored as a single JSON document.

    - Creates the document with an empty catalog if the file is missing
    - Rewrites the whole file on every mutation (temp file + rename)
    - Re-derives ``stats`` and ``lastUpdated`` on every write
    - Keeps unknown keys of existing entries intact
    - Skips malformed rows when listing and deriving stats (logged at WARNING)
    - Serializes read-modify-write cycles with a process-local lock
    """

    def __init__(self, path: Path, clock: Callable[[], datetime] = _utcnow) -> None:
        self._path = path
        self._clock = clock
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    def list_exams(self) -> list[ExamEntry]:
        with self._lock:
            return parse_valid_entries(self._read()["exams"])

    def get_by_id(self, exam_id: str) -> ExamEntry | None:
        with self._lock:
            exams = self._read()["exams"]

        for index, raw in enumerate(exams):
            if isinstance(raw, dict) and str(raw.get("id")) == exam_id:
                try:
                    return parse_entry(index, raw)
                except DataFormatError:
                    logger.warning(
                        "Skipping malformed catalog entry",
                        extra={"index": index, "exam_id": exam_id},
                    )
                    return None
        return None

    def add(self, entry: ExamEntry) -> CatalogStats:
        with self._lock:
            document = self._read()
            document["exams"].insert(0, ExamRecord.from_domain(entry).to_document())
            stats = self._write(document)

        logger.info("Exam added", extra={"exam_id": entry.id, "total_exams": stats.total_exams})
        return stats

    def increment(self, exam_id: str, counter: Counter) -> int | None:
        with self._lock:
            document = self._read()
            raw = self._find(document, exam_id)
            if raw is None:
                return None

            value = int(raw.get(counter.value) or 0) + 1
            raw[counter.value] = value
            self._write(document)
            return value

    def stats(self) -> CatalogStats:
        with self._lock:
            document = self._read()
            return CatalogStats.from_entries(
                parse_valid_entries(document["exams"]),
                last_updated=parse_timestamp(document.get("lastUpdated")),
            )

    def _find(self, document: dict[str, Any], exam_id: str) -> dict[str, Any] | None:
        for raw in document["exams"]:
            if isinstance(raw, dict) and str(raw.get("id")) == exam_id:
                return raw
        return None

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            document: dict[str, Any] = {"version": METADATA_VERSION, "exams": []}
            self._write(document)
            logger.info("Created empty catalog", extra={"path": str(self._path)})
            return document

        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Failed to read catalog: {exc}", path=str(self._path)) from exc

        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DataFormatError(
                f"Catalog file is not valid JSON: {exc.msg}", path=str(self._path)
            ) from exc

        if not isinstance(document, dict) or not isinstance(document.get("exams"), list):
            raise DataFormatError(
                "Catalog file is missing the 'exams' array", path=str(self._path)
            )
        return document

    def _write(self, document: dict[str, Any]) -> CatalogStats:
        now = self._clock()
        stats = CatalogStats.from_entries(parse_valid_entries(document["exams"]), last_updated=now)
        document.setdefault("version", METADATA_VERSION)
        document["lastUpdated"] = now.isoformat()
        document["stats"] = stats_to_document(stats)

        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            logger.error(
                "Failed to write catalog",
                exc_info=exc,
                extra={"path": str(self._path)},
            )
            raise StorageError(f"Failed to write catalog: {exc}", path=str(self._path)) from exc

        return stats
