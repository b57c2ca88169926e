"""Disk implementation of FileStorage."""

from __future__ import annotations

import logging
import random
import re
import time
from pathlib import Path, PurePath
from typing import Callable

from exam_catalog.domain.errors import FileTooLargeError, StorageError
from exam_catalog.domain.upload import EXAM_FILE_FIELD, StoredFile, UploadedFile
from exam_catalog.ports.file_storage import FileStorage

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024
MAX_STEM_LENGTH = 50

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9]")


def unique_suffix() -> str:
    return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"


def safe_filename(original: str, suffix: str) -> str:
    """``My Exam (1).pdf`` -> ``My_Exam__1__<suffix>.pdf``."""
    path = PurePath(original)
    stem = _UNSAFE_CHARS.sub("_", path.stem)[:MAX_STEM_LENGTH]
    return f"{stem}_{suffix}{path.suffix}"


class LocalFileStorage(FileStorage):
    """
    Stores exam files under ``<root>/files`` and previews under ``<root>/previews``.

    - Stored names are sanitized and made unique with a timestamp suffix
    - Files are streamed in chunks; exceeding max_bytes removes the partial file
    - URLs are relative to the catalog page (``./uploads/...``)
    """

    def __init__(
        self,
        root: Path,
        url_prefix: str = "./uploads",
        suffix_factory: Callable[[], str] = unique_suffix,
    ) -> None:
        self._root = root
        self._url_prefix = url_prefix.rstrip("/")
        self._suffix_factory = suffix_factory

    @property
    def root(self) -> Path:
        return self._root

    def ensure_directories(self) -> None:
        for subdir in ("files", "previews"):
            (self._root / subdir).mkdir(parents=True, exist_ok=True)

    def save(self, upload: UploadedFile, max_bytes: int) -> StoredFile:
        subdir = self._subdir(upload.field)
        target_dir = self._root / subdir
        stored_name = safe_filename(upload.filename, self._suffix_factory())
        path = target_dir / stored_name

        size = 0
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            with path.open("wb") as out:
                while chunk := upload.stream.read(CHUNK_SIZE):
                    size += len(chunk)
                    if size > max_bytes:
                        raise FileTooLargeError(upload.field, upload.filename, max_bytes)
                    out.write(chunk)
        except FileTooLargeError:
            path.unlink(missing_ok=True)
            raise
        except OSError as exc:
            path.unlink(missing_ok=True)
            raise StorageError(f"Failed to store {upload.filename}", field=upload.field) from exc

        logger.info(
            "Stored upload",
            extra={"field": upload.field, "stored_name": stored_name, "size": size},
        )
        return StoredFile(
            field=upload.field,
            original_name=upload.filename,
            stored_name=stored_name,
            url=f"{self._url_prefix}/{subdir}/{stored_name}",
            size=size,
        )

    def delete(self, stored: StoredFile) -> None:
        path = self._root / self._subdir(stored.field) / stored.stored_name
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.error("Failed to remove stored file", extra={"path": str(path)}, exc_info=True)

    def _subdir(self, field: str) -> str:
        return "files" if field == EXAM_FILE_FIELD else "previews"
