from __future__ import annotations

from abc import ABC, abstractmethod

from exam_catalog.domain.upload import StoredFile, UploadedFile


class FileStorage(ABC):
    """
    Port for storing uploaded documents and preview images.

    Implementations choose the stored name and enforce the per-file size
    limit while writing.
    """

    @abstractmethod
    def save(self, upload: UploadedFile, max_bytes: int) -> StoredFile:
        """
        Persist an uploaded file.

        Raises:
            FileTooLargeError: If the file exceeds max_bytes (nothing is left behind)
        """
        ...

    @abstractmethod
    def delete(self, stored: StoredFile) -> None:
        """Remove a previously stored file. Missing files are ignored."""
        ...
