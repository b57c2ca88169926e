"""In-memory catalog and the persisted favorites set."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import replace

from exam_catalog.domain.errors import DataFormatError, StorageError
from exam_catalog.domain.exam import ExamEntry
from exam_catalog.ports.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)

FAVORITES_KEY = "exam_favorites_v5"


class CatalogStore:
    """
    Holds the loaded entries and the favorites set.

    - Entries are replaced wholesale by load(); order is the source order
    - Favorites are written through to storage on every toggle
    - Favorite ids with no matching entry are kept and ignored
    - Storage failures never propagate: load degrades to an empty set, save is a no-op
    """

    def __init__(self, storage: KeyValueStorage, favorites_key: str = FAVORITES_KEY) -> None:
        self._storage = storage
        self._favorites_key = favorites_key
        self._entries: list[ExamEntry] = []
        self._index: dict[str, int] = {}
        self._favorites: set[str] = set()

    @property
    def entries(self) -> list[ExamEntry]:
        return list(self._entries)

    @property
    def favorites(self) -> frozenset[str]:
        return frozenset(self._favorites)

    def load(self, entries: Sequence[ExamEntry]) -> None:
        """
        Replace the full collection.

        Raises:
            DataFormatError: If entries is not a sequence of ExamEntry
        """
        if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
            raise DataFormatError("Catalog entries must be a sequence")
        if not all(isinstance(entry, ExamEntry) for entry in entries):
            raise DataFormatError("Catalog entries must all be exam entries")

        self._entries = list(entries)
        # First occurrence wins for duplicate ids
        self._index = {}
        for position, entry in enumerate(self._entries):
            self._index.setdefault(entry.id, position)

    def get(self, exam_id: str) -> ExamEntry | None:
        if not _is_valid_id(exam_id):
            return None
        position = self._index.get(exam_id)
        return self._entries[position] if position is not None else None

    def is_favorite(self, exam_id: str) -> bool:
        return _is_valid_id(exam_id) and exam_id in self._favorites

    def toggle_favorite(self, exam_id: str) -> bool:
        """Flip membership of exam_id, persist the set, and return the new membership.

        An id that is not a non-empty string is ignored and reported as not favorited.
        """
        if not _is_valid_id(exam_id):
            logger.info("Ignoring invalid favorite id", extra={"exam_id": repr(exam_id)})
            return False

        if exam_id in self._favorites:
            self._favorites.discard(exam_id)
            is_favorite = False
        else:
            self._favorites.add(exam_id)
            is_favorite = True

        self._save_favorites()
        return is_favorite

    def record_download(self, exam_id: str) -> ExamEntry | None:
        """Optimistically bump the local download count; not persisted."""
        if not _is_valid_id(exam_id):
            return None
        position = self._index.get(exam_id)
        if position is None:
            return None

        entry = self._entries[position]
        updated = replace(entry, downloads=entry.downloads + 1)
        self._entries[position] = updated
        return updated

    def load_favorites(self) -> None:
        """Read the favorites set from storage; absence or corruption yields an empty set."""
        try:
            saved = self._storage.get(self._favorites_key)
        except StorageError:
            logger.warning(
                "Failed to load favorites",
                extra={"key": self._favorites_key},
                exc_info=True,
            )
            self._favorites = set()
            return

        if saved is None:
            self._favorites = set()
            return

        try:
            data = json.loads(saved)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupt favorites", extra={"key": self._favorites_key})
            self._favorites = set()
            return

        if not isinstance(data, list):
            logger.warning("Ignoring non-list favorites", extra={"key": self._favorites_key})
            self._favorites = set()
            return

        self._favorites = {str(item) for item in data if isinstance(item, (str, int))}

    def _save_favorites(self) -> None:
        payload = json.dumps(sorted(self._favorites), ensure_ascii=False)
        try:
            self._storage.set(self._favorites_key, payload)
        except StorageError:
            logger.warning(
                "Failed to save favorites",
                extra={"key": self._favorites_key, "count": len(self._favorites)},
                exc_info=True,
            )


def _is_valid_id(exam_id: object) -> bool:
    return isinstance(exam_id, str) and bool(exam_id)
