from __future__ import annotations

from exam_catalog.ports.key_value_storage import KeyValueStorage


class InMemoryKeyValueStorage(KeyValueStorage):
    """Dictionary-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
