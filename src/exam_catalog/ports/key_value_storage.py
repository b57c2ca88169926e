from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """
    Port for the browsing client's local key-value storage.

    Values are opaque strings. Implementations raise StorageError when the
    underlying medium fails; callers decide how to degrade.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...
