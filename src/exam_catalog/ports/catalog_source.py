from __future__ import annotations

from abc import ABC, abstractmethod

from exam_catalog.domain.exam import CatalogPayload


class CatalogSource(ABC):
    """
    Port for the one-shot catalog fetch performed when a browsing session starts.

    Contract:
        - fetch() is awaited once per session; there is no retry
        - Raises DataFormatError for a malformed payload
        - Raises CatalogUnavailableError when the source cannot be read
    """

    @abstractmethod
    async def fetch(self) -> CatalogPayload: ...
