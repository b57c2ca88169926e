"""Catalog source that fetches the catalog document over HTTP."""

from __future__ import annotations

import logging

import httpx

from exam_catalog.adapters.exam_record import parse_catalog_payload
from exam_catalog.domain.errors import CatalogUnavailableError, DataFormatError
from exam_catalog.domain.exam import CatalogPayload
from exam_catalog.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class HttpCatalogSource(CatalogSource):
    """
    Fetches ``{exams, lastUpdated?}`` from a URL (``/api/catalog`` or a static metadata.json).

    - Accepts an optional shared httpx.AsyncClient; creates a temporary one otherwise
    - Sends ``Cache-Control: no-cache`` so a freshly uploaded entry is visible
    - Never retries: a failed fetch is terminal for the session
    """

    def __init__(
        self,
        url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._url = url
        self._client = client
        self._timeout = timeout

    async def fetch(self) -> CatalogPayload:
        if self._client is not None:
            response = await self._get(self._client)
        else:
            async with httpx.AsyncClient() as client:
                response = await self._get(client)

        try:
            data = response.json()
        except ValueError as exc:
            raise DataFormatError("Catalog response is not valid JSON", url=self._url) from exc

        payload = parse_catalog_payload(data)
        logger.info(
            "Catalog fetched",
            extra={"url": self._url, "entries": len(payload.entries)},
        )
        return payload

    async def _get(self, client: httpx.AsyncClient) -> httpx.Response:
        try:
            response = await client.get(
                self._url,
                headers={"Cache-Control": "no-cache", "Accept": "application/json"},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CatalogUnavailableError(
                f"Unable to load catalog: {exc.response.status_code} {exc.response.reason_phrase}",
                url=self._url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogUnavailableError(f"Unable to load catalog: {exc}", url=self._url) from exc
        return response
