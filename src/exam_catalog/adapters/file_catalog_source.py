"""Catalog source that reads a metadata.json file from disk."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from exam_catalog.adapters.exam_record import parse_catalog_payload
from exam_catalog.domain.errors import CatalogUnavailableError, DataFormatError
from exam_catalog.domain.exam import CatalogPayload
from exam_catalog.ports.catalog_source import CatalogSource


class FileCatalogSource(CatalogSource):
    def __init__(self, path: Path) -> None:
        self._path = path

    async def fetch(self) -> CatalogPayload:
        try:
            text = await asyncio.to_thread(self._path.read_text, encoding="utf-8")
        except OSError as exc:
            raise CatalogUnavailableError(
                f"Unable to read catalog file: {exc}", path=str(self._path)
            ) from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DataFormatError(
                f"Catalog file is not valid JSON: {exc.msg}", path=str(self._path)
            ) from exc

        return parse_catalog_payload(data)
