"""State holder for one browsing session.

All recomputation happens synchronously inside dispatch(); the only await
point is the one-shot catalog fetch in start(). State is always updated
before subscribers are notified with the resulting snapshot.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable

from exam_catalog.browser.catalog_store import CatalogStore
from exam_catalog.browser.commands import Command, Intent
from exam_catalog.browser.filter_engine import FilterSpec, compute_view
from exam_catalog.browser.pagination import PaginationView
from exam_catalog.browser.settings import BrowserSettings, QuickFilter
from exam_catalog.domain.errors import CatalogLoadError
from exam_catalog.domain.exam import ExamEntry
from exam_catalog.ports.catalog_source import CatalogSource
from exam_catalog.ports.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)

Listener = Callable[["BrowserSnapshot"], None]


@dataclass(frozen=True, slots=True)
class BrowserSnapshot:
    """Everything the presentation layer needs to render one frame."""

    filters: FilterSpec
    items: list[ExamEntry]
    page: int
    total_pages: int
    matching_count: int
    total_count: int
    favorites: frozenset[str]
    subjects: list[str]
    difficulties: list[str]
    sources: list[str]
    grades: list[str]
    quick_filters: list[QuickFilter]
    active_quick_filter: str | None
    current_entry: ExamEntry | None
    is_loading: bool
    error: CatalogLoadError | None

    def is_favorite(self, exam_id: str) -> bool:
        return exam_id in self.favorites


class BrowserSession:
    """
    Catalog browsing state: store, filters, filtered view, pagination and open entry.

    Every user action goes through dispatch(), which routes on Intent to one
    handler. Handlers never raise for unknown ids or out-of-range pages.
    """

    def __init__(
        self,
        source: CatalogSource,
        store: CatalogStore,
        settings: BrowserSettings | None = None,
    ) -> None:
        self._source = source
        self._store = store
        self._settings = settings or BrowserSettings()
        self._pagination = PaginationView(self._settings.page_size)
        self._filters = FilterSpec()
        self._view: list[ExamEntry] = []
        self._current_id: str | None = None
        self._active_quick_filter: str | None = "all"
        self._is_loading = False
        self._error: CatalogLoadError | None = None
        self._ready = asyncio.Event()
        self._listeners: list[Listener] = []
        self._handlers: dict[Intent, Callable[[Any], None]] = {
            Intent.APPLY_FILTERS: self._apply_filters,
            Intent.RESET_FILTERS: self._reset_filters,
            Intent.QUICK_FILTER: self._quick_filter,
            Intent.TOGGLE_FAVORITE: self._toggle_favorite,
            Intent.CHANGE_PAGE: self._change_page,
            Intent.OPEN_DETAIL: self._open_detail,
            Intent.CLOSE_DETAIL: self._close_detail,
            Intent.DOWNLOAD: self._download,
        }

    @classmethod
    def from_settings(
        cls,
        source: CatalogSource,
        storage: KeyValueStorage,
        settings: BrowserSettings | None = None,
    ) -> BrowserSession:
        """Build a session whose store persists favorites under settings.favorites_key."""
        settings = settings or BrowserSettings()
        return cls(source, CatalogStore(storage, settings.favorites_key), settings)

    @property
    def settings(self) -> BrowserSettings:
        return self._settings

    @property
    def view(self) -> list[ExamEntry]:
        return list(self._view)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> BrowserSnapshot:
        """
        Fetch the catalog once and build the initial view.

        A CatalogLoadError is recorded on the snapshot instead of raised; the
        catalog stays empty until retry() is called.
        """
        self._ready.clear()
        self._is_loading = True
        self._error = None
        self._notify()

        try:
            payload = await self._source.fetch()
            self._store.load(payload.entries)
        except CatalogLoadError as exc:
            logger.error(
                "Catalog failed to load",
                extra={"error_code": exc.error_code, "message": exc.message},
            )
            self._error = exc
            self._is_loading = False
            self._ready.set()
            return self._notify()

        if not payload.entries:
            logger.warning("Catalog loaded with no entries")

        self._store.load_favorites()
        self._recompute()
        self._is_loading = False
        self._ready.set()
        logger.info("Catalog ready", extra={"entries": len(payload.entries)})
        return self._notify()

    async def retry(self) -> BrowserSnapshot:
        return await self.start()

    async def wait_until_ready(self) -> bool:
        """Wait for start() to settle; True if the catalog loaded."""
        await self._ready.wait()
        return self._error is None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def dispatch(self, command: Command) -> BrowserSnapshot:
        handler = self._handlers[command.intent]
        handler(command.argument)
        return self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a render callback; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_page_size(self, page_size: int) -> BrowserSnapshot:
        self._pagination.set_page_size(page_size)
        return self._notify()

    def snapshot(self) -> BrowserSnapshot:
        page = self._pagination.slice(self._view)
        entries = self._store.entries
        return BrowserSnapshot(
            filters=self._filters,
            items=page.items,
            page=page.page,
            total_pages=page.total_pages,
            matching_count=len(self._view),
            total_count=len(entries),
            favorites=self._store.favorites,
            subjects=_distinct(entry.subject for entry in entries),
            difficulties=_distinct(entry.difficulty for entry in entries),
            sources=_distinct(entry.source for entry in entries),
            grades=list(self._settings.available_grades),
            quick_filters=list(self._settings.quick_filters),
            active_quick_filter=self._active_quick_filter,
            current_entry=self._store.get(self._current_id) if self._current_id else None,
            is_loading=self._is_loading,
            error=self._error,
        )

    def _apply_filters(self, spec: FilterSpec) -> None:
        if not isinstance(spec, FilterSpec):
            logger.info("Ignoring invalid filter spec", extra={"spec": repr(spec)})
            return
        self._filters = spec.with_changes(search=spec.search.strip())
        self._active_quick_filter = None
        self._recompute()

    def _reset_filters(self, _: Any = None) -> None:
        self._filters = FilterSpec()
        self._active_quick_filter = "all"
        self._recompute()

    def _quick_filter(self, value: str) -> None:
        if not isinstance(value, str):
            logger.info("Ignoring unknown quick filter", extra={"filter": repr(value)})
            return
        if value == "all":
            self._reset_filters()
            return

        kind, _, argument = value.partition(":")
        if kind == "subject":
            self._filters = self._filters.with_changes(subject=argument)
        elif kind == "tag":
            self._filters = self._filters.with_changes(search=argument.strip())
        else:
            logger.info("Ignoring unknown quick filter", extra={"filter": value})
            return

        self._active_quick_filter = value
        self._recompute()

    def _toggle_favorite(self, exam_id: str) -> None:
        self._store.toggle_favorite(exam_id)
        self._recompute()

    def _change_page(self, page: int | str) -> None:
        # Page numbers read back from the UI may arrive as strings
        if isinstance(page, bool):
            return
        try:
            number = int(page)
        except (TypeError, ValueError):
            logger.info("Ignoring invalid page", extra={"page": repr(page)})
            return
        self._pagination.go_to_page(number)

    def _open_detail(self, exam_id: str) -> None:
        if self._store.get(exam_id) is not None:
            self._current_id = exam_id

    def _close_detail(self, _: Any = None) -> None:
        self._current_id = None

    def _download(self, exam_id: str) -> None:
        entry = self._store.get(exam_id)
        if entry is None or not entry.file_url or entry.file_url == "#":
            return

        updated = self._store.record_download(exam_id)
        if updated is None:
            return
        # Keep the view order; only swap in the updated copy
        self._view = [updated if item.id == exam_id else item for item in self._view]

    def _recompute(self) -> None:
        self._view = compute_view(self._store.entries, self._store.favorites, self._filters)
        self._pagination.recompute(len(self._view))

    def _notify(self) -> BrowserSnapshot:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot


def _distinct(values: Iterable[str]) -> list[str]:
    return sorted({value for value in values if value})
