from __future__ import annotations

import logging

import httpx

from exam_catalog.browser.commands import Command, Intent
from exam_catalog.browser.session import BrowserSession
from exam_catalog.domain.exam import ExamEntry

logger = logging.getLogger(__name__)


class DeepLinkReconciler:
    """
    Opens the entry named in the page URL.

    Called on initial load and on every history navigation. Waits for the
    session's ready signal rather than a fixed delay. Absent or unknown ids
    are ignored.
    """

    def __init__(self, session: BrowserSession, param: str | None = None) -> None:
        self._session = session
        self._param = param or session.settings.deep_link_param

    def exam_id_from(self, url: str) -> str | None:
        return httpx.URL(url).params.get(self._param) or None

    async def reconcile(self, url: str) -> ExamEntry | None:
        exam_id = self.exam_id_from(url)
        if exam_id is None:
            return None

        if not await self._session.wait_until_ready():
            logger.info("Skipping deep link, catalog not loaded", extra={"exam_id": exam_id})
            return None

        snapshot = self._session.dispatch(Command(Intent.OPEN_DETAIL, exam_id))
        if snapshot.current_entry is None or snapshot.current_entry.id != exam_id:
            logger.info("Deep link did not match any entry", extra={"exam_id": exam_id})
            return None
        return snapshot.current_entry

    def share_url(self, base_url: str, exam_id: str) -> str:
        """Link to base_url's origin and path that reopens exam_id."""
        url = httpx.URL(base_url).copy_with(params={self._param: exam_id}, fragment=None)
        return str(url)
