from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from exam_catalog.domain.exam import PagingValidationError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 12


@dataclass(frozen=True, slots=True)
class PageSlice(Generic[T]):
    page: int
    items: list[T]
    total_pages: int


def total_pages_for(length: int, page_size: int) -> int:
    return max(1, math.ceil(length / page_size))


def clamp_page(requested_page: int, total_pages: int) -> int:
    return min(max(requested_page, 1), total_pages)


def paginate(view: Sequence[T], page_size: int, requested_page: int) -> PageSlice[T]:
    """
    Slice one page out of view.

    The requested page is clamped into ``1..total_pages``; an empty view has a
    single empty page.
    """
    _validate_page_size(page_size)
    total_pages = total_pages_for(len(view), page_size)
    page = clamp_page(requested_page, total_pages)
    start = (page - 1) * page_size
    return PageSlice(page=page, items=list(view[start : start + page_size]), total_pages=total_pages)


class PaginationView:
    """
    Current page and page count for a filtered view.

    Invariant: ``1 <= current_page <= total_pages`` and ``total_pages >= 1``.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        _validate_page_size(page_size)
        self._page_size = page_size
        self._view_length = 0
        self._current_page = 1
        self._total_pages = 1

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_pages(self) -> int:
        return self._total_pages

    def recompute(self, view_length: int) -> None:
        """Recompute the page count for a changed view and clamp the current page."""
        self._view_length = view_length
        self._total_pages = total_pages_for(view_length, self._page_size)
        self._current_page = clamp_page(self._current_page, self._total_pages)

    def set_page_size(self, page_size: int) -> None:
        _validate_page_size(page_size)
        self._page_size = page_size
        self.recompute(self._view_length)

    def go_to_page(self, page: int) -> bool:
        """Move to page if it is in range; out-of-range requests are ignored."""
        if page < 1 or page > self._total_pages:
            return False
        self._current_page = page
        return True

    def slice(self, view: Sequence[T]) -> PageSlice[T]:
        return paginate(view, self._page_size, self._current_page)


def _validate_page_size(page_size: int) -> None:
    if page_size < 1:
        raise PagingValidationError("page_size must be >= 1")
