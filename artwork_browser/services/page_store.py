# artwork_browser/services/page_store.py
"""
Holds the page currently on screen and refetches it when the page changes.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Hashable, List, Optional, Protocol

from artwork_browser.errors import BrowserError
from artwork_browser.models.artwork import Artwork
from artwork_browser.models.pagination import Page
from simple_logger import Slogger


class LoadOutcome(Enum):
    LOADED = "loaded"      # snapshot replaced
    FAILED = "failed"      # this request failed, previous snapshot kept
    STALE = "stale"        # a newer request superseded this one


class PageSource(Protocol):
    async def fetch_page(self, page: int, per_page: int) -> Page[Artwork]:
        ...


class PageStore:
    """
    Current page snapshot plus pagination meta-data.

    Only the most recent `load` may replace the snapshot: a fetch that
    completes after a newer one was requested is discarded. A failed fetch
    leaves the previous snapshot in place.
    """

    def __init__(
        self,
        source: PageSource,
        per_page: int,
        *,
        on_loading_change: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._source = source
        self.per_page = per_page
        self.on_loading_change = on_loading_change

        self._page: Page[Artwork] = Page.empty(per_page=per_page)
        self._request_seq = 0
        self.requested_page = 1
        self.is_loading = False
        self.last_error: Optional[BrowserError] = None

    # ------------------------------------------------------------------ #
    # snapshot accessors
    # ------------------------------------------------------------------ #

    @property
    def page(self) -> Page[Artwork]:
        return self._page

    @property
    def current_page(self) -> int:
        return self._page.page

    @property
    def records(self) -> List[Artwork]:
        return list(self._page.items)

    @property
    def total_records(self) -> int:
        return self._page.total

    @property
    def total_pages(self) -> int:
        return self._page.pages

    def page_ids(self) -> List[Hashable]:
        return [record.id for record in self._page.items]

    # ------------------------------------------------------------------ #
    # loading
    # ------------------------------------------------------------------ #

    def _set_loading(self, value: bool) -> None:
        self.is_loading = value
        if self.on_loading_change is not None:
            self.on_loading_change(value)

    async def load(self, page: int) -> LoadOutcome:
        """
        Fetch `page` and make it current.

        Returns:
            LOADED if the snapshot was replaced, FAILED if this request
            failed, STALE if a newer request was made while it was in flight
            (whether it succeeded or not).
        """
        page = max(1, page)
        self._request_seq += 1
        seq = self._request_seq
        self.requested_page = page
        context = {"page": page, "per_page": self.per_page, "request": seq}

        self._set_loading(True)
        try:
            result = await self._source.fetch_page(page, self.per_page)
        except BrowserError as e:
            Slogger.exception(e, "Failed to fetch page, keeping previous page", context)
            if seq != self._request_seq:
                return LoadOutcome.STALE
            self.last_error = e
            return LoadOutcome.FAILED
        finally:
            # an older request finishing must not hide the indicator of a newer one
            if seq == self._request_seq:
                self._set_loading(False)

        if seq != self._request_seq:
            Slogger.debug(f"Discarding stale result for page {page}", {**context, "latest": self._request_seq})
            return LoadOutcome.STALE

        self._page = result
        self.last_error = None
        return LoadOutcome.LOADED

    async def reload(self) -> LoadOutcome:
        """Fetch the most recently requested page again."""
        return await self.load(self.requested_page)
