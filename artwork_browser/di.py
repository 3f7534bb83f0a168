# artwork_browser/di.py
"""
Very small dependency-injection helper.
"""

from __future__ import annotations

from typing import Dict, Any

from artwork_browser.api.client import ArtworkApiClient
from artwork_browser.services.page_store import PageStore
from artwork_browser.services.selection_tracker import SelectionTracker


class Container:
    """Holds lazily-created singletons for one session."""

    def __init__(self, config: Dict[str, Any]) -> None:
        self._cfg = config
        self._api_client: ArtworkApiClient | None = None
        self._page_store: PageStore | None = None
        self._selection_tracker: SelectionTracker | None = None

    @property
    def per_page(self) -> int:
        return self._cfg.get("ui", {}).get("per_page", 10)

    # ---------- infra ----------
    @property
    def api_client(self) -> ArtworkApiClient:
        if self._api_client is None:
            self._api_client = ArtworkApiClient.from_config(self._cfg)
        return self._api_client

    # ---------- services ----------
    @property
    def page_store(self) -> PageStore:
        if self._page_store is None:
            self._page_store = PageStore(self.api_client, self.per_page)
        return self._page_store

    @property
    def selection_tracker(self) -> SelectionTracker:
        # created empty at start-up, lives until the app exits
        if self._selection_tracker is None:
            self._selection_tracker = SelectionTracker()
        return self._selection_tracker


# convenience factory
def build_container(config: Dict[str, Any]) -> Container:
    """Create a container for the given config."""
    return Container(config)
