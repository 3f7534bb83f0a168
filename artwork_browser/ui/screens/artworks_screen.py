# artwork_browser/ui/screens/artworks_screen.py
"""
Main Artworks screen: one page of the collection with cross-page selection
"""

from __future__ import annotations

from typing import Any, Dict

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

# Business layer
from artwork_browser.services.page_store import LoadOutcome, PageStore
from artwork_browser.services.selection_tracker import (
    SelectionTracker,
    ToggleAllOnPage,
    ToggleOne,
)

# UI helpers
from artwork_browser.ui import view_binding
from artwork_browser.ui.controllers.status_bar import StatusBarController
from simple_logger import Slogger

# Widgets
from artwork_browser.ui.widgets.artwork_table import ArtworkTable
from artwork_browser.ui.widgets.loading_indicator import LoadingOverlay
from artwork_browser.ui.widgets.pagination import Pagination


class ArtworksScreen(Screen):
    """Table of the current page, paginator and selected-count label."""

    BINDINGS = [
        ("n", "next_page", "Next Page"),
        ("p", "prev_page", "Prev Page"),
        ("r", "reload", "Reload"),
    ]

    def __init__(
        self,
        page_store: PageStore,
        selection: SelectionTracker,
        config: Dict[str, Any],
        *,
        id: str = "artworks_screen",
    ) -> None:
        super().__init__(id=id)
        self.config = config
        self.page_store = page_store
        self.selection = selection

    # ------------------------------------------------------------------ #
    # Compose & mount
    # ------------------------------------------------------------------ #

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Container(id="main-container"):
            with Vertical(id="content-area"):
                yield Static(self.config.get("ui", {}).get("title", ""), id="title")
                yield Static(id="selection-panel")
                yield LoadingOverlay("Loading artworks...", id="loading-overlay")
                yield ArtworkTable(id="artworks-table")
                yield Pagination(id="pagination")

        yield Static(id="status-bar", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(ArtworkTable).styles.height = "1fr"
        self.status_controller = StatusBarController(self.query_one("#status-bar", Static))
        self.page_store.on_loading_change = self._on_loading_change

        self.render_page()
        self.request_page(self.page_store.requested_page)

    def on_unmount(self) -> None:
        self.page_store.on_loading_change = None

    # ------------------------------------------------------------------ #
    # Fetching
    # ------------------------------------------------------------------ #

    def request_page(self, page: int) -> None:
        """Start fetching `page`; only the newest request may update the table."""
        Slogger.debug(f"Page {page} requested", {"screen": "ArtworksScreen"})
        self.run_worker(self._fetch_page(page), group="page_fetch")

    async def _fetch_page(self, page: int) -> None:
        outcome = await self.page_store.load(page)
        if outcome is LoadOutcome.LOADED:
            self.render_page()
        elif outcome is LoadOutcome.FAILED:
            self.notify(
                f"Could not load page {page}. Press r to retry.",
                title="Fetch Failed",
                severity="warning",
                timeout=5,
            )
            # put the paginator back on the page that is still displayed
            self.render_page()

    def _on_loading_change(self, loading: bool) -> None:
        self.query_one(LoadingOverlay).set_loading(
            loading, f"Loading page {self.page_store.requested_page}..."
        )
        self._render_status()

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def render_page(self) -> None:
        """Re-derive every selection-dependent visual from the tracker."""
        store = self.page_store
        page = store.current_page
        ids = store.page_ids()

        rows = view_binding.build_rows(store.records, page, self.selection)
        self.query_one(ArtworkTable).show_rows(
            rows, view_binding.header_checked(page, ids, self.selection)
        )
        self.query_one("#selection-panel", Static).update(
            view_binding.selected_count_label(self.selection)
        )
        self.query_one(Pagination).update_from_total(page, store.total_records, store.per_page)
        self._render_status()

    def _render_status(self) -> None:
        store = self.page_store
        error = store.last_error
        self.status_controller.update(
            store.page,
            self.selection.total_selected_count(),
            selected_on_page=len(self.selection.selected_on_page(store.current_page)),
            loading_page=store.requested_page if store.is_loading else None,
            error=type(error).__name__ if error else None,
        )

    # ------------------------------------------------------------------ #
    # Event handlers
    # ------------------------------------------------------------------ #

    def on_pagination_page_changed(self, event: Pagination.PageChanged) -> None:
        self.request_page(event.page)

    def on_artwork_table_row_toggled(self, event: ArtworkTable.RowToggled) -> None:
        records = self.page_store.records
        if not 0 <= event.row_index < len(records):
            return
        page = self.page_store.current_page
        record_id = records[event.row_index].id
        self.selection.apply(
            ToggleOne(page, record_id, not self.selection.is_selected(page, record_id))
        )
        self.render_page()

    def on_artwork_table_header_toggled(self, event: ArtworkTable.HeaderToggled) -> None:
        page = self.page_store.current_page
        ids = tuple(self.page_store.page_ids())
        checked = view_binding.header_checked(page, ids, self.selection)
        self.selection.apply(ToggleAllOnPage(page, ids, not checked))
        self.render_page()

    # ------------------------------------------------------------------ #
    # Actions
    # ------------------------------------------------------------------ #

    def action_next_page(self) -> None:
        page = self.page_store.page
        if page.has_next():
            self.query_one(Pagination).go_to(page.page + 1)

    def action_prev_page(self) -> None:
        page = self.page_store.page
        if page.has_prev():
            self.query_one(Pagination).go_to(page.page - 1)

    def action_reload(self) -> None:
        self.request_page(self.page_store.requested_page)
