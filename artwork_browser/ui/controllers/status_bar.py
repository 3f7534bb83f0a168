# artwork_browser/ui/controllers/status_bar.py
"""Formats and updates the status bar."""

from __future__ import annotations

from typing import Optional

from textual.widgets import Static

from artwork_browser.models.pagination import Page
from artwork_browser.ui.view_binding import page_report


class StatusBarController:
    """Builds the human-readable status text and writes it to the bar."""

    def __init__(self, status_bar: Static) -> None:
        self._bar = status_bar

    @staticmethod
    def compose_text(
        page: Page,
        selected_count: int,
        *,
        selected_on_page: int = 0,
        loading_page: Optional[int] = None,
        error: Optional[str] = None,
    ) -> str:
        parts: list[str] = [
            page_report(page),
            f"Page: {page.page}/{page.pages}",
            f"Selected: {selected_count} ({selected_on_page} on this page)",
        ]
        if loading_page is not None:
            parts.append(f"Loading page {loading_page}...")
        if error:
            parts.append(f"Last fetch failed: {error} (r to retry)")
        return " | ".join(parts)

    def update(self, page: Page, selected_count: int, **kwargs) -> None:
        """Refresh the whole status line."""
        self._bar.update(self.compose_text(page, selected_count, **kwargs))
