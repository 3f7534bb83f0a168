"""
Loading indicator shown while a page fetch is in flight.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.widgets import Static, LoadingIndicator


class LoadingOverlay(Static):
    """Spinner plus message, hidden whenever nothing is loading."""

    is_loading = reactive(False)
    message = reactive("Loading...")

    def __init__(
        self,
        message: str = "Loading...",
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ):
        super().__init__(name=name, id=id, classes=classes)
        self.message = message
        self.is_loading = False

    def compose(self) -> ComposeResult:
        with Container(id="loading-container"):
            yield LoadingIndicator()
            yield Static(self.message, id="loading-message")

    def on_mount(self) -> None:
        self.display = self.is_loading

    def watch_is_loading(self, is_loading: bool) -> None:
        self.display = is_loading

    def watch_message(self, message: str) -> None:
        if self.is_mounted:
            self.query_one("#loading-message", Static).update(message)

    def set_loading(self, loading: bool, message: str | None = None) -> None:
        """Follow the page store's loading flag."""
        if message:
            self.message = message
        self.is_loading = loading
