"""
Main Textual application class for the Artwork Browser
"""

from __future__ import annotations

from typing import Dict, Any

from textual.app import App
from textual.binding import Binding

from artwork_browser.di import build_container, Container
from artwork_browser.ui.screens.artworks_screen import ArtworksScreen
from simple_logger import Slogger


class ArtworkBrowserApp(App):
    """Terminal browser for a paginated artworks collection."""

    CSS_PATH = "css/main.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, config: Dict[str, Any], container: Container | None = None) -> None:
        super().__init__()
        self.config = config
        self.container: Container = container or build_container(config)
        self.title = config.get("ui", {}).get("title", "Artwork Browser")

    def on_mount(self) -> None:
        Slogger.info("Opening ArtworksScreen", {"per_page": self.container.per_page})
        self.push_screen(
            ArtworksScreen(
                page_store=self.container.page_store,
                selection=self.container.selection_tracker,
                config=self.config,
                id="artworks_screen",
            )
        )
