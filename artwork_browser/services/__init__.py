"""Business layer: page loading and selection state."""

from artwork_browser.services.page_store import LoadOutcome, PageStore
from artwork_browser.services.selection_tracker import (
    SelectionTracker,
    ToggleAllOnPage,
    ToggleOne,
)

__all__ = ["LoadOutcome", "PageStore", "SelectionTracker", "ToggleAllOnPage", "ToggleOne"]
