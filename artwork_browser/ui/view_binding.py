# artwork_browser/ui/view_binding.py
"""
Pure functions from (current page records, selection queries) to what the
table, header checkbox and labels display.

Nothing here keeps a copy of selection state; every call reads the tracker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable, List, Sequence, Tuple

from artwork_browser.models.artwork import Artwork
from artwork_browser.models.pagination import Page
from artwork_browser.services.selection_tracker import SelectionTracker
from artwork_browser.utils.formatters import format_cell, format_year

CHECKED = "[x]"
UNCHECKED = "[ ]"

COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("title", "Title"),
    ("place_of_origin", "Origin"),
    ("artist_display", "Artist"),
    ("inscriptions", "Inscriptions"),
    ("date_start", "Start Date"),
    ("date_end", "End Date"),
)


@dataclass(frozen=True, slots=True)
class RowView:
    id: Hashable
    selected: bool
    cells: Tuple[str, ...]

    @property
    def checkbox(self) -> str:
        return checkbox(self.selected)


def checkbox(checked: bool) -> str:
    return CHECKED if checked else UNCHECKED


def artwork_cells(artwork: Artwork) -> Tuple[str, ...]:
    return (
        format_cell(artwork.title, 48, placeholder="Untitled"),
        format_cell(artwork.place_of_origin, 20),
        format_cell(artwork.artist_display, 40),
        format_cell(artwork.inscriptions, 30),
        format_year(artwork.date_start),
        format_year(artwork.date_end),
    )


def build_rows(records: Sequence[Artwork], page: int, tracker: SelectionTracker) -> List[RowView]:
    return [
        RowView(id=record.id, selected=tracker.is_selected(page, record.id), cells=artwork_cells(record))
        for record in records
    ]


def header_checked(page: int, ids: Iterable[Hashable], tracker: SelectionTracker) -> bool:
    """Header checkbox state, derived from the row selections on every call."""
    return tracker.is_page_fully_selected(page, ids)


def selected_count_label(tracker: SelectionTracker) -> str:
    return f"Selected Artworks: {tracker.total_selected_count()}"


def page_report(page: Page) -> str:
    """Current-page report shown next to the paginator."""
    if page.total == 0 or not page.items:
        return "Showing 0 to 0 of 0 entries" if page.total == 0 else f"Page {page.page} of {page.pages} is empty"
    return f"Showing {page.first_index()} to {page.last_index()} of {page.total} entries"
