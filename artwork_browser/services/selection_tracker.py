# artwork_browser/services/selection_tracker.py
"""
Cross-page selection state.

Selections are grouped by page number and are sticky: leaving a page and
coming back shows exactly what was selected there. "Select all" only ever
means the records currently loaded for one page; records on pages that were
never fetched cannot be selected because their identifiers are unknown.

A page with no entry and a page with an empty set both mean "nothing
selected on that page" to every query.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Hashable, Iterable, Set, Tuple, Union

RecordId = Hashable


@dataclass(frozen=True, slots=True)
class ToggleOne:
    """A single row checkbox was switched."""

    page: int
    id: RecordId
    selected: bool


@dataclass(frozen=True, slots=True)
class ToggleAllOnPage:
    """The header checkbox was switched for the page holding `ids`."""

    page: int
    ids: Tuple[RecordId, ...]
    selected: bool


SelectionEvent = Union[ToggleOne, ToggleAllOnPage]


class SelectionTracker:
    """Maps page number -> set of selected record identifiers on that page."""

    def __init__(self) -> None:
        self._pages: Dict[int, Set[RecordId]] = {}

    # ------------------------------------------------------------------ #
    # queries
    # ------------------------------------------------------------------ #

    def is_selected(self, page: int, record_id: RecordId) -> bool:
        return record_id in self._pages.get(page, ())

    def is_page_fully_selected(self, page: int, ids: Iterable[RecordId]) -> bool:
        """
        True iff `ids` is non-empty and every one of them is selected on `page`.

        An empty page is never fully selected, so the header checkbox of an
        empty table stays unchecked.
        """
        ids = list(ids)
        if not ids:
            return False
        selected = self._pages.get(page)
        if not selected:
            return False
        return all(record_id in selected for record_id in ids)

    def total_selected_count(self) -> int:
        return sum(len(ids) for ids in self._pages.values())

    def selected_on_page(self, page: int) -> FrozenSet[RecordId]:
        return frozenset(self._pages.get(page, ()))

    # ------------------------------------------------------------------ #
    # mutations
    # ------------------------------------------------------------------ #

    def toggle_one(self, page: int, record_id: RecordId, selected: bool) -> None:
        if selected:
            self._pages.setdefault(page, set()).add(record_id)
        elif page in self._pages:
            self._pages[page].discard(record_id)

    def set_page_all(self, page: int, ids: Iterable[RecordId], selected: bool) -> None:
        """
        Select every id in `ids` on `page`, or clear the page.

        Selecting is a union: ids already selected on the page but missing
        from `ids` stay selected. Clearing empties the page's set whatever
        `ids` holds.
        """
        if selected:
            self._pages.setdefault(page, set()).update(ids)
        elif page in self._pages:
            self._pages[page].clear()

    def apply(self, event: SelectionEvent) -> None:
        """Route a view event onto the matching mutation."""
        if isinstance(event, ToggleOne):
            self.toggle_one(event.page, event.id, event.selected)
        elif isinstance(event, ToggleAllOnPage):
            self.set_page_all(event.page, event.ids, event.selected)
        else:
            raise TypeError(f"Unknown selection event: {event!r}")

    def __repr__(self) -> str:
        return f"SelectionTracker(pages={len(self._pages)}, selected={self.total_selected_count()})"
