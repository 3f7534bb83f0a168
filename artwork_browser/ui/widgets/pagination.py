"""
Pagination widget for moving between pages of the collection
"""

from typing import List, Optional

from textual.containers import Container
from textual.reactive import reactive
from textual.widgets import Button, Label
from textual.message import Message

PAGE_LINK_COUNT = 5


def page_count(total_records: int, per_page: int) -> int:
    if total_records <= 0 or per_page <= 0:
        return 1
    return (total_records + per_page - 1) // per_page


def page_window(current: int, total: int, size: int = PAGE_LINK_COUNT) -> List[int]:
    """
    Page numbers to offer as direct links, centred on `current`

    Args:
        current: Page on screen (1-based)
        total: Number of pages
        size: Maximum number of links

    Returns:
        Consecutive page numbers, shifted so the window never runs past
        either end of the collection
    """
    total = max(1, total)
    visible = min(size, total)
    start = max(1, current - visible // 2)
    end = min(total, start + visible - 1)
    start = max(1, end - visible + 1)
    return list(range(start, end + 1))


class Pagination(Container):
    """
    First / prev, numbered page links, next / last and a page indicator
    """

    DEFAULT_CSS = """
    Pagination {
        layout: horizontal;
        height: 3;
        content-align: center middle;
    }

    Pagination > Button {
        min-width: 5;
        margin: 0 1;
    }

    Pagination > .page-link {
        min-width: 5;
        margin: 0 0;
    }

    Pagination > .page-link.-current {
        text-style: bold reverse;
    }

    Pagination > #page-indicator {
        min-width: 15;
        content-align: center middle;
    }
    """

    current_page = reactive(1)
    total_pages = reactive(1)

    class PageChanged(Message):
        """Page changed message"""
        def __init__(self, page: int) -> None:
            super().__init__()
            self.page = page

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._links: List[int] = [1]

    def compose(self):
        yield Button("« First", id="first-page", classes="page-button")
        yield Button("< Prev", id="prev-page", classes="page-button")
        for slot in range(PAGE_LINK_COUNT):
            yield Button(str(slot + 1), id=f"page-link-{slot}", classes="page-link")
        yield Button("Next >", id="next-page", classes="page-button")
        yield Button("Last »", id="last-page", classes="page-button")
        yield Label("Page [b]1[/b] of [b]1[/b]", id="page-indicator", classes="page-indicator")

    def on_mount(self) -> None:
        self._refresh_controls()

    @property
    def page_links(self) -> List[int]:
        """Page numbers currently offered as links"""
        return list(self._links)

    def update_from_total(self, current: int, total_records: int, per_page: int) -> None:
        """
        Sync with the page actually on screen

        Args:
            current: Page number on screen
            total_records: Size of the whole remote collection
            per_page: Fixed page size
        """
        self.total_pages = page_count(total_records, per_page)
        self.current_page = current

    def _refresh_controls(self) -> None:
        current, total = self.current_page, self.total_pages
        self._links = page_window(current, total)
        if not self.is_mounted:
            return
        self.query_one("#page-indicator", Label).update(f"Page [b]{current}[/b] of [b]{total}[/b]")

        self.query_one("#first-page", Button).disabled = current <= 1
        self.query_one("#prev-page", Button).disabled = current <= 1
        self.query_one("#next-page", Button).disabled = current >= total
        self.query_one("#last-page", Button).disabled = current >= total

        for slot in range(PAGE_LINK_COUNT):
            link = self.query_one(f"#page-link-{slot}", Button)
            if slot < len(self._links):
                number = self._links[slot]
                link.label = str(number)
                link.display = True
                link.set_class(number == current, "-current")
            else:
                link.display = False

    def watch_current_page(self, current_page: int) -> None:
        self._refresh_controls()

    def watch_total_pages(self, total_pages: int) -> None:
        self._refresh_controls()

    def go_to(self, page: int) -> None:
        """Request `page`, clamped to the known range"""
        page = max(1, min(page, self.total_pages))
        if page != self.current_page:
            self.current_page = page
            self.post_message(self.PageChanged(page))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "first-page":
            self.go_to(1)
        elif button_id == "last-page":
            self.go_to(self.total_pages)
        elif button_id == "prev-page":
            self.go_to(self.current_page - 1)
        elif button_id == "next-page":
            self.go_to(self.current_page + 1)
        elif button_id.startswith("page-link-"):
            slot = int(button_id[len("page-link-"):])
            if slot < len(self._links):
                self.go_to(self._links[slot])
