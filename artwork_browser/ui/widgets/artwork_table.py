"""
DataTable widget for one page of artworks with a checkbox column
"""

from typing import Optional, Sequence

from rich.text import Text
from textual.binding import Binding
from textual.widgets import DataTable
from textual.message import Message

from artwork_browser.ui.view_binding import COLUMNS, RowView, checkbox

SELECT_COLUMN = "selected"


class ArtworkTable(DataTable):
    """
    DataTable that turns row and header activation into selection toggles
    """

    BINDINGS = [
        Binding("space", "toggle_row", "Toggle Row", show=True),
        Binding("a", "toggle_page", "Toggle Page", show=True),
    ]

    class RowToggled(Message):
        """A row's checkbox was activated"""
        def __init__(self, row_index: int) -> None:
            super().__init__()
            self.row_index = row_index

    class HeaderToggled(Message):
        """The header checkbox was activated"""

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        """
        Initialize the ArtworkTable

        Args:
            id: Optional widget ID
            classes: Optional CSS classes
        """
        super().__init__(id=id, classes=classes)
        self.cursor_type = "row"
        self.zebra_stripes = True

    def on_mount(self) -> None:
        self.add_class("artworks-table")

    def show_rows(self, rows: Sequence[RowView], header_checked: bool) -> None:
        """
        Rebuild the table from freshly derived rows, keeping the cursor row.

        Args:
            rows: Rows for the current page
            header_checked: Whether the header checkbox shows the page as fully selected
        """
        cursor_row = self.cursor_row
        self.clear(columns=True)
        self.add_column(Text(checkbox(header_checked), style="bold"), key=SELECT_COLUMN)
        for key, label in COLUMNS:
            self.add_column(label, key=key)

        for idx, row in enumerate(rows):
            self.add_row(row.checkbox, *row.cells, key=idx)

        if rows:
            self.move_cursor(row=min(cursor_row, len(rows) - 1), animate=False)

    def action_toggle_row(self) -> None:
        if self.row_count:
            self.post_message(self.RowToggled(self.cursor_row))

    def action_toggle_page(self) -> None:
        self.post_message(self.HeaderToggled())

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Enter or a click on a row toggles it"""
        event.stop()
        self.post_message(self.RowToggled(event.cursor_row))

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        event.stop()
        if event.column_key.value == SELECT_COLUMN:
            self.post_message(self.HeaderToggled())
