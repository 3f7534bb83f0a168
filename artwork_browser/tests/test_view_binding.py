import unittest
from unittest.mock import Mock

from artwork_browser.models.artwork import Artwork
from artwork_browser.models.pagination import Page
from artwork_browser.services.selection_tracker import SelectionTracker
from artwork_browser.ui import view_binding
from artwork_browser.ui.controllers.status_bar import StatusBarController
from artwork_browser.ui.widgets.pagination import page_count, page_window
from artwork_browser.utils.formatters import format_cell, format_year


class TestViewBinding(unittest.TestCase):
    def setUp(self):
        self.tracker = SelectionTracker()
        self.records = [
            Artwork(id=1, title="Water Lilies", artist_display="Claude Monet\nFrench", date_start=1906, date_end=1906),
            Artwork(id=2),
        ]

    def test_rows_follow_tracker(self):
        self.tracker.toggle_one(1, 2, True)
        rows = view_binding.build_rows(self.records, 1, self.tracker)

        self.assertEqual([r.id for r in rows], [1, 2])
        self.assertEqual([r.selected for r in rows], [False, True])
        self.assertEqual(rows[1].checkbox, view_binding.CHECKED)
        self.assertEqual(rows[0].cells[0], "Water Lilies")
        self.assertEqual(rows[0].cells[2], "Claude Monet French")
        self.assertEqual(rows[1].cells[0], "Untitled")
        self.assertEqual(len(rows[0].cells), len(view_binding.COLUMNS))

    def test_rows_are_scoped_to_page(self):
        self.tracker.toggle_one(2, 1, True)
        rows = view_binding.build_rows(self.records, 1, self.tracker)
        self.assertFalse(any(r.selected for r in rows))

    def test_header_is_rederived_after_row_toggle(self):
        ids = [r.id for r in self.records]
        self.tracker.set_page_all(1, ids, True)
        self.assertTrue(view_binding.header_checked(1, ids, self.tracker))
        self.tracker.toggle_one(1, 1, False)
        self.assertFalse(view_binding.header_checked(1, ids, self.tracker))
        self.assertFalse(view_binding.header_checked(1, [], self.tracker))

    def test_selected_count_label(self):
        self.tracker.set_page_all(1, [1, 2], True)
        self.tracker.toggle_one(5, 41, True)
        self.assertEqual(view_binding.selected_count_label(self.tracker), "Selected Artworks: 3")

    def test_page_report(self):
        page = Page(items=self.records, total=12, pages=2, page=2, per_page=10)
        self.assertEqual(view_binding.page_report(page), "Showing 11 to 12 of 12 entries")
        self.assertEqual(view_binding.page_report(Page.empty()), "Showing 0 to 0 of 0 entries")


class TestStatusBarController(unittest.TestCase):
    def test_update_writes_to_bar(self):
        bar = Mock()
        page = Page(items=[Artwork(id=1)], total=1, pages=1, page=1, per_page=10)
        StatusBarController(bar).update(page, 4, selected_on_page=1, loading_page=2)

        text = bar.update.call_args[0][0]
        self.assertIn("Selected: 4 (1 on this page)", text)
        self.assertIn("Loading page 2...", text)
        self.assertNotIn("retry", text)

    def test_error_hint(self):
        text = StatusBarController.compose_text(Page.empty(), 0, error="NetworkError")
        self.assertIn("NetworkError (r to retry)", text)


class TestPage(unittest.TestCase):
    def test_has_next_and_prev(self):
        first = Page(items=[1], total=25, pages=3, page=1, per_page=10)
        middle = Page(items=[11], total=25, pages=3, page=2, per_page=10)
        last = Page(items=[21], total=25, pages=3, page=3, per_page=10)

        self.assertEqual((first.has_prev(), first.has_next()), (False, True))
        self.assertEqual((middle.has_prev(), middle.has_next()), (True, True))
        self.assertEqual((last.has_prev(), last.has_next()), (True, False))

    def test_empty_page_has_no_neighbours(self):
        page = Page.empty()
        self.assertFalse(page.has_next())
        self.assertFalse(page.has_prev())


class TestFormatting(unittest.TestCase):
    def test_page_count(self):
        self.assertEqual(page_count(0, 10), 1)
        self.assertEqual(page_count(10, 10), 1)
        self.assertEqual(page_count(11, 10), 2)

    def test_page_window_is_centred_on_current(self):
        self.assertEqual(page_window(5, 10), [3, 4, 5, 6, 7])

    def test_page_window_is_pinned_at_the_ends(self):
        self.assertEqual(page_window(1, 10), [1, 2, 3, 4, 5])
        self.assertEqual(page_window(2, 10), [1, 2, 3, 4, 5])
        self.assertEqual(page_window(10, 10), [6, 7, 8, 9, 10])
        self.assertEqual(page_window(9, 10), [6, 7, 8, 9, 10])

    def test_page_window_shrinks_for_short_collections(self):
        self.assertEqual(page_window(2, 3), [1, 2, 3])
        self.assertEqual(page_window(1, 1), [1])
        self.assertEqual(page_window(1, 0), [1])

    def test_format_year(self):
        self.assertEqual(format_year(None), "")
        self.assertEqual(format_year(-300), "300 BCE")
        self.assertEqual(format_year(1890), "1890")

    def test_format_cell_truncates(self):
        self.assertEqual(format_cell("a" * 60, 10), "aaaaaaa...")
        self.assertEqual(format_cell(None), "N/A")


if __name__ == "__main__":
    unittest.main()
