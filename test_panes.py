import curses
import unittest
from types import SimpleNamespace

from form_pane import draw_form, field_title, visible_window
from form_state import FIELD_AMOUNT, FIELD_DATE, FIELD_DESCRIPTION, FormState
from navigation import Tab
from report_pane import bar_heights
from status_bar import INFO_TEXT, render_status
from tab_bar import tab_spans
from transaction import EXPENSES, TransactionSet
from transactions_pane import TransactionsPane, column_widths, scrollbar_thumb


class TransactionsPaneTests(unittest.TestCase):
    def test_column_widths_fill_the_row(self):
        widths = column_widths(43)
        self.assertEqual(len(widths), 4)
        self.assertEqual(sum(widths) + 3, 43)

    def test_viewport_follows_selection(self):
        pane = TransactionsPane()
        pane._adjust_viewport(selected=7, visible_rows=5, total_rows=20)
        self.assertEqual(pane.row_offset, 3)
        pane._adjust_viewport(selected=1, visible_rows=5, total_rows=20)
        self.assertEqual(pane.row_offset, 1)
        pane._adjust_viewport(selected=None, visible_rows=5, total_rows=0)
        self.assertEqual(pane.row_offset, 0)

    def test_scrollbar_thumb_bounds(self):
        self.assertEqual(scrollbar_thumb(20, 0, 10), 0)
        self.assertEqual(scrollbar_thumb(20, 19, 10), 9)
        self.assertEqual(scrollbar_thumb(0, 0, 10), 0)


class FakeWindow:
    def __init__(self, h, w, log=None):
        self.h, self.w = h, w
        self.log = [] if log is None else log

    def getmaxyx(self):
        return self.h, self.w

    def derwin(self, h, w, y, x):
        return FakeWindow(h, w, self.log)

    def addnstr(self, y, x, text, n, attr=0):
        self.log.append(text[:n])

    def texts(self):
        return self.log

    def erase(self):
        pass

    def box(self):
        pass

    def attron(self, attr):
        pass

    def attroff(self, attr):
        pass


def _type_into(form, index, text):
    form.active = index
    for ch in text:
        form.input_to_active_field(ch)


class FormPaneTests(unittest.TestCase):
    def test_untouched_field_shows_label(self):
        form = FormState()
        self.assertEqual(field_title(form, FIELD_AMOUNT, Tab.ADD_EXPENSE), "Enter Expense Amount")
        self.assertEqual(field_title(form, FIELD_AMOUNT, Tab.ADD_INCOME), "Enter Income Amount")
        self.assertEqual(field_title(form, FIELD_DATE, Tab.ADD_INCOME), "Enter Date (YYYY-MM-DD)")

    def test_touched_field_shows_annotation(self):
        form = FormState()
        _type_into(form, FIELD_DATE, "2024-02-30")
        self.assertEqual(field_title(form, FIELD_DATE, Tab.ADD_EXPENSE), "ERROR: Invalid Date Format")
        for _ in range(2):
            form.input_to_active_field(curses.KEY_BACKSPACE)
        _type_into(form, FIELD_DATE, "29")
        self.assertEqual(form.text(FIELD_DATE), "2024-02-29")
        self.assertEqual(field_title(form, FIELD_DATE, Tab.ADD_EXPENSE), "OK")

    def test_visible_window_keeps_cursor_in_view(self):
        self.assertEqual(visible_window("abc", 3, 10), (0, "abc"))
        self.assertEqual(visible_window("abcdefghij", 10, 4), (7, "hij"))
        self.assertEqual(visible_window("abcdefghij", 2, 4), (0, "abcd"))

    def test_drawing_leaves_field_alone(self):
        form = FormState()
        _type_into(form, FIELD_DESCRIPTION, "a long lunch with the team")
        field = form.fields[FIELD_DESCRIPTION]
        before = dict(vars(field))
        state = SimpleNamespace(
            form=form,
            current_tab=Tab.ADD_EXPENSE,
            blink=SimpleNamespace(visible=True),
            bucket=EXPENSES,
            data=TransactionSet(),
        )
        win = FakeWindow(20, 9)

        draw_form(win, state)
        draw_form(win, state)

        self.assertEqual(vars(field), before)
        self.assertIn("team", win.texts())


class MiscViewTests(unittest.TestCase):
    def test_bar_heights_scale_to_tallest(self):
        self.assertEqual(bar_heights([50, 100], 10), [5, 10])
        self.assertEqual(bar_heights([0, 0], 10), [0, 0])

    def test_tab_spans_mark_current(self):
        spans = tab_spans(Tab.REPORT)
        selected = [text for text, sel in spans if sel]
        self.assertEqual(selected, [" Report "])
        self.assertEqual(sum(1 for text, _ in spans if text == "|"), 4)

    def test_render_status_prefers_message(self):
        self.assertEqual(render_status("Saved", 8), " Saved  ")
        self.assertTrue(render_status(None, 200).startswith(" " + INFO_TEXT))


if __name__ == "__main__":
    unittest.main()
