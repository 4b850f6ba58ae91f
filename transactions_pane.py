# ~/Apps/fintrackr/transactions_pane.py
import curses

from palette import (
    PAIR_ACCENT,
    PAIR_BAD,
    PAIR_GOOD,
    PAIR_ROW_ALT,
    PAIR_ROW_SELECTED,
    attr,
    draw_box,
    put,
)
from summary import TABLE_COLUMNS, transactions_frame


def column_widths(total_w, n_cols=len(TABLE_COLUMNS), spacing=1):
    """Split the width evenly (25% each for four columns)."""
    usable = max(n_cols, total_w - spacing * (n_cols - 1))
    base = usable // n_cols
    widths = [base] * n_cols
    widths[-1] += usable - base * n_cols
    return widths


def scrollbar_thumb(content_length, position, track_h):
    """Row of the scrollbar thumb inside a track of ``track_h`` cells."""
    if track_h <= 0:
        return 0
    if content_length <= 1:
        return 0
    frac = min(1.0, max(0.0, position / (content_length - 1)))
    return int(round(frac * (track_h - 1)))


class TransactionsPane:
    def __init__(self):
        # first visible row; follows the selection like a table viewport
        self.row_offset = 0

    def _adjust_viewport(self, selected, visible_rows, total_rows):
        if total_rows == 0 or visible_rows <= 0:
            self.row_offset = 0
            return
        if selected is not None:
            if selected < self.row_offset:
                self.row_offset = selected
            elif selected >= self.row_offset + visible_rows:
                self.row_offset = selected - visible_rows + 1
        max_offset = max(0, total_rows - visible_rows)
        self.row_offset = max(0, min(self.row_offset, max_offset))

    def draw(self, win, state):
        win.erase()
        accent = attr(PAIR_ACCENT, curses.A_BOLD)
        draw_box(win, "Transactions", title_attr=accent, border_attr=attr(PAIR_ACCENT))
        h, w = win.getmaxyx()

        df = transactions_frame(state.data)
        total_rows = len(df)

        # inner area leaves the right column for the scrollbar
        inner_x = 1
        inner_w = max(4, w - 3)
        widths = column_widths(inner_w)

        x = inner_x
        for name, cw in zip(TABLE_COLUMNS, widths):
            put(win, 1, x, name[:cw].ljust(cw), accent)
            x += cw + 1

        body_top = 2
        visible_rows = max(0, h - body_top - 1)
        selected = state.table.selected
        self._adjust_viewport(selected, visible_rows, total_rows)

        for i in range(visible_rows):
            r = self.row_offset + i
            if r >= total_rows:
                break
            row = df.iloc[r]
            if r == selected:
                base = attr(PAIR_ROW_SELECTED)
            elif r % 2 == 0:
                base = attr(PAIR_ROW_ALT)
            else:
                base = 0
            amount_attr = base
            if r != selected:
                amount_attr = attr(PAIR_GOOD if row["_amount"] >= 0 else PAIR_BAD)
            y = body_top + i
            put(win, y, inner_x, " " * inner_w, base)
            x = inner_x
            for name, cw in zip(TABLE_COLUMNS, widths):
                text = str(row[name])[:cw].ljust(cw)
                put(win, y, x, text, amount_attr if name == "Amount" else base)
                x += cw + 1

        if total_rows == 0:
            put(win, body_top, inner_x, "No transactions yet.")

        self._draw_scrollbar(win, state, total_rows)

    def _draw_scrollbar(self, win, state, total_rows):
        h, w = win.getmaxyx()
        track_top = 1
        track_h = h - 2
        if track_h <= 0:
            return
        content_length, position = state.table.scrollbar(total_rows)
        thumb = scrollbar_thumb(content_length, position, track_h)
        x = w - 2
        for i in range(track_h):
            glyph = "█" if i == thumb else "║"
            put(win, track_top + i, x, glyph, attr(PAIR_ACCENT))
