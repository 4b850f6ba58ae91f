import curses

from palette import PAIR_ACCENT, PAIR_LABEL, attr, put

INFO_TEXT = "(Esc) Quit | (Tab) Next | (Shift+Tab) Prev | (↓) Down | (↑) Up"


def render_status(status_msg, width):
    text = f" {status_msg}" if status_msg else f" {INFO_TEXT}"
    return text.ljust(width)[:width]


def draw_footer(win, status_msg):
    win.erase()
    h, w = win.getmaxyx()
    put(win, 1, 1, render_status(status_msg, max(1, w - 2)), attr(PAIR_LABEL))
    try:
        win.hline(h - 1, 0, curses.ACS_HLINE | attr(PAIR_ACCENT), w)
    except curses.error:
        pass
