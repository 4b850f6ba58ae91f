import curses

from navigation import TAB_ORDER
from palette import PAIR_ACCENT, PAIR_MENU, PAIR_MENU_ACTIVE, attr, draw_box, put

APP_TITLE = "FinTrackR"


def draw_banner(win):
    win.erase()
    draw_box(win)
    h, w = win.getmaxyx()
    x = max(1, (w - len(APP_TITLE)) // 2)
    put(win, h // 2, x, APP_TITLE, attr(PAIR_ACCENT, curses.A_BOLD))


def tab_spans(current):
    """Return [(text, selected)] pieces for the tab strip."""
    spans = []
    for i, tab in enumerate(TAB_ORDER):
        if i:
            spans.append(("|", False))
        spans.append((f" {tab.title} ", tab == current))
    return spans


def draw_tabs(win, current):
    win.erase()
    menu = attr(PAIR_MENU, curses.A_BOLD)
    draw_box(win, "Menu", title_attr=menu, border_attr=menu)
    x = 2
    for text, selected in tab_spans(current):
        style = attr(PAIR_MENU_ACTIVE, curses.A_BOLD) if selected else menu
        put(win, 1, x, text, style)
        x += len(text)
