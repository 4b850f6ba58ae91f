import curses

PAIR_ACCENT = 1  # cyan: banner, table header, borders
PAIR_GOOD = 2  # green: OK annotations, income
PAIR_BAD = 3  # red: errors, expenses
PAIR_LABEL = 4  # yellow: field labels, footer
PAIR_MENU = 5  # magenta: tab bar
PAIR_MENU_ACTIVE = 6
PAIR_ROW_SELECTED = 7
PAIR_ROW_ALT = 8
PAIR_CURSOR = 9

_ready = False


def init_colors():
    global _ready
    try:
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(PAIR_ACCENT, curses.COLOR_CYAN, -1)
        curses.init_pair(PAIR_GOOD, curses.COLOR_GREEN, -1)
        curses.init_pair(PAIR_BAD, curses.COLOR_RED, -1)
        curses.init_pair(PAIR_LABEL, curses.COLOR_YELLOW, -1)
        curses.init_pair(PAIR_MENU, curses.COLOR_MAGENTA, -1)
        curses.init_pair(PAIR_MENU_ACTIVE, curses.COLOR_BLACK, curses.COLOR_MAGENTA)
        curses.init_pair(PAIR_ROW_SELECTED, curses.COLOR_BLACK, curses.COLOR_CYAN)
        curses.init_pair(PAIR_ROW_ALT, curses.COLOR_WHITE, curses.COLOR_BLACK)
        curses.init_pair(PAIR_CURSOR, curses.COLOR_BLACK, curses.COLOR_CYAN)
        _ready = True
    except curses.error:
        _ready = False


def attr(pair, extra=0):
    if not _ready:
        return extra
    return curses.color_pair(pair) | extra


def draw_box(win, title="", title_attr=0, border_attr=0):
    """Border the whole window and put a title in the top edge."""
    h, w = win.getmaxyx()
    try:
        win.attron(border_attr)
        win.box()
        win.attroff(border_attr)
    except curses.error:
        pass
    if title and w > 4:
        try:
            win.addnstr(0, 2, f" {title} ", w - 4, title_attr)
        except curses.error:
            pass


def put(win, y, x, text, attr_=0):
    """addnstr clipped to the window; off-window writes are dropped."""
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x < 0 or x >= w:
        return
    try:
        win.addnstr(y, x, text, w - x, attr_)
    except curses.error:
        pass
