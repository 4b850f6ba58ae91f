# ~/Apps/fintrackr/orchestrator.py
import curses

import palette
from form_pane import draw_form
from home_pane import draw_home
from logging_setup import get_logger
from navigation import Tab
from report_pane import draw_report
from screen_layout import ScreenLayout
from status_bar import draw_footer
from tab_bar import draw_banner, draw_tabs
from tab_controller import TabController, normalize_key
from transactions_pane import TransactionsPane


log = get_logger("fintrackr.orchestrator")

KEY_CTRL_C = 3


class Orchestrator:
    def __init__(self, stdscr, app_state, poll_interval_ms=100):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        self.stdscr.timeout(poll_interval_ms)

        palette.init_colors()

        self.state = app_state
        self.controller = TabController(app_state)
        self.layout = ScreenLayout(stdscr)
        self.transactions_pane = TransactionsPane()

    # ---------------- UI ----------------

    def _draw_body(self, win):
        tab = self.state.current_tab
        if tab == Tab.HOME:
            draw_home(win)
        elif tab == Tab.TRANSACTIONS:
            self.transactions_pane.draw(win, self.state)
        elif tab in (Tab.ADD_EXPENSE, Tab.ADD_INCOME):
            draw_form(win, self.state)
        else:
            draw_report(win, self.state)

    def redraw(self):
        self.stdscr.erase()
        if self.layout.too_small:
            try:
                self.stdscr.addstr(0, 0, "Terminal too small")
            except curses.error:
                pass
            self.stdscr.refresh()
            return

        self.stdscr.noutrefresh()
        draw_banner(self.layout.banner_win)
        draw_tabs(self.layout.tabs_win, self.state.current_tab)
        self._draw_body(self.layout.body_win)
        draw_footer(self.layout.footer_win, self.state.current_status())

        for win in self.layout.windows():
            win.touchwin()
            win.noutrefresh()
        curses.doupdate()

    # ---------------- main loop ----------------

    def run(self):
        log.info("session started")
        while True:
            self.state.blink.tick()
            self.redraw()

            try:
                ch = normalize_key(self.stdscr.get_wch())
            except curses.error:
                # poll timeout, no key
                continue

            if ch == KEY_CTRL_C:
                break

            if ch == curses.KEY_RESIZE:
                self.layout = ScreenLayout(self.stdscr)
                continue

            if self.controller.handle_key(ch) == "quit":
                break
        log.info("session ended")
