import curses


class ScreenLayout:
    MARGIN = 2
    BANNER_H = 4
    TABS_H = 3
    FOOTER_H = 3
    MIN_BODY_H = 14
    MIN_W = 30

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        inner_h = self.H - 2 * self.MARGIN
        inner_w = self.W - 2 * self.MARGIN
        fixed_h = self.BANNER_H + self.TABS_H + self.FOOTER_H

        self.too_small = inner_h < fixed_h + self.MIN_BODY_H or inner_w < self.MIN_W
        if self.too_small:
            self.banner_win = self.tabs_win = self.body_win = self.footer_win = None
            return

        y = self.MARGIN
        x = self.MARGIN
        self.body_h = inner_h - fixed_h

        self.banner_win = curses.newwin(self.BANNER_H, inner_w, y, x)
        y += self.BANNER_H
        self.tabs_win = curses.newwin(self.TABS_H, inner_w, y, x)
        y += self.TABS_H
        self.body_win = curses.newwin(self.body_h, inner_w, y, x)
        y += self.body_h
        self.footer_win = curses.newwin(self.FOOTER_H, inner_w, y, x)

        # panes draw their own cursor glyph; the hardware cursor stays hidden
        for win in (self.banner_win, self.tabs_win, self.body_win, self.footer_win):
            win.leaveok(True)

    def windows(self):
        if self.too_small:
            return ()
        return (self.banner_win, self.tabs_win, self.body_win, self.footer_win)
