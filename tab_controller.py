import curses

from logging_setup import get_logger
from navigation import Tab
from submission import submit_transaction
from transaction import EXPENSES
from transaction_store import StoreError


log = get_logger("fintrackr.controller")

KEY_TAB = 9
KEY_ESC = 27
ENTER_KEYS = (10, 13, curses.KEY_ENTER)


def normalize_key(ch):
    """Map ``get_wch`` control characters to their codes; printable text stays a str."""
    if isinstance(ch, str) and len(ch) == 1 and (ord(ch) < 32 or ord(ch) == 127):
        return ord(ch)
    return ch


class TabController:
    def __init__(self, state, today=None):
        self.state = state
        self._today = today

    def handle_key(self, ch):
        """Route one key. Returns "quit" when the loop should stop."""
        if ch == KEY_ESC:
            return "quit"
        if ch == KEY_TAB:
            self.state.next_tab()
            return None
        if ch == curses.KEY_BTAB:
            self.state.previous_tab()
            return None

        tab = self.state.current_tab
        if tab == Tab.TRANSACTIONS:
            self._handle_table_key(ch)
        elif tab in (Tab.ADD_EXPENSE, Tab.ADD_INCOME):
            self._handle_form_key(ch)
        # Home and Report take no other keys
        return None

    def _handle_table_key(self, ch):
        rows = self.state.row_count
        if ch == curses.KEY_DOWN:
            self.state.table.scroll_down(rows)
        elif ch == curses.KEY_UP:
            self.state.table.scroll_up(rows)

    def _handle_form_key(self, ch):
        form = self.state.form
        if ch == curses.KEY_DOWN:
            form.next_field()
        elif ch == curses.KEY_UP:
            form.previous_field()
        elif ch in ENTER_KEYS:
            self._submit()
        else:
            self.state.input_to_active_field(ch)

    def _submit(self):
        bucket = self.state.bucket
        try:
            transaction = submit_transaction(self.state, today=self._today)
        except StoreError as exc:
            log.error("saving %s failed: %s", bucket, exc)
            self.state.set_status(f"Save failed: {exc}", 5)
            return
        if transaction is None:
            return
        self.state.switch_tab(Tab.TRANSACTIONS)
        label = "Expense" if bucket == EXPENSES else "Income"
        self.state.set_status(f"{label} added", 3)
