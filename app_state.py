import time

from cursor_blink import CursorBlink
from form_state import FormState
from logging_setup import get_logger
from navigation import FORM_TABS, NEXT_TAB, PREVIOUS_TAB, TableScroll, Tab
from transaction import EXPENSES, INCOME, TransactionSet


log = get_logger("fintrackr.state")


class AppState:
    def __init__(self, store, data: TransactionSet, blink_ms: float = 150, clock=time.monotonic):
        self.store = store
        self.data = data
        self._clock = clock

        self.current_tab = Tab.HOME
        self.form = FormState()
        self.table = TableScroll()
        self.blink = CursorBlink(blink_ms, clock=clock)

        self.status_msg: str | None = None
        self.status_msg_until = 0.0

        self.reset_inputs()

    # ---------- tabs ----------
    def switch_tab(self, tab: Tab):
        log.debug("tab %s -> %s", self.current_tab.title, tab.title)
        self.current_tab = tab
        self.reset_inputs()

    def next_tab(self):
        self.switch_tab(NEXT_TAB[self.current_tab])

    def previous_tab(self):
        self.switch_tab(PREVIOUS_TAB[self.current_tab])

    def reset_inputs(self):
        self.table.reset()
        self.form.reset()
        self.blink.reset()

    # ---------- form helpers ----------
    @property
    def on_form_tab(self) -> bool:
        return self.current_tab in FORM_TABS

    @property
    def bucket(self) -> str | None:
        if self.current_tab == Tab.ADD_EXPENSE:
            return EXPENSES
        if self.current_tab == Tab.ADD_INCOME:
            return INCOME
        return None

    def input_to_active_field(self, ch) -> bool:
        received = self.form.input_to_active_field(ch)
        if received:
            self.blink.touch()
        return received

    # ---------- table ----------
    @property
    def row_count(self) -> int:
        return len(self.data.expenses) + len(self.data.income)

    # ---------- status ----------
    def set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = self._clock() + seconds

    def current_status(self) -> str | None:
        if self.status_msg and self._clock() < self.status_msg_until:
            return self.status_msg
        return None
