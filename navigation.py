from enum import Enum
from typing import Optional


class Tab(Enum):
    HOME = "Home"
    TRANSACTIONS = "Transactions"
    ADD_EXPENSE = "Add Expense"
    ADD_INCOME = "Add Income"
    REPORT = "Report"

    @property
    def title(self) -> str:
        return self.value


TAB_ORDER = (Tab.HOME, Tab.TRANSACTIONS, Tab.ADD_EXPENSE, Tab.ADD_INCOME, Tab.REPORT)

# Report sits outside the forward cycle: it is reached only backwards from
# Home and leads forward to Transactions.
NEXT_TAB = {
    Tab.HOME: Tab.TRANSACTIONS,
    Tab.TRANSACTIONS: Tab.ADD_EXPENSE,
    Tab.ADD_EXPENSE: Tab.ADD_INCOME,
    Tab.ADD_INCOME: Tab.HOME,
    Tab.REPORT: Tab.TRANSACTIONS,
}

PREVIOUS_TAB = {
    Tab.HOME: Tab.REPORT,
    Tab.REPORT: Tab.ADD_INCOME,
    Tab.ADD_INCOME: Tab.ADD_EXPENSE,
    Tab.ADD_EXPENSE: Tab.TRANSACTIONS,
    Tab.TRANSACTIONS: Tab.HOME,
}

FORM_TABS = (Tab.ADD_EXPENSE, Tab.ADD_INCOME)


class TableScroll:
    """Selection and scroll offset for the transactions table.

    Down puts the offset on the new selection; Up puts it one row above
    the new selection. The scrollbar follows the offset, not the selection.
    """

    ITEM_HEIGHT = 4

    def __init__(self):
        self.selected: Optional[int] = None
        self.offset = 0

    def reset(self):
        self.selected = None
        self.offset = 0

    def scroll_down(self, row_count: int):
        if row_count <= 0:
            self.reset()
            return
        if self.selected is None:
            self.selected = 0
            self.offset = 0
            return
        self.selected = min(self.selected + 1, row_count - 1)
        self.offset = self.selected

    def scroll_up(self, row_count: int):
        if row_count <= 0:
            self.reset()
            return
        current = self.selected if self.selected is not None else 0
        self.selected = min(max(0, current - 1), row_count - 1)
        if self.selected > 0:
            self.offset = self.selected - 1
        else:
            self.offset = 0

    def scrollbar(self, row_count: int):
        """Return (content_length, position) for the scrollbar."""
        content_length = (max(0, row_count) + 2) * self.ITEM_HEIGHT
        position = self.offset * self.ITEM_HEIGHT
        return content_length, position
