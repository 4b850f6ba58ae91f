import math
from dataclasses import dataclass, field
from datetime import date
from typing import List


EXPENSES = "expenses"
INCOME = "income"
BUCKETS = (EXPENSES, INCOME)

FALLBACK_CATEGORY = "Other"

DEFAULT_EXPENSE_CATEGORIES = [
    "Food",
    "Housing",
    "Transportation",
    "Entertainment",
    "Health",
    "Bills",
    FALLBACK_CATEGORY,
]
DEFAULT_INCOME_CATEGORIES = ["Salary", "Interest", "Gifts", FALLBACK_CATEGORY]

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class Transaction:
    id: int
    amount: float  # negative for expenses
    category: str
    date: date
    description: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "amount": self.amount,
            "category": self.category,
            "date": self.date.isoformat(),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, raw) -> "Transaction":
        if not isinstance(raw, dict):
            raise ValueError(f"transaction must be an object, got {type(raw).__name__}")
        tx_id = raw["id"]
        if isinstance(tx_id, bool) or not isinstance(tx_id, int):
            raise ValueError(f"transaction id must be an integer: {tx_id!r}")
        if tx_id < 1:
            raise ValueError(f"transaction id must be 1 or more: {tx_id}")
        amount = raw["amount"]
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValueError(f"transaction amount must be a number: {amount!r}")
        if not math.isfinite(amount):
            raise ValueError(f"transaction amount must be finite: {amount!r}")
        category = raw["category"]
        description = raw["description"]
        if not isinstance(category, str) or not isinstance(description, str):
            raise ValueError("transaction category and description must be strings")
        return cls(
            id=tx_id,
            amount=float(amount),
            category=category,
            date=date.fromisoformat(raw["date"]),
            description=description,
        )


def _with_fallback(categories: List[str]) -> List[str]:
    seen = []
    for name in categories:
        if name not in seen:
            seen.append(name)
    if FALLBACK_CATEGORY not in seen:
        seen.append(FALLBACK_CATEGORY)
    return seen


def _parse_names(raw, key) -> List[str]:
    if not isinstance(raw, list) or not all(isinstance(x, str) for x in raw):
        raise ValueError(f"{key} must be a list of strings")
    return _with_fallback(raw)


@dataclass
class TransactionSet:
    expenses: List[Transaction] = field(default_factory=list)
    income: List[Transaction] = field(default_factory=list)
    expense_categories: List[str] = field(
        default_factory=lambda: list(DEFAULT_EXPENSE_CATEGORIES)
    )
    income_categories: List[str] = field(
        default_factory=lambda: list(DEFAULT_INCOME_CATEGORIES)
    )

    def bucket(self, name: str) -> List[Transaction]:
        if name == EXPENSES:
            return self.expenses
        if name == INCOME:
            return self.income
        raise ValueError(f"Invalid transaction type: {name}")

    def categories(self, name: str) -> List[str]:
        if name == EXPENSES:
            return self.expense_categories
        if name == INCOME:
            return self.income_categories
        raise ValueError(f"Invalid transaction type: {name}")

    def all_transactions(self) -> List[Transaction]:
        """Expenses first, then income, each in insertion order."""
        return list(self.expenses) + list(self.income)

    def clone(self) -> "TransactionSet":
        # Transactions are frozen, so copying the lists is enough.
        return TransactionSet(
            expenses=list(self.expenses),
            income=list(self.income),
            expense_categories=list(self.expense_categories),
            income_categories=list(self.income_categories),
        )

    def to_dict(self) -> dict:
        return {
            "transactions": {
                EXPENSES: [t.to_dict() for t in self.expenses],
                INCOME: [t.to_dict() for t in self.income],
                "expense_categories": list(self.expense_categories),
                "income_categories": list(self.income_categories),
            }
        }

    @classmethod
    def from_dict(cls, payload) -> "TransactionSet":
        if not isinstance(payload, dict) or not isinstance(
            payload.get("transactions"), dict
        ):
            raise ValueError("missing 'transactions' object")
        body = payload["transactions"]
        lists = {}
        for key in BUCKETS:
            items = body[key]
            if not isinstance(items, list):
                raise ValueError(f"{key} must be a list")
            lists[key] = [Transaction.from_dict(item) for item in items]
        return cls(
            expenses=lists[EXPENSES],
            income=lists[INCOME],
            expense_categories=_parse_names(
                body["expense_categories"], "expense_categories"
            ),
            income_categories=_parse_names(
                body["income_categories"], "income_categories"
            ),
        )
