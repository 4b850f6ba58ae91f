import pandas as pd

from transaction import TransactionSet

TABLE_COLUMNS = ["Date", "Amount", "Category", "Description"]


def format_amount(amount: float) -> str:
    return f"{amount:.2f}$"


def transactions_frame(data: TransactionSet) -> pd.DataFrame:
    """One row per transaction, expenses first, with display-ready text."""
    rows = [
        {
            "Date": t.date.isoformat(),
            "Amount": format_amount(t.amount),
            "Category": t.category,
            "Description": t.description,
            "_amount": t.amount,
        }
        for t in data.all_transactions()
    ]
    if not rows:
        return pd.DataFrame(columns=TABLE_COLUMNS + ["_amount"])
    return pd.DataFrame(rows, columns=TABLE_COLUMNS + ["_amount"])


def totals(data: TransactionSet) -> dict:
    expenses = pd.Series([t.amount for t in data.expenses], dtype="float64")
    income = pd.Series([t.amount for t in data.income], dtype="float64")
    total_expenses = float(expenses.abs().sum())
    total_income = float(income.sum())
    return {
        "expenses": total_expenses,
        "income": total_income,
        "net": total_income - total_expenses,
    }
