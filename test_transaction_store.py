import json
import os
import tempfile
import unittest
from datetime import date
from unittest.mock import patch

from transaction import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
    EXPENSES,
    INCOME,
    Transaction,
)
from transaction_store import StoreError, TransactionStore


def _tx(tx_id, amount, when="2024-03-15", category="Food", description="Lunch"):
    return Transaction(
        id=tx_id,
        amount=amount,
        category=category,
        date=date.fromisoformat(when),
        description=description,
    )


class TransactionStoreTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "transactions.json")

    def tearDown(self):
        self.tmp.cleanup()

    def test_missing_file_is_created_with_defaults(self):
        data = TransactionStore(self.path).load()
        self.assertTrue(os.path.exists(self.path))
        self.assertEqual(data.expenses, [])
        self.assertEqual(data.income, [])
        self.assertEqual(data.expense_categories, DEFAULT_EXPENSE_CATEGORIES)
        self.assertEqual(data.income_categories, DEFAULT_INCOME_CATEGORIES)
        with open(self.path, encoding="utf-8") as f:
            payload = json.load(f)
        self.assertIn("transactions", payload)

    def test_round_trip_preserves_order_and_fields(self):
        store = TransactionStore(self.path)
        store.load()
        store.append(_tx(1, -42.5), EXPENSES)
        store.append(_tx(2, -3.0, "2024-02-29", "Other", "Bus"), EXPENSES)
        store.append(_tx(1, 1500.0, "2024-03-01", "Salary", "March pay"), INCOME)

        reloaded = TransactionStore(self.path).load()
        self.assertEqual(
            reloaded.expenses,
            [_tx(1, -42.5), _tx(2, -3.0, "2024-02-29", "Other", "Bus")],
        )
        self.assertEqual(
            reloaded.income, [_tx(1, 1500.0, "2024-03-01", "Salary", "March pay")]
        )

    def test_load_returns_independent_copy(self):
        store = TransactionStore(self.path)
        data = store.load()
        data.expenses.append(_tx(1, -1.0))
        self.assertEqual(TransactionStore(self.path).load().expenses, [])

    def test_malformed_json_is_fatal(self):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("{not json")
        with self.assertRaises(StoreError):
            TransactionStore(self.path).load()

    def test_missing_keys_are_fatal(self):
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({"transactions": {"expenses": []}}, f)
        with self.assertRaises(StoreError):
            TransactionStore(self.path).load()

    def test_bad_date_is_fatal(self):
        payload = {
            "transactions": {
                "expenses": [
                    {"id": 1, "amount": -1, "category": "Food", "date": "yesterday", "description": "x"}
                ],
                "income": [],
                "expense_categories": ["Food"],
                "income_categories": [],
            }
        }
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(payload, f)
        with self.assertRaises(StoreError):
            TransactionStore(self.path).load()

    def _write_expenses(self, expenses):
        payload = {
            "transactions": {
                "expenses": expenses,
                "income": [],
                "expense_categories": ["Food"],
                "income_categories": [],
            }
        }
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(payload, f)

    def test_non_finite_amount_is_fatal(self):
        for amount in (float("nan"), float("inf")):
            with self.subTest(amount=amount):
                self._write_expenses(
                    [{"id": 1, "amount": amount, "category": "Food", "date": "2024-03-15", "description": "x"}]
                )
                with self.assertRaises(StoreError):
                    TransactionStore(self.path).load()

    def test_non_positive_id_is_fatal(self):
        for tx_id in (0, -4):
            with self.subTest(tx_id=tx_id):
                self._write_expenses(
                    [{"id": tx_id, "amount": -1, "category": "Food", "date": "2024-03-15", "description": "x"}]
                )
                with self.assertRaises(StoreError):
                    TransactionStore(self.path).load()

    def test_other_category_is_always_present(self):
        payload = {
            "transactions": {
                "expenses": [],
                "income": [],
                "expense_categories": ["Food"],
                "income_categories": [],
            }
        }
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(payload, f)
        data = TransactionStore(self.path).load()
        self.assertEqual(data.expense_categories, ["Food", "Other"])
        self.assertEqual(data.income_categories, ["Other"])

    def test_failed_write_keeps_previous_document(self):
        store = TransactionStore(self.path)
        store.load()
        store.append(_tx(1, -42.5), EXPENSES)
        with open(self.path, encoding="utf-8") as f:
            before = f.read()

        with patch("transaction_store.os.replace", side_effect=OSError("disk full")):
            with self.assertRaises(StoreError):
                store.append(_tx(2, -1.0), EXPENSES)

        with open(self.path, encoding="utf-8") as f:
            self.assertEqual(f.read(), before)
        self.assertEqual([n for n in os.listdir(self.tmp.name) if n.endswith(".tmp")], [])
        # the store's own copy did not advance either
        store.append(_tx(2, -2.0), EXPENSES)
        self.assertEqual(len(TransactionStore(self.path).load().expenses), 2)

    def test_unknown_bucket_is_rejected(self):
        store = TransactionStore(self.path)
        store.load()
        with self.assertRaises(StoreError):
            store.append(_tx(1, 1.0), "savings")

    def test_append_before_load_is_rejected(self):
        with self.assertRaises(StoreError):
            TransactionStore(self.path).append(_tx(1, 1.0), INCOME)


if __name__ == "__main__":
    unittest.main()
