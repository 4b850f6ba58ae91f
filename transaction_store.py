import json
import os
import tempfile

from logging_setup import get_logger
from transaction import Transaction, TransactionSet


log = get_logger("fintrackr.store")


class StoreError(Exception):
    """Raised when the data file cannot be created, read, parsed or written."""


class TransactionStore:
    def __init__(self, path: str):
        self.path = path
        self._data: TransactionSet | None = None

    def load(self) -> TransactionSet:
        """Load the data file, creating it with defaults when absent.

        Returns a copy; the store keeps its own set so that a caller's
        working copy can never leak unsaved changes into the file.
        """
        if not os.path.exists(self.path):
            log.info("creating %s with default categories", self.path)
            self._write(TransactionSet())

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreError(f"cannot read {self.path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise StoreError(f"malformed JSON in {self.path}: {exc}") from exc

        try:
            data = TransactionSet.from_dict(payload)
        except KeyError as exc:
            raise StoreError(f"malformed data in {self.path}: missing {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise StoreError(f"malformed data in {self.path}: {exc}") from exc

        self._data = data
        log.info(
            "loaded %d expenses and %d income entries from %s",
            len(data.expenses),
            len(data.income),
            self.path,
        )
        return data.clone()

    def append(self, transaction: Transaction, bucket: str) -> None:
        if self._data is None:
            raise StoreError("store used before load()")
        try:
            updated = self._data.clone()
            updated.bucket(bucket).append(transaction)
        except ValueError as exc:
            raise StoreError(str(exc)) from exc
        self._write(updated)
        self._data = updated
        log.info("saved %s #%d to %s", bucket, transaction.id, self.path)

    def _write(self, data: TransactionSet) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=".fintrackr-", suffix=".tmp", dir=directory
            )
        except OSError as exc:
            raise StoreError(f"cannot write {self.path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data.to_dict(), f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as exc:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise StoreError(f"cannot write {self.path}: {exc}") from exc
