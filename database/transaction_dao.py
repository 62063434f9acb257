import json
import sqlite3

from database.kv_store import KeyValueStore
from models.transaction import Transaction
from utils.constants import LEDGER_KEY
from utils.logging_setup import get_logger

log = get_logger("database.transaction_dao")


class TransactionDAO:
    """Reads and writes the whole ledger as one JSON array under a single key."""

    def __init__(self, store: KeyValueStore, key: str = LEDGER_KEY):
        self._store = store
        self._key = key

    def load_all(self) -> list[Transaction]:
        """Return stored transactions in stored order; [] if absent or malformed."""
        try:
            raw = self._store.get(self._key)
        except (OSError, UnicodeDecodeError, sqlite3.Error) as e:
            log.warning("could not read stored ledger under %r (%s); starting empty", self._key, e)
            return []
        if raw is None:
            return []
        try:
            records = json.loads(raw)
        except ValueError:
            log.warning("stored ledger under %r is not valid JSON; starting empty", self._key)
            return []
        if records is None:
            return []
        if not isinstance(records, list):
            log.warning("stored ledger under %r is not a list; starting empty", self._key)
            return []
        try:
            return [Transaction.from_dict(r) for r in records]
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            log.warning("stored ledger under %r has a malformed record (%s); starting empty",
                        self._key, e)
            return []

    def save_all(self, transactions: list[Transaction]) -> None:
        """Rewrite the whole ledger. Store errors propagate to the caller."""
        payload = json.dumps([tx.to_dict() for tx in transactions], ensure_ascii=False)
        self._store.set(self._key, payload)
        log.debug("saved %d transactions under %r", len(transactions), self._key)
