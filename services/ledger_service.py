import sqlite3
import time
from typing import Callable

from database.transaction_dao import TransactionDAO
from models.transaction import Transaction
from utils.constants import RECENT_TRANSACTIONS_LIMIT
from utils.logging_setup import get_logger

log = get_logger("services.ledger_service")


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class LedgerService:
    """Owns the ordered ledger (newest insertion first) and persists it on every append."""

    def __init__(self, tx_dao: TransactionDAO, clock: Callable[[], int] = _now_ms):
        self._dao = tx_dao
        self._clock = clock
        self._transactions: list[Transaction] = []
        self._last_id = 0
        self.last_save_ok = True

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def load(self) -> list[Transaction]:
        """Replace the in-memory ledger with the persisted one."""
        self._transactions = self._dao.load_all()
        self._last_id = max((tx.id for tx in self._transactions), default=0)
        log.info("loaded %d transactions", len(self._transactions))
        return list(self._transactions)

    def next_id(self) -> int:
        """Millisecond timestamp, bumped past the last id so ids stay unique."""
        candidate = self._clock()
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def append(self, tx: Transaction) -> Transaction:
        """Insert tx at the front and rewrite the store.

        A store failure is logged and reflected in last_save_ok; the
        in-memory ledger keeps the new transaction either way.
        """
        self._transactions.insert(0, tx)
        self._last_id = max(self._last_id, tx.id)
        try:
            self._dao.save_all(self._transactions)
            self.last_save_ok = True
        except (OSError, sqlite3.Error) as e:
            self.last_save_ok = False
            log.warning("could not persist ledger after appending %s: %s", tx.id, e)
        return tx

    def record(
        self,
        type_: str,
        amount: float,
        category: str,
        account: str,
        date: str,
        description: str = "",
    ) -> Transaction:
        tx = Transaction(
            id=self.next_id(),
            type=type_,
            amount=float(amount),
            category=category,
            account=account,
            description=description,
            date=date,
        )
        log.debug("recording %s %s in %s/%s", type_, amount, account, category)
        return self.append(tx)

    def recent(self, limit: int = RECENT_TRANSACTIONS_LIMIT) -> list[Transaction]:
        return self._transactions[:limit]
