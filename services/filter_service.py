from typing import Iterable

from models.transaction import Transaction
from models.transaction_filter import TransactionFilter


def matches(tx: Transaction, criteria: TransactionFilter) -> bool:
    # ISO dates compare correctly as strings
    return (
        (not criteria.type or tx.type == criteria.type)
        and (not criteria.category or tx.category == criteria.category)
        and (not criteria.date_from or tx.date >= criteria.date_from)
        and (not criteria.date_to or tx.date <= criteria.date_to)
    )


def filter_transactions(
    ledger: Iterable[Transaction],
    criteria: TransactionFilter | None = None,
) -> list[Transaction]:
    """Return the matching transactions in ledger order."""
    if criteria is None or criteria.is_empty:
        return list(ledger)
    return [tx for tx in ledger if matches(tx, criteria)]
