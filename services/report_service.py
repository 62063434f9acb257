"""Pure aggregations over a ledger snapshot.

Every function takes any iterable of Transaction and never mutates it.
"""
from collections import defaultdict
from datetime import date
from typing import Iterable

from models.category import CategoryTotal
from models.summary import DashboardSummary
from models.transaction import Transaction
from utils.constants import CATEGORY_COLORS, RECENT_TRANSACTIONS_LIMIT
from utils.date_helpers import format_month, same_month


def _sum(ledger: Iterable[Transaction], type_: str) -> float:
    return sum(tx.amount for tx in ledger if tx.type == type_)


def total_income(ledger: Iterable[Transaction]) -> float:
    return _sum(ledger, "income")


def total_expense(ledger: Iterable[Transaction]) -> float:
    return _sum(ledger, "expense")


def total_balance(ledger: Iterable[Transaction]) -> float:
    ledger = list(ledger)
    return total_income(ledger) - total_expense(ledger)


def total_assets(ledger: Iterable[Transaction]) -> float:
    """Total balance floored at zero."""
    return max(total_balance(ledger), 0.0)


def monthly_totals(ledger: Iterable[Transaction], as_of: date) -> dict:
    """Income and expense for transactions in as_of's calendar month.

    Transactions with an unparseable date are skipped here.
    """
    month_tx = [tx for tx in ledger if same_month(tx.date, as_of)]
    return {
        "income":  _sum(month_tx, "income"),
        "expense": _sum(month_tx, "expense"),
    }


def monthly_income(ledger: Iterable[Transaction], as_of: date) -> float:
    return monthly_totals(ledger, as_of)["income"]


def monthly_expenses(ledger: Iterable[Transaction], as_of: date) -> float:
    return monthly_totals(ledger, as_of)["expense"]


def expenses_by_category(ledger: Iterable[Transaction], as_of: date) -> list[CategoryTotal]:
    """This month's expense totals per category, largest first."""
    totals: dict[str, float] = defaultdict(float)
    for tx in ledger:
        if tx.type == "expense" and same_month(tx.date, as_of):
            totals[tx.category] += tx.amount
    rows = [
        CategoryTotal(category=name, total=total,
                      color_hex=CATEGORY_COLORS.get(name, "#888888"))
        for name, total in totals.items()
    ]
    rows.sort(key=lambda r: (-r.total, r.category))
    return rows


def dashboard_summary(
    ledger: Iterable[Transaction],
    as_of: date,
    recent_limit: int = RECENT_TRANSACTIONS_LIMIT,
) -> DashboardSummary:
    ledger = list(ledger)
    balance = total_balance(ledger)
    month = monthly_totals(ledger, as_of)
    return DashboardSummary(
        total_balance=balance,
        monthly_income=month["income"],
        monthly_expenses=month["expense"],
        total_assets=max(balance, 0.0),
        month=format_month(as_of),
        recent=ledger[:recent_limit],
        expenses_by_category=expenses_by_category(ledger, as_of),
    )
