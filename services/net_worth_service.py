from typing import Iterable

from models.account import AccountSummary
from models.transaction import Transaction
from utils.constants import ACCOUNTS, CREDIT_ACCOUNT, LIQUID_ACCOUNTS


def account_balances(ledger: Iterable[Transaction]) -> dict[str, float]:
    """Income minus expense per fixed account. Unknown accounts are ignored."""
    balances = {name: 0.0 for name in ACCOUNTS}
    for tx in ledger:
        if tx.account in balances:
            balances[tx.account] += tx.signed_amount
    return balances


def liquid_assets(balances: dict[str, float]) -> float:
    """Checking + Savings + Cash. Credit is a liability and never counted here."""
    return sum(balances.get(name, 0.0) for name in LIQUID_ACCOUNTS)


def net_worth(balances: dict[str, float]) -> float:
    return liquid_assets(balances) + balances.get(CREDIT_ACCOUNT, 0.0)


def account_summary(ledger: Iterable[Transaction]) -> AccountSummary:
    balances = account_balances(ledger)
    return AccountSummary(
        balances=balances,
        liquid_assets=liquid_assets(balances),
        net_worth=net_worth(balances),
    )
