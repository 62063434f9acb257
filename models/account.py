from dataclasses import dataclass

from utils.constants import CREDIT_ACCOUNT

ACCOUNT_LABELS = {
    "Checking": "Checking Account",
    "Savings": "Savings",
    "Credit": "Credit Card",
    "Cash": "Cash",
}


def is_debt_account(name: str) -> bool:
    return name == CREDIT_ACCOUNT


@dataclass
class AccountSummary:
    balances: dict[str, float]      # one entry per fixed account
    liquid_assets: float
    net_worth: float
