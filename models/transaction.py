from dataclasses import dataclass, asdict
from typing import Any, Mapping


@dataclass(frozen=True)
class Transaction:
    id: int                 # creation time in ms
    type: str               # 'income' | 'expense'
    amount: float
    category: str
    account: str            # 'Checking' | 'Savings' | 'Credit' | 'Cash'
    description: str
    date: str               # 'YYYY-MM-DD'

    @property
    def signed_amount(self) -> float:
        """+amount for income, -amount for expense, 0 for anything else."""
        if self.type == "income":
            return self.amount
        if self.type == "expense":
            return -self.amount
        return 0.0

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transaction":
        """Build from a persisted record. Raises KeyError/TypeError/ValueError if malformed."""
        if not isinstance(data, Mapping):
            raise TypeError(f"Transaction record must be a mapping, got {type(data).__name__}")
        return cls(
            id=int(data["id"]),
            type=str(data["type"]),
            amount=float(data["amount"]),
            category=str(data["category"]),
            account=str(data["account"]),
            description=str(data.get("description") or ""),
            date=str(data["date"]),
        )
