from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class TransactionFilter:
    """History filter criteria. Empty strings and None impose no restriction."""
    type: str | None = None
    category: str | None = None
    date_from: str | None = None    # 'YYYY-MM-DD', inclusive
    date_to: str | None = None      # 'YYYY-MM-DD', inclusive

    @property
    def is_empty(self) -> bool:
        return not (self.type or self.category or self.date_from or self.date_to)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TransactionFilter":
        """Accepts date_from/date_to or the short from/to keys."""
        return cls(
            type=data.get("type") or None,
            category=data.get("category") or None,
            date_from=data.get("date_from") or data.get("from") or None,
            date_to=data.get("date_to") or data.get("to") or None,
        )
