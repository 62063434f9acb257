from dataclasses import dataclass, field

from models.category import CategoryTotal
from models.transaction import Transaction


@dataclass
class DashboardSummary:
    total_balance: float
    monthly_income: float
    monthly_expenses: float
    total_assets: float
    month: str                      # 'YYYY-MM'
    recent: list[Transaction] = field(default_factory=list)
    expenses_by_category: list[CategoryTotal] = field(default_factory=list)
