from dataclasses import dataclass


@dataclass
class CategoryTotal:
    category: str
    total: float
    color_hex: str = "#888888"
