from utils.constants import ACCOUNTS, CATEGORIES, TRANSACTION_TYPES


def categories_for(type_: str) -> list[str]:
    """Category choices for a transaction type; [] for an unknown type."""
    return list(CATEGORIES.get(type_, []))


def all_categories() -> list[str]:
    """Sorted union of income and expense categories, for filter dropdowns."""
    return sorted({name for type_ in TRANSACTION_TYPES for name in CATEGORIES[type_]})


def is_valid_category(type_: str, category: str) -> bool:
    return category in CATEGORIES.get(type_, [])


def is_known_account(account: str) -> bool:
    return account in ACCOUNTS
