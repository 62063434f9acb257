import math

from utils.constants import CURRENCY_SYMBOL, DECIMAL_SEPARATOR, THOUSANDS_SEPARATOR


def format_currency(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format a float as whole-unit currency, e.g. 'Rp 1.234.567' or '-Rp 200.000'.

    Non-finite values render as-is, e.g. 'Rp nan'.
    """
    if not math.isfinite(amount):
        return f"{symbol} {amount}"
    rounded = int(round(abs(amount)))
    grouped = f"{rounded:,}".replace(",", THOUSANDS_SEPARATOR)
    sign = "-" if amount < 0 and rounded != 0 else ""
    return f"{sign}{symbol} {grouped}"


def format_signed(amount: float, tx_type: str, symbol: str = CURRENCY_SYMBOL) -> str:
    """Prefix '+' for income and '-' for expense, e.g. '+Rp 5.000'."""
    sign = "+" if tx_type == "income" else "-"
    return f"{sign}{format_currency(abs(amount), symbol)}"


def parse_amount(text: str) -> float:
    """Parse user input in the display locale: '.' groups thousands, ',' marks decimals.

    '1.500' -> 1500.0, '1.500,75' -> 1500.75, 'Rp 20.000' -> 20000.0.
    Raises ValueError for empty, non-numeric, non-finite or negative input.
    """
    cleaned = text.strip()
    if cleaned.startswith(CURRENCY_SYMBOL):
        cleaned = cleaned[len(CURRENCY_SYMBOL):]
    cleaned = cleaned.replace(" ", "").replace(THOUSANDS_SEPARATOR, "")
    cleaned = cleaned.replace(DECIMAL_SEPARATOR, ".")
    if not cleaned:
        raise ValueError("Please enter an amount.")
    try:
        amount = float(cleaned)
    except ValueError:
        raise ValueError("Invalid amount.") from None
    if not math.isfinite(amount):
        raise ValueError("Invalid amount.")
    if amount < 0:
        raise ValueError("Amount cannot be negative.")
    return amount
