from datetime import date, datetime
from utils.constants import DATE_FORMAT, MONTH_FORMAT


def today() -> date:
    return date.today()


def parse_date(date_str: str) -> date | None:
    """Parse a date string in YYYY-MM-DD format, returning None on failure."""
    if not date_str:
        return None
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d"):
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    return None


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def format_month(d: date) -> str:
    return d.strftime(MONTH_FORMAT)


def same_month(date_str: str, as_of: date) -> bool:
    """True when the YYYY-MM-DD string falls in as_of's calendar month and year."""
    d = parse_date(date_str)
    if d is None:
        return False
    return d.year == as_of.year and d.month == as_of.month


def friendly_month(d: date) -> str:
    """e.g. 'May 2024'."""
    return d.strftime("%B %Y")


def format_display_date(date_str: str) -> str:
    """Convert a YYYY-MM-DD storage string to e.g. '1 May 2024'."""
    if not date_str:
        return date_str
    d = parse_date(date_str)
    if d is None:
        return date_str
    return f"{d.day} {d.strftime('%b %Y')}"
