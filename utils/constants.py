APP_NAME = "Budget Tracker"
APP_WIDTH = 1100
APP_HEIGHT = 720
DB_FILE = "budget_tracker.db"

LEDGER_KEY = "transactions"
DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"
RECENT_TRANSACTIONS_LIMIT = 5
NOTIFICATION_DISMISS_MS = 3000

CURRENCY_SYMBOL = "Rp"
THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","

TRANSACTION_TYPES = ["income", "expense"]

ACCOUNTS = ("Checking", "Savings", "Credit", "Cash")
CREDIT_ACCOUNT = "Credit"
LIQUID_ACCOUNTS = ("Checking", "Savings", "Cash")

CATEGORIES = {
    "income": ["Salary", "Freelance", "Business", "Investment", "Gift", "Other"],
    "expense": [
        "Food", "Transport", "Shopping", "Entertainment",
        "Bills", "Health", "Education", "Other",
    ],
}

DEFAULT_SETTINGS = [
    ("appearance_mode", "system"),
    ("currency_symbol", CURRENCY_SYMBOL),
    ("date_format", "D Mon YYYY"),
]

TYPE_COLORS = {
    "income": "#4CAF50",
    "expense": "#F44336",
}

SEVERITY_COLORS = {
    "success": "#4CAF50",
    "warning": "#FF9800",
    "info":    "#2196F3",
}

CATEGORY_COLORS = {
    "Food":          "#FF9800",
    "Transport":     "#2196F3",
    "Shopping":      "#E91E63",
    "Entertainment": "#FF5722",
    "Bills":         "#9C27B0",
    "Health":        "#00BCD4",
    "Education":     "#3F51B5",
    "Salary":        "#4CAF50",
    "Freelance":     "#8BC34A",
    "Business":      "#009688",
    "Investment":    "#CDDC39",
    "Gift":          "#FFC107",
    "Other":         "#888888",
}
