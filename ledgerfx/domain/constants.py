"""Domain constants for ledger accounting."""

ACCOUNT_SEPARATOR = ":"

TRADING_ACCOUNT = "Trading:Exchange"
AUTO_GENERATED_COMMENT = "Auto-generated"

DEFAULT_MAIN_COMMODITY = "USD"
DEFAULT_MAIN_COMMODITY_DECIMAL_POINTS = 2

DEFAULT_ASSET_PREFIXES = ("Assets:",)
DEFAULT_LIABILITY_PREFIXES = ("Liabilities:",)
DEFAULT_INCOME_PREFIXES = ("Income:",)
DEFAULT_EXPENSE_PREFIXES = ("Expenses:",)


__all__ = [
    "ACCOUNT_SEPARATOR",
    "TRADING_ACCOUNT",
    "AUTO_GENERATED_COMMENT",
    "DEFAULT_MAIN_COMMODITY",
    "DEFAULT_MAIN_COMMODITY_DECIMAL_POINTS",
    "DEFAULT_ASSET_PREFIXES",
    "DEFAULT_LIABILITY_PREFIXES",
    "DEFAULT_INCOME_PREFIXES",
    "DEFAULT_EXPENSE_PREFIXES",
]
