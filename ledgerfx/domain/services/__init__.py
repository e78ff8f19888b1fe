"""Domain services package."""

from .foreign_currencies import handle_foreign_currencies, synthesized_postings
from .fx import Prices, get_prices_from_transactions
from .ledgers import join_ledgers
from .monthly_report import build_monthly_report
from .tree_balance import build_tree_balance

__all__ = [
    "Prices",
    "get_prices_from_transactions",
    "handle_foreign_currencies",
    "synthesized_postings",
    "join_ledgers",
    "build_monthly_report",
    "build_tree_balance",
]
