"""Domain package for ledger accounting rules and core models."""

from .constants import AUTO_GENERATED_COMMENT, TRADING_ACCOUNT
from .errors import DateTooEarly, NoSuchCommoditiesPair, PricesError
from .models import (
    AccountBalance,
    Amount,
    Balance,
    CommoditiesPair,
    Commodity,
    CommodityPosition,
    CommodityPrice,
    Ledger,
    MonthlyBalance,
    MonthlyReport,
    Posting,
    RatesTable,
    Reality,
    Tag,
    Transaction,
    TransactionStatus,
    TreeBalanceNode,
)
from .policies import (
    AccountClassification,
    account_prefix_predicate,
    is_valid_account_name,
)
from .services import (
    Prices,
    build_monthly_report,
    build_tree_balance,
    get_prices_from_transactions,
    handle_foreign_currencies,
    join_ledgers,
)

__all__ = [
    "AUTO_GENERATED_COMMENT",
    "TRADING_ACCOUNT",
    "DateTooEarly",
    "NoSuchCommoditiesPair",
    "PricesError",
    "AccountBalance",
    "Amount",
    "Balance",
    "CommoditiesPair",
    "Commodity",
    "CommodityPosition",
    "CommodityPrice",
    "Ledger",
    "MonthlyBalance",
    "MonthlyReport",
    "Posting",
    "RatesTable",
    "Reality",
    "Tag",
    "Transaction",
    "TransactionStatus",
    "TreeBalanceNode",
    "AccountClassification",
    "account_prefix_predicate",
    "is_valid_account_name",
    "Prices",
    "build_monthly_report",
    "build_tree_balance",
    "get_prices_from_transactions",
    "handle_foreign_currencies",
    "join_ledgers",
]
