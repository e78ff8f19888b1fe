"""Domain models package."""

from .balances import AccountBalance, Balance
from .ledger import (
    Amount,
    Commodity,
    CommodityPosition,
    CommodityPrice,
    Ledger,
    Posting,
    Reality,
    Tag,
    Transaction,
    TransactionStatus,
)
from .prices import CommoditiesPair, RatesTable
from .reports import MonthlyBalance, MonthlyReport, TreeBalanceNode

__all__ = [
    "AccountBalance",
    "Balance",
    "Amount",
    "Commodity",
    "CommodityPosition",
    "CommodityPrice",
    "Ledger",
    "Posting",
    "Reality",
    "Tag",
    "Transaction",
    "TransactionStatus",
    "CommoditiesPair",
    "RatesTable",
    "MonthlyBalance",
    "MonthlyReport",
    "TreeBalanceNode",
]
