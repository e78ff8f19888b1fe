"""Application use cases package."""

from .build_accounting_state import AccountingState, BuildAccountingStateUseCase
from .get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
    NetWorthSummary,
)
from .get_monthly_net_worth import (
    GetMonthlyNetWorthUseCase,
    MonthlyNetWorthPoint,
    month_end,
)

__all__ = [
    "AccountingState",
    "BuildAccountingStateUseCase",
    "GetNetWorthSummaryUseCase",
    "NetWorthSummary",
    "GetMonthlyNetWorthUseCase",
    "MonthlyNetWorthPoint",
    "month_end",
]
