"""Month by month balance report."""

from collections.abc import Iterable

from ledgerfx.domain.models.balances import Balance
from ledgerfx.domain.models.ledger import Transaction
from ledgerfx.domain.models.reports import MonthlyBalance, MonthlyReport


def build_monthly_report(transactions: Iterable[Transaction]) -> MonthlyReport:
    """Bucket transactions by month.

    Transactions are expected in date order and are not sorted here. A
    bucket covers a contiguous run of transactions sharing (year, month):
    with unsorted input, a month seen again after another month opens a
    second, separate bucket.

    Args:
        transactions: Transactions ordered by date.

    Returns:
        MonthlyReport: Monthly changes and running totals.
    """
    report = MonthlyReport()
    current: MonthlyBalance | None = None
    monthly_balance = Balance()
    total_balance = Balance()

    for transaction in transactions:
        year = transaction.date.year
        month = transaction.date.month
        if current is None or (current.year, current.month) != (year, month):
            if current is not None:
                _seal(report, current, monthly_balance, total_balance)
            current = MonthlyBalance(year=year, month=month)
            monthly_balance = Balance()

        monthly_balance.update_with_transaction(transaction)
        total_balance.update_with_transaction(transaction)

    if current is not None:
        _seal(report, current, monthly_balance, total_balance)

    return report


def _seal(
    report: MonthlyReport,
    monthly: MonthlyBalance,
    monthly_balance: Balance,
    total_balance: Balance,
) -> None:
    monthly.monthly_change = monthly_balance.copy()
    monthly.total = total_balance.copy()
    report.monthly_balances.append(monthly)


__all__ = ["build_monthly_report"]
