"""CLI adapter printing net worth and account balances of a ledger."""

from datetime import date
import os

from ledgerfx.application.use_cases.get_monthly_net_worth import (
    GetMonthlyNetWorthUseCase,
)
from ledgerfx.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from ledgerfx.domain.constants import ACCOUNT_SEPARATOR
from ledgerfx.domain.errors import PricesError
from ledgerfx.domain.models.reports import TreeBalanceNode
from ledgerfx.infrastructure.container import (
    build_accounting_state_use_case,
    build_settings,
)
from ledgerfx.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def format_tree_lines(tree: TreeBalanceNode) -> list[str]:
    """Render the balance tree as indented text lines."""
    lines = []
    for path, depth, node in tree.walk():
        name = path.rsplit(ACCOUNT_SEPARATOR, 1)[-1]
        amounts = ", ".join(
            f"{amount.quantity} {amount.commodity_name}"
            for amount in node.balance.sorted_amounts()
        )
        lines.append(f"{'  ' * depth}{name}: {amounts or '0'}")
    return lines


def main() -> None:
    """Build the accounting state and print the reports."""
    logger = get_app_logger()
    settings = build_settings()
    as_of = _parse_date(os.getenv("REPORT_AS_OF"), logger) or date.today()
    currency = settings.main_commodity
    decimal_points = settings.main_commodity_decimal_points

    try:
        state = build_accounting_state_use_case(settings=settings).execute()
        points = GetMonthlyNetWorthUseCase(
            asset_prefixes=settings.asset_prefixes,
            liability_prefixes=settings.liability_prefixes,
            logger=logger,
        ).execute(state.monthly_report, state.prices, currency, decimal_points)
        summary = GetNetWorthSummaryUseCase(
            asset_prefixes=settings.asset_prefixes,
            liability_prefixes=settings.liability_prefixes,
            logger=logger,
        ).execute(state.balance, state.prices, as_of, currency, decimal_points)
    except PricesError as exc:
        logger.error(f"Currency conversion failed: {exc.message}")
        return

    print(f"Monthly net worth ({currency})")
    for point in points:
        print(f"{point.year:04d}-{point.month:02d}: {point.net_worth}")
    print(
        f"Net worth on {as_of.isoformat()}: "
        f"assets={summary.asset_total}, "
        f"liabilities={summary.liability_total}, "
        f"net_worth={summary.net_worth} {summary.currency_code}"
    )
    print("Balances")
    for line in format_tree_lines(state.tree):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
