"""Use case to load a ledger and derive its balances and reports."""

from dataclasses import dataclass

from ledgerfx.application.ports.ledger_source import LedgerSourcePort
from ledgerfx.domain.models.balances import Balance
from ledgerfx.domain.models.ledger import Ledger
from ledgerfx.domain.models.reports import MonthlyReport, TreeBalanceNode
from ledgerfx.domain.policies.account_filters import AccountClassification
from ledgerfx.domain.services.foreign_currencies import (
    handle_foreign_currencies,
    synthesized_postings,
)
from ledgerfx.domain.services.fx import Prices
from ledgerfx.domain.services.monthly_report import build_monthly_report
from ledgerfx.domain.services.tree_balance import build_tree_balance
from ledgerfx.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AccountingState:
    """Everything derived from one ledger load.

    Attributes:
        ledger: Ledger with foreign currency legs rewritten.
        prices: Rate store built from the ledger before the rewrite.
        balance: Balance of every account.
        tree: Hierarchical balance keyed by account path segments.
        monthly_report: Month-by-month changes and running totals.
    """

    ledger: Ledger
    prices: Prices
    balance: Balance
    tree: TreeBalanceNode
    monthly_report: MonthlyReport


class BuildAccountingStateUseCase:
    """Run the ledger pipeline from source to reports."""

    def __init__(
        self,
        ledger_source: LedgerSourcePort,
        classification: AccountClassification,
        main_commodity: str,
        main_commodity_decimal_points: int,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_source: Port returning the ledger to process.
            classification: Asset, income and expense predicates.
            main_commodity: Commodity income and expenses are frozen in.
            main_commodity_decimal_points: Rounding precision of the main
                commodity.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_source = ledger_source
        self._classification = classification
        self._main_commodity = main_commodity
        self._main_commodity_decimal_points = main_commodity_decimal_points
        self._logger = logger or get_app_logger()

    def execute(self) -> AccountingState:
        """Build the accounting state.

        Returns:
            AccountingState: Ledger, rate store, balances and reports.

        Raises:
            PricesError: A conversion needed by the rewrite failed.
        """
        ledger = self._ledger_source.fetch_ledger()
        self._logger.info(
            f"Building accounting state for {len(ledger.transactions)} "
            f"transactions and {len(ledger.commodity_prices)} prices"
        )
        prices = Prices.load(ledger, logger=self._logger)
        self._logger.info(
            f"Loaded rates for {len(prices.commodities_pairs())} commodity pairs"
        )
        handle_foreign_currencies(
            ledger.transactions,
            is_asset_account=self._classification.is_asset_account,
            is_income_account=self._classification.is_income_account,
            is_expense_account=self._classification.is_expense_account,
            main_commodity=self._main_commodity,
            main_commodity_decimal_points=self._main_commodity_decimal_points,
            prices=prices,
            logger=self._logger,
        )
        generated = synthesized_postings(
            posting
            for transaction in ledger.transactions
            for posting in transaction.postings
        )
        self._logger.info(f"Ledger holds {len(generated)} trading postings")

        balance = Balance.from_ledger(ledger)
        tree = build_tree_balance(balance)
        monthly_report = build_monthly_report(ledger.transactions)
        self._logger.info(
            f"Computed balances for {len(balance.account_balances)} accounts "
            f"over {len(monthly_report)} months"
        )
        return AccountingState(
            ledger=ledger,
            prices=prices,
            balance=balance,
            tree=tree,
            monthly_report=monthly_report,
        )


__all__ = ["AccountingState", "BuildAccountingStateUseCase"]
