"""Trading account postings for foreign currency movements.

Income and expenses in a foreign commodity are re-expressed in the main
commodity at the transaction date, freezing their value. The offsetting
legs go to a currency trading account, whose value over time equals the
realized currency gains and losses. Exchanges between two asset accounts
are mirrored in the trading account the same way.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace

from ledgerfx.domain.constants import AUTO_GENERATED_COMMENT, TRADING_ACCOUNT
from ledgerfx.domain.models.ledger import (
    Amount,
    Commodity,
    CommodityPosition,
    Posting,
    Reality,
    Transaction,
)
from ledgerfx.domain.services.fx import Prices
from ledgerfx.utils.decimal_utils import round_half_away_from_zero


_module_logger = logging.getLogger(__name__)


def handle_foreign_currencies(
    transactions: list[Transaction],
    *,
    is_asset_account: Callable[[str], bool],
    is_income_account: Callable[[str], bool],
    is_expense_account: Callable[[str], bool],
    main_commodity: str,
    main_commodity_decimal_points: int,
    prices: Prices,
    logger=None,
) -> int:
    """Rewrite transactions so foreign currency legs use a trading account.

    Each transaction goes through the income, exchange and expense passes
    in that order; a pass sees the postings appended by the previous ones.
    Every rewrite is computed before any transaction is modified, so a
    failed conversion leaves the whole list untouched.

    Args:
        transactions: Transactions to rewrite in place.
        is_asset_account: Predicate over account paths.
        is_income_account: Predicate over account paths.
        is_expense_account: Predicate over account paths.
        main_commodity: Commodity that income and expenses are frozen in.
        main_commodity_decimal_points: Rounding precision, non-negative.
        prices: Rate store used for conversions.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        int: Number of transactions whose postings changed.

    Raises:
        PricesError: A required conversion failed.
        ValueError: main_commodity_decimal_points is negative.
    """
    if main_commodity_decimal_points < 0:
        raise ValueError(
            "Main commodity decimal points must be non-negative, "
            f"got {main_commodity_decimal_points}"
        )
    resolved_logger = logger or _module_logger

    staged: list[tuple[Transaction, list[Posting]]] = []
    for transaction in transactions:
        postings = list(transaction.postings)
        postings = _handle_foreign_postings(
            transaction,
            postings,
            is_income_account,
            main_commodity,
            main_commodity_decimal_points,
            prices,
        )
        postings = _handle_asset_exchange(postings, is_asset_account)
        postings = _handle_foreign_postings(
            transaction,
            postings,
            is_expense_account,
            main_commodity,
            main_commodity_decimal_points,
            prices,
        )
        if postings != transaction.postings:
            staged.append((transaction, postings))

    for transaction, postings in staged:
        transaction.postings[:] = postings

    resolved_logger.info(
        f"Foreign currency handling rewrote {len(staged)} transactions "
        f"into {main_commodity}"
    )
    return len(staged)


def _handle_foreign_postings(
    transaction: Transaction,
    postings: list[Posting],
    is_account: Callable[[str], bool],
    main_commodity: str,
    main_commodity_decimal_points: int,
    prices: Prices,
) -> list[Posting]:
    """Freeze matching foreign postings in the main commodity.

    Used for both the income and the expense pass.
    """
    result: list[Posting] = []
    new_postings: list[Posting] = []
    for posting in postings:
        if (
            not is_account(posting.account)
            or posting.amount.commodity.name == main_commodity
        ):
            result.append(posting)
            continue

        foreign_amount = posting.amount
        converted = prices.convert(
            foreign_amount.quantity,
            foreign_amount.commodity.name,
            main_commodity,
            transaction.date,
        )
        main_amount = Amount(
            quantity=round_half_away_from_zero(
                converted,
                main_commodity_decimal_points,
            ),
            commodity=Commodity(main_commodity, CommodityPosition.RIGHT),
        )
        result.append(replace(posting, amount=main_amount))
        new_postings.append(_trading_posting(posting, -main_amount))
        new_postings.append(_trading_posting(posting, foreign_amount))

    return result + new_postings


def _handle_asset_exchange(
    postings: list[Posting],
    is_asset_account: Callable[[str], bool],
) -> list[Posting]:
    """Mirror an exchange between two asset accounts in the trading account."""
    if len(postings) != 2:
        return postings
    first, second = postings
    if not is_asset_account(first.account) or not is_asset_account(
        second.account
    ):
        return postings
    if first.amount.commodity.name == second.amount.commodity.name:
        return postings
    return [
        first,
        second,
        _trading_posting(first, -first.amount),
        _trading_posting(second, -second.amount),
    ]


def _trading_posting(source: Posting, amount: Amount) -> Posting:
    return Posting(
        account=TRADING_ACCOUNT,
        amount=amount,
        reality=Reality.REAL,
        status=source.status,
        comment=AUTO_GENERATED_COMMENT,
        tags=list(source.tags),
    )


def synthesized_postings(postings: Iterable[Posting]) -> list[Posting]:
    """Return the trading account postings created by this module."""
    return [
        posting
        for posting in postings
        if posting.account == TRADING_ACCOUNT
        and posting.comment == AUTO_GENERATED_COMMENT
    ]


__all__ = ["handle_foreign_currencies", "synthesized_postings"]
