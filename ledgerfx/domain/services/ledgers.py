"""Combine ledgers coming from several books."""

from collections.abc import Iterable

from ledgerfx.domain.models.ledger import Ledger


def join_ledgers(ledgers: Iterable[Ledger]) -> Ledger:
    """Merge ledgers into one, ordering prices and transactions by date.

    Sorting is stable, so records sharing a date keep their input order.

    Args:
        ledgers: Ledgers to merge.

    Returns:
        Ledger: New ledger holding every price record and transaction.
    """
    joined = Ledger()
    for ledger in ledgers:
        joined.commodity_prices.extend(ledger.commodity_prices)
        joined.transactions.extend(ledger.transactions)

    joined.commodity_prices.sort(key=lambda price: price.datetime)
    joined.transactions.sort(key=lambda transaction: transaction.date)
    return joined


__all__ = ["join_ledgers"]
