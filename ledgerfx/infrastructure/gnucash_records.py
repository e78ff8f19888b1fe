"""Shared mapping from GnuCash records to ledger models."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, time

from ledgerfx.domain.constants import ACCOUNT_SEPARATOR
from ledgerfx.domain.models.ledger import (
    Amount,
    Commodity,
    CommodityPrice,
    TransactionStatus,
)
from ledgerfx.domain.policies.account_filters import is_valid_account_name
from ledgerfx.utils.date_utils import coerce_date
from ledgerfx.utils.decimal_utils import coerce_decimal


ROOT_ACCOUNT_TYPE = "ROOT"

_RECONCILE_STATUSES = {
    "y": TransactionStatus.CLEARED,
    "c": TransactionStatus.PENDING,
}


@dataclass(frozen=True)
class AccountNode:
    """Minimal account record needed to rebuild full account paths."""

    guid: str
    name: str
    parent_guid: str | None
    account_type: str


def build_account_paths(accounts: Iterable[AccountNode]) -> dict[str, str]:
    """Map account GUIDs to colon-joined paths below the root account.

    Root accounts are not part of any path. Accounts with an opaque hex
    name anywhere in their ancestry (scheduled transaction templates) are
    left out.

    Args:
        accounts: Every account of the book.

    Returns:
        dict[str, str]: Full account path per account GUID.
    """
    by_guid = {account.guid: account for account in accounts}
    paths: dict[str, str] = {}
    for account in by_guid.values():
        if account.account_type == ROOT_ACCOUNT_TYPE:
            continue
        segments: list[str] = []
        current: AccountNode | None = account
        valid = True
        seen: set[str] = set()
        while current is not None and current.account_type != ROOT_ACCOUNT_TYPE:
            if current.guid in seen or not is_valid_account_name(current.name):
                valid = False
                break
            seen.add(current.guid)
            segments.append(current.name)
            current = (
                by_guid.get(current.parent_guid)
                if current.parent_guid
                else None
            )
        if valid and segments:
            paths[account.guid] = ACCOUNT_SEPARATOR.join(reversed(segments))
    return paths


def reconcile_status(raw_state: str | None) -> TransactionStatus | None:
    """Map a GnuCash reconcile flag to a posting status."""
    if not raw_state:
        return None
    return _RECONCILE_STATUSES.get(raw_state.strip().lower())


def build_commodity_price(
    raw_date,
    commodity_name: str,
    currency_name: str,
    value_num,
    value_denom,
    logger,
) -> CommodityPrice | None:
    """Build a price record, or None when the row cannot be used.

    Args:
        raw_date: Price date or datetime.
        commodity_name: Mnemonic of the priced commodity.
        currency_name: Mnemonic the price is expressed in.
        value_num: Rational value numerator.
        value_denom: Rational value denominator.
        logger: Logger used for warnings.

    Returns:
        CommodityPrice | None: Price record.
    """
    price_date = coerce_date(raw_date)
    if price_date is None:
        logger.warning(
            f"Skipping price for {commodity_name} with unreadable date"
        )
        return None
    denom = coerce_decimal(value_denom)
    if denom == 0:
        logger.warning(
            "Skipping price with zero denominator "
            f"for {commodity_name} in {currency_name}"
        )
        return None
    return CommodityPrice(
        datetime=datetime.combine(price_date, time.min),
        commodity_name=commodity_name,
        amount=Amount(
            quantity=coerce_decimal(value_num) / denom,
            commodity=Commodity(currency_name),
        ),
    )


__all__ = [
    "AccountNode",
    "ROOT_ACCOUNT_TYPE",
    "build_account_paths",
    "reconcile_status",
    "build_commodity_price",
]
