"""Account classification and filtering policies."""

from collections.abc import Callable
from dataclasses import dataclass

AccountPredicate = Callable[[str], bool]

_HEX_CHARS = set("0123456789abcdef")


def is_valid_account_name(name: str) -> bool:
    """Return True when the account name is not an opaque hex id.

    Args:
        name: Account name to evaluate.

    Returns:
        bool: True when the name should be retained.
    """
    candidate = name.strip()
    if not candidate:
        return False
    if len(candidate) == 32:
        lowered = candidate.lower()
        if all(char in _HEX_CHARS for char in lowered):
            return False
    return True


def account_prefix_predicate(*prefixes: str) -> AccountPredicate:
    """Build a predicate matching account paths by raw string prefix.

    Args:
        prefixes: Prefixes to match, e.g. "Assets:".

    Returns:
        AccountPredicate: True when the path starts with any prefix.
    """
    frozen_prefixes = tuple(prefixes)

    def _predicate(account: str) -> bool:
        return account.startswith(frozen_prefixes)

    return _predicate


@dataclass(frozen=True)
class AccountClassification:
    """Predicates classifying account paths for currency handling."""

    is_asset_account: AccountPredicate
    is_income_account: AccountPredicate
    is_expense_account: AccountPredicate

    @classmethod
    def from_prefixes(
        cls,
        asset_prefixes: tuple[str, ...],
        income_prefixes: tuple[str, ...],
        expense_prefixes: tuple[str, ...],
    ) -> "AccountClassification":
        return cls(
            is_asset_account=account_prefix_predicate(*asset_prefixes),
            is_income_account=account_prefix_predicate(*income_prefixes),
            is_expense_account=account_prefix_predicate(*expense_prefixes),
        )


__all__ = [
    "AccountPredicate",
    "AccountClassification",
    "account_prefix_predicate",
    "is_valid_account_name",
]
