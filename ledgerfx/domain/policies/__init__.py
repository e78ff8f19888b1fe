"""Domain policies package."""

from .account_filters import (
    AccountClassification,
    AccountPredicate,
    account_prefix_predicate,
    is_valid_account_name,
)

__all__ = [
    "AccountClassification",
    "AccountPredicate",
    "account_prefix_predicate",
    "is_valid_account_name",
]
