"""Build hierarchical balances from flat account balances."""

from ledgerfx.domain.constants import ACCOUNT_SEPARATOR
from ledgerfx.domain.models.balances import Balance
from ledgerfx.domain.models.reports import TreeBalanceNode


def build_tree_balance(balance: Balance) -> TreeBalanceNode:
    """Convert a balance into an account tree.

    The full balance of every account is added to the root and to each
    node along its path, so every node holds the total of its subtree.

    Args:
        balance: Flat balance keyed by account path.

    Returns:
        TreeBalanceNode: Root node of the account tree.
    """
    root = TreeBalanceNode()
    for account_name, account_balance in balance.account_balances.items():
        node = root
        node.balance += account_balance
        for segment in account_name.split(ACCOUNT_SEPARATOR):
            node = node.children.setdefault(segment, TreeBalanceNode())
            node.balance += account_balance
    return root


__all__ = ["build_tree_balance"]
