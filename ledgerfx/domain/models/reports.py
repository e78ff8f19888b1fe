"""Domain models for balance reports."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ledgerfx.domain.constants import ACCOUNT_SEPARATOR
from ledgerfx.domain.models.balances import AccountBalance, Balance


@dataclass
class TreeBalanceNode:
    """Balance of an account subtree.

    Attributes:
        balance: Aggregate of the node's own accounts and all descendants.
        children: Child nodes keyed by account path segment.
    """

    balance: AccountBalance = field(default_factory=AccountBalance)
    children: dict[str, TreeBalanceNode] = field(default_factory=dict)

    def find(self, account_path: str) -> TreeBalanceNode | None:
        """Return the node at account_path, or None when it is absent."""
        node = self
        for segment in account_path.split(ACCOUNT_SEPARATOR):
            node = node.children.get(segment)
            if node is None:
                return None
        return node

    def walk(
        self,
        prefix: str = "",
        depth: int = 0,
    ) -> Iterator[tuple[str, int, TreeBalanceNode]]:
        """Yield (path, depth, node) for every descendant, depth first.

        Children are visited in name order; the node itself is not yielded.
        """
        for name in sorted(self.children):
            child = self.children[name]
            path = f"{prefix}{ACCOUNT_SEPARATOR}{name}" if prefix else name
            yield path, depth, child
            yield from child.walk(path, depth + 1)


@dataclass
class MonthlyBalance:
    """Balance change accrued in one month and the running total."""

    year: int
    month: int
    monthly_change: Balance = field(default_factory=Balance)
    total: Balance = field(default_factory=Balance)


@dataclass
class MonthlyReport:
    """Ordered monthly balances."""

    monthly_balances: list[MonthlyBalance] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.monthly_balances)

    def __iter__(self) -> Iterator[MonthlyBalance]:
        return iter(self.monthly_balances)


__all__ = ["TreeBalanceNode", "MonthlyBalance", "MonthlyReport"]
