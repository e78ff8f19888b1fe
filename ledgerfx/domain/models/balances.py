"""Domain models for multi-commodity balances."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from ledgerfx.domain.models.ledger import Amount, Ledger, Transaction
from ledgerfx.utils.decimal_utils import round_half_away_from_zero

if TYPE_CHECKING:
    from ledgerfx.domain.services.fx import Prices


@dataclass
class AccountBalance:
    """Balance of a single account.

    Maps commodity names to amounts. Never holds an exact-zero amount.
    """

    amounts: dict[str, Amount] = field(default_factory=dict)

    def copy(self) -> AccountBalance:
        return AccountBalance(amounts=dict(self.amounts))

    def is_zero(self) -> bool:
        return all(amount.quantity == 0 for amount in self.amounts.values())

    def add_amount(self, amount: Amount) -> None:
        """Add a single amount in place."""
        self._merge_amount(amount)
        self._remove_empties()

    def subtract_amount(self, amount: Amount) -> None:
        """Subtract a single amount in place."""
        self._merge_amount(-amount)
        self._remove_empties()

    def sorted_amounts(self) -> list[Amount]:
        """Return the held amounts ordered by commodity name."""
        return [self.amounts[name] for name in sorted(self.amounts)]

    def value_in_commodity(
        self,
        commodity_name: str,
        value_date: date,
        prices: Prices,
    ) -> Decimal:
        """Sum every held amount expressed in commodity_name.

        Args:
            commodity_name: Target commodity.
            value_date: Date used for rate lookups.
            prices: Rate store used for conversions.

        Returns:
            Decimal: Unrounded total value.

        Raises:
            PricesError: The first failed conversion.
        """
        result = Decimal("0")
        for amount in self.amounts.values():
            if amount.commodity.name == commodity_name:
                result += amount.quantity
            else:
                result += prices.convert(
                    amount.quantity,
                    amount.commodity.name,
                    commodity_name,
                    value_date,
                )
        return result

    def value_in_commodity_rounded(
        self,
        commodity_name: str,
        decimal_points: int,
        value_date: date,
        prices: Prices,
    ) -> Decimal:
        """Return value_in_commodity rounded half away from zero."""
        value = self.value_in_commodity(commodity_name, value_date, prices)
        return round_half_away_from_zero(value, decimal_points)

    def _merge_amount(self, amount: Amount) -> None:
        existing = self.amounts.get(amount.commodity.name)
        if existing is None:
            self.amounts[amount.commodity.name] = amount
        else:
            self.amounts[amount.commodity.name] = existing.with_quantity(
                existing.quantity + amount.quantity
            )

    def _remove_empties(self) -> None:
        empties = [
            name
            for name, amount in self.amounts.items()
            if amount.quantity == 0
        ]
        for name in empties:
            del self.amounts[name]

    def __iadd__(self, other: AccountBalance | Amount) -> AccountBalance:
        if isinstance(other, Amount):
            self.add_amount(other)
            return self
        for amount in list(other.amounts.values()):
            self._merge_amount(amount)
        self._remove_empties()
        return self

    def __isub__(self, other: AccountBalance | Amount) -> AccountBalance:
        if isinstance(other, Amount):
            self.subtract_amount(other)
            return self
        for amount in list(other.amounts.values()):
            self._merge_amount(-amount)
        self._remove_empties()
        return self

    def __add__(self, other: AccountBalance | Amount) -> AccountBalance:
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: AccountBalance | Amount) -> AccountBalance:
        result = self.copy()
        result -= other
        return result

    def __neg__(self) -> AccountBalance:
        return AccountBalance(
            amounts={name: -amount for name, amount in self.amounts.items()}
        )


@dataclass
class Balance:
    """Balance of one or more accounts.

    Maps account paths to their balances. Never holds an empty balance.
    """

    account_balances: dict[str, AccountBalance] = field(default_factory=dict)

    @classmethod
    def from_transactions(
        cls,
        transactions: Iterable[Transaction],
    ) -> Balance:
        balance = cls()
        for transaction in transactions:
            balance.update_with_transaction(transaction)
        return balance

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> Balance:
        return cls.from_transactions([transaction])

    @classmethod
    def from_ledger(cls, ledger: Ledger) -> Balance:
        return cls.from_transactions(ledger.transactions)

    def copy(self) -> Balance:
        return Balance(
            account_balances={
                account: account_balance.copy()
                for account, account_balance in self.account_balances.items()
            }
        )

    def update_with_transaction(self, transaction: Transaction) -> None:
        """Add every posting of the transaction to its account."""
        for posting in transaction.postings:
            self.account_balances.setdefault(
                posting.account,
                AccountBalance(),
            ).add_amount(posting.amount)
        self._remove_empties()

    def add_amount(self, account: str, amount: Amount) -> None:
        self.account_balances.setdefault(account, AccountBalance()).add_amount(
            amount
        )
        self._remove_empties()

    def get_account_balance(
        self,
        account_prefixes: Iterable[str],
    ) -> AccountBalance:
        """Merge the balances of accounts whose path starts with a prefix.

        Matching is a raw string prefix test: "Asset" matches
        "Assets:Bank". Each account is counted once, even when several
        prefixes match it.

        Args:
            account_prefixes: Prefixes to match against account paths.

        Returns:
            AccountBalance: Combined balance of the matching accounts.
        """
        prefixes = tuple(account_prefixes)
        result = AccountBalance()
        for account_name, account_balance in self.account_balances.items():
            for account_prefix in prefixes:
                if account_name.startswith(account_prefix):
                    result += account_balance
                    break
        return result

    def total(self) -> AccountBalance:
        """Return the merge of every account balance."""
        result = AccountBalance()
        for account_balance in self.account_balances.values():
            result += account_balance
        return result

    def value_in_commodity(
        self,
        commodity_name: str,
        value_date: date,
        prices: Prices,
    ) -> Decimal:
        """Value every held commodity of every account in commodity_name."""
        return self.total().value_in_commodity(
            commodity_name,
            value_date,
            prices,
        )

    def _remove_empties(self) -> None:
        empties = [
            account
            for account, account_balance in self.account_balances.items()
            if account_balance.is_zero()
        ]
        for account in empties:
            del self.account_balances[account]

    def __iadd__(self, other: Balance) -> Balance:
        for account, account_balance in other.account_balances.items():
            if account in self.account_balances:
                self.account_balances[account] += account_balance
            else:
                self.account_balances[account] = account_balance.copy()
        self._remove_empties()
        return self

    def __isub__(self, other: Balance) -> Balance:
        for account, account_balance in other.account_balances.items():
            if account in self.account_balances:
                self.account_balances[account] -= account_balance
            else:
                self.account_balances[account] = -account_balance
        self._remove_empties()
        return self

    def __add__(self, other: Balance) -> Balance:
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Balance) -> Balance:
        result = self.copy()
        result -= other
        return result


__all__ = ["AccountBalance", "Balance"]
