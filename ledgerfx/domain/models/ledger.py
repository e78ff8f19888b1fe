"""Domain models for ledger records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class CommodityPosition(Enum):
    """Side of the quantity the commodity symbol is displayed on."""

    LEFT = "left"
    RIGHT = "right"


class Reality(Enum):
    """Whether a posting is real or virtual."""

    REAL = "real"
    BALANCED_VIRTUAL = "balanced_virtual"
    UNBALANCED_VIRTUAL = "unbalanced_virtual"


class TransactionStatus(Enum):
    """Clearing status of a transaction or posting."""

    CLEARED = "cleared"
    PENDING = "pending"


@dataclass(frozen=True)
class Commodity:
    """Named unit of value (currency or ticker)."""

    name: str
    position: CommodityPosition = CommodityPosition.RIGHT


@dataclass(frozen=True)
class Amount:
    """Fixed-point quantity of a commodity."""

    quantity: Decimal
    commodity: Commodity

    def __neg__(self) -> "Amount":
        return Amount(quantity=-self.quantity, commodity=self.commodity)

    def with_quantity(self, quantity: Decimal) -> "Amount":
        """Return the same commodity holding another quantity."""
        return Amount(quantity=quantity, commodity=self.commodity)

    @property
    def commodity_name(self) -> str:
        return self.commodity.name


@dataclass(frozen=True)
class Tag:
    """Posting tag with an optional value."""

    name: str
    value: str | None = None


@dataclass
class Posting:
    """One account/amount line of a transaction.

    Attributes:
        account: Colon-delimited account path.
        amount: Fully resolved amount.
        reality: Real or virtual posting.
        date: Optional date override; None inherits the transaction date.
        effective_date: Optional effective date override.
        status: Optional clearing status.
        comment: Optional free-form comment.
        tags: Posting tags.
    """

    account: str
    amount: Amount
    reality: Reality = Reality.REAL
    date: date | None = None
    effective_date: date | None = None
    status: TransactionStatus | None = None
    comment: str | None = None
    tags: list[Tag] = field(default_factory=list)


@dataclass
class Transaction:
    """Dated, ordered sequence of postings."""

    date: date
    description: str
    postings: list[Posting] = field(default_factory=list)
    effective_date: date | None = None
    status: TransactionStatus | None = None
    code: str | None = None
    comment: str | None = None

    def __post_init__(self) -> None:
        if self.effective_date is None:
            self.effective_date = self.date


@dataclass(frozen=True)
class CommodityPrice:
    """Explicit price record: one commodity_name is worth amount."""

    datetime: datetime
    commodity_name: str
    amount: Amount


@dataclass
class Ledger:
    """Price records and transactions of one or more books."""

    commodity_prices: list[CommodityPrice] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)


__all__ = [
    "CommodityPosition",
    "Reality",
    "TransactionStatus",
    "Commodity",
    "Amount",
    "Tag",
    "Posting",
    "Transaction",
    "CommodityPrice",
    "Ledger",
]
