"""Tests for utility helpers."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from ledgerfx.utils.date_utils import coerce_date
from ledgerfx.utils.decimal_utils import coerce_decimal, round_half_away_from_zero


def test_round_half_away_from_zero_for_both_signs() -> None:
    """Midpoints move away from zero."""
    assert round_half_away_from_zero(Decimal("0.125"), 2) == Decimal("0.13")
    assert round_half_away_from_zero(Decimal("-0.125"), 2) == Decimal("-0.13")
    assert round_half_away_from_zero(Decimal("2.5"), 0) == Decimal("3")
    assert round_half_away_from_zero(Decimal("1.124"), 2) == Decimal("1.12")


def test_round_half_away_from_zero_rejects_negative_precision() -> None:
    """Negative precision is refused."""
    with pytest.raises(ValueError):
        round_half_away_from_zero(Decimal("1"), -1)


def test_coerce_decimal_handles_none_and_numbers() -> None:
    """Raw SQL values normalize to Decimal."""
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal(3) == Decimal("3")
    assert coerce_decimal(0.1) == Decimal("0.1")


def test_coerce_date_accepts_common_inputs() -> None:
    """Datetimes, dates and ISO strings become dates."""
    assert coerce_date(datetime(2024, 1, 2, 10, 0)) == date(2024, 1, 2)
    assert coerce_date(date(2024, 1, 2)) == date(2024, 1, 2)
    assert coerce_date("2024-01-02 10:59:00") == date(2024, 1, 2)
    assert coerce_date("not a date") is None
    assert coerce_date(42) is None
