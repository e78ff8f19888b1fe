"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_away_from_zero(value: Decimal, decimal_points: int) -> Decimal:
    """Round a Decimal to a fixed number of decimal places.

    Args:
        value: Quantity to round.
        decimal_points: Non-negative number of decimal places to keep.

    Returns:
        Decimal: Rounded quantity, midpoints rounded away from zero.

    Raises:
        ValueError: If decimal_points is negative.
    """
    if decimal_points < 0:
        raise ValueError(
            f"Decimal points must be non-negative, got {decimal_points}"
        )
    exponent = Decimal(1).scaleb(-decimal_points)
    # ROUND_HALF_UP rounds midpoints away from zero for both signs.
    return value.quantize(exponent, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "round_half_away_from_zero"]
