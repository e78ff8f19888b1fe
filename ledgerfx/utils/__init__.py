"""Shared utilities package."""

from .date_utils import coerce_date
from .decimal_utils import coerce_decimal, round_half_away_from_zero
from .utils import get_project_root

__all__ = [
    "coerce_date",
    "coerce_decimal",
    "round_half_away_from_zero",
    "get_project_root",
]
