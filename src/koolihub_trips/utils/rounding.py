"""Decimal rounding that matches how amounts are displayed to passengers."""

from math import floor


def round_half_up(value: float, ndigits: int = 2) -> float:
    """Round with halves going up (0.125 -> 0.13, -0.125 -> -0.12)."""
    factor = 10**ndigits
    return floor(value * factor + 0.5) / factor
