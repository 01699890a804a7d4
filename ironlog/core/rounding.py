"""Half-up rounding for display values (Python's round() is banker's rounding)."""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round .5 away from zero for positives, matching how the app reports numbers."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    return int(math.floor(value + 0.5))
