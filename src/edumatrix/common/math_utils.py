from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (62.5 -> 63).

    Python's round() uses banker's rounding, which would report 62 here.
    """
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    """Whole-number percentage of part/whole; 0 when whole is 0."""
    if whole <= 0:
        return 0
    return round_half_up(100 * part / whole)
