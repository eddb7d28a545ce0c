"""
Numeric helpers shared by the aggregators
"""

import math
from typing import Iterable, Optional


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 away from zero for positives (12.5 -> 13)"""
    return int(math.floor(value + 0.5))


def mean(values: Iterable[float]) -> Optional[float]:
    values = list(values)
    if not values:
        return None
    return sum(values) / len(values)


def round_rank(value: Optional[float]) -> Optional[float]:
    """Average ranks are reported with two decimals"""
    return round(value, 2) if value is not None else None


def percentage(part: float, whole: float) -> int:
    """Integer percentage; 0 when there is nothing to divide by"""
    if not whole:
        return 0
    return round_half_up(part / whole * 100)
