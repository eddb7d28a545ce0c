"""
Utility modules
"""

from .metrics import mean, percentage, round_half_up, round_rank

__all__ = [
    "mean",
    "percentage",
    "round_half_up",
    "round_rank",
]
