"""Number formatting and snapping helpers used by every style builder."""

import math
from typing import Sequence


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity.

    Unlike built-in round(), 12.5 -> 13 and -12.5 -> -12, matching the
    rounding Figma uses for the values it displays.
    """
    return int(math.floor(value + 0.5))


def round_to_nearest_hundredth(value: float) -> float:
    """Round to two decimals. Only meant for comparisons, not for output."""
    return math.floor(value * 100 + 0.5) / 100


def number_to_fixed_string(value: float) -> str:
    """Format a style number with at most two decimals.

    Trailing zeros are trimmed and negative zero prints as "0":
    0.5 -> "0.5", 45.0 -> "45", -0.001 -> "0".
    """
    text = f"{value:.2f}".rstrip('0').rstrip('.')
    if text in ('-0', ''):
        return '0'
    return text


def nearest_value(goal: float, candidates: Sequence[float]) -> float:
    """Return the candidate closest to `goal`; ties keep the earlier one."""
    best = candidates[0]
    for candidate in candidates[1:]:
        if abs(candidate - goal) < abs(best - goal):
            best = candidate
    return best
