"""Median of two sorted sequences, found by binary search over partitions."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = ["median_of_two_sorted"]


def _halve_toward_zero(n: int) -> int:
    """Halve an integer, truncating toward zero rather than flooring."""
    return n // 2 if n >= 0 else -((-n) // 2)


def _median_of_one(values: Sequence[int]) -> float:
    middle = len(values) // 2
    if len(values) % 2:
        return float(values[middle])
    return (values[middle - 1] + values[middle]) / 2


def median_of_two_sorted(a: Sequence[int], b: Sequence[int]) -> float:
    """Return the median of the merge of two ascending sequences.

    The shorter sequence is split by binary search at a point ``i``; the
    longer one is split at ``j`` so that both left halves together hold half
    of all values. The split is right once every left value is no larger
    than every right value.
    """
    a = list(a)
    b = list(b)
    if not a and not b:
        raise ValueError("the median of two empty sequences is undefined")
    if not a:
        return _median_of_one(b)
    if not b:
        return _median_of_one(a)

    short, long_ = (a, b) if len(a) <= len(b) else (b, a)
    total = len(short) + len(long_)
    half = total // 2
    low, high = 0, len(short) - 1

    while True:
        i = low + _halve_toward_zero(high - low)
        j = half - i

        short_left = short[i - 1] if 1 <= i <= len(short) else -math.inf
        short_right = short[i] if 0 <= i < len(short) else math.inf
        long_left = long_[j - 1] if 1 <= j <= len(long_) else -math.inf
        long_right = long_[j] if 0 <= j < len(long_) else math.inf

        if short_left <= long_right and long_left <= short_right:
            break
        if short_left > long_right:
            high = i - 1
        else:
            low = i + 1

    right_min = min(short_right, long_right)
    if total % 2 == 0:
        return (max(short_left, long_left) + right_min) / 2
    return float(right_min)