"""Problems solved with two pointers moving through a sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import zip_longest

__all__ = ["NoPairFoundError", "pair_with_sum", "has_cycle", "backspace_equal"]


class NoPairFoundError(LookupError):
    """Raised when no two entries add up to the target."""


def pair_with_sum(values: Sequence[int], target: int) -> tuple[int, int]:
    """Return indices ``(left, right)`` into ascending ``values`` summing to ``target``.

    The pointers start at both ends; a sum too small moves the left one up,
    a sum too large moves the right one down. When they meet, the single
    remaining entry is tried against itself.
    """
    if not values:
        raise NoPairFoundError("No such combination found that results in target")

    left, right = 0, len(values) - 1
    while right > left:
        total = values[left] + values[right]
        if total == target:
            break
        if total < target:
            left += 1
        else:
            right -= 1

    if values[left] + values[right] == target:
        return left, right
    raise NoPairFoundError("No such combination found that results in target")


def _follow(values: Sequence[int], index: int) -> int:
    if not 0 <= index < len(values):
        raise IndexError(f"index {index} out of range for length {len(values)}")
    return values[index]


def has_cycle(values: Sequence[int]) -> bool:
    """Tell whether following values as indices from 0 runs into a cycle.

    A slow pointer takes one step and a fast pointer two; they meet if the
    walk loops, and the walk ends once either pointer leaves the sequence.
    """
    slow = fast = 0
    while fast < len(values) and slow < len(values):
        slow = _follow(values, slow)
        fast = _follow(values, _follow(values, fast))
        if slow == fast:
            return True
    return False


def _typed_backwards(text: str) -> Iterator[str]:
    """Yield the characters left after applying '#' backspaces, last first."""
    skip = 0
    for char in reversed(text):
        if char == "#":
            skip += 1
        elif skip:
            skip -= 1
        else:
            yield char


def backspace_equal(a: str, b: str) -> bool:
    """Tell whether two strings type the same text when '#' is a backspace."""
    missing = object()
    return all(
        x == y
        for x, y in zip_longest(_typed_backwards(a), _typed_backwards(b), fillvalue=missing)
    )