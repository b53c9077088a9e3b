"""Longest run of distinct characters, found with a sliding window."""

from __future__ import annotations

__all__ = ["longest_unique_substring_length"]


def longest_unique_substring_length(text: str) -> int:
    """Return the length of the longest substring with no repeated character.

    The window grows to the right and, on meeting a character already in it,
    drops everything up to and including that earlier occurrence. The result
    is never below 1, even for an empty string.
    """
    last_seen: dict[str, int] = {}
    start = 0
    largest = 1

    for index, char in enumerate(text):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = index
        largest = max(largest, index - start + 1)

    return largest