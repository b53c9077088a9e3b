"""Command that prints worked examples of the array and string techniques."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from cheatsheet.binary_search import median_of_two_sorted
from cheatsheet.sliding_window import longest_unique_substring_length
from cheatsheet.two_pointers import (
    NoPairFoundError,
    backspace_equal,
    has_cycle,
    pair_with_sum,
)

__all__ = ["render", "main"]


def _number(value: float) -> str:
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _median_section(a: list[int], b: list[int], expected: str) -> str:
    inputs = f"\t\tInputs:\n\t\t\ta = {a}\n\t\t\tb = {b}"
    result = _number(median_of_two_sorted(a, b))
    return f"{inputs} \n\t\tOutput: {result} == {expected}\n"


def render() -> str:
    """Return the full cheat-sheet text."""
    parts = [
        "Welcome to Cheat - Sheet\n",
        "---------------------------------------------\n",
        "Array / Strings\n",
        "----------------\n",
        "\t1.Two-Pointers",
        "\n\t\t(a) K-Sum Problem\n\t\tInput:\n\t\t\tinp: [2, 3, 4, 5, 6],\n\t\t\ttarget: 10\n",
    ]

    values = [2, 3, 4, 5, 6]
    try:
        left, right = pair_with_sum(values, 10)
    except NoPairFoundError as err:
        parts.append(f"\t\tError:  {err}\n")
    else:
        parts.append(f"\t\tOutput:  {values[left]}  and  {values[right]}\n")

    parts.append(
        "\n\t\t(b) Duplicate Number Detection - Floyd's Tortoise and Hare Algo"
        "\n\t\tInput:\n\t\t\tinp: [1, 3, 4, 2, 2]\n"
    )
    if has_cycle([1, 3, 4, 2, 2]):
        parts.append("\t\tOutput: Is Cyclic\n")
    else:
        parts.append("\t\tOuput: Is NOT Cyclic\n")

    parts.append(
        "\n\t\t(c) Backspace string compare - 2 sequence comparision"
        '\n\t\tInput:\n\t\t\tinp: "a#b#c#d##e#f", "##f"\n'
    )
    same = backspace_equal("a#b#c#d##e#f", "##f")
    parts.append(f"\t\tOutput:  {'true' if same else 'false'}\n")

    parts.append("\n\t2.Sliding-Window")
    parts.append(
        "\n\t\t(a) Size of largest substring of non-repeating characters"
        '\n\t\tInputs: "abcabcbb", "bbbbb", "pwwkew"\n'
    )
    lengths = " , ".join(
        str(longest_unique_substring_length(text)) for text in ("abcabcbb", "bbbbb", "pwwkew")
    )
    parts.append(f"\t\tOutputs:  {lengths}\n")

    parts.append("\n\t3.Binary Search\n")
    parts.append("\t\t(a) Median of 2 sorted arrays\n")
    parts.append(_median_section([1, 3], [2], "2"))
    parts.append(_median_section([1, 2], [3, 4], "2.5"))
    parts.append(_median_section([1, 2, 3, 4, 5], list(range(6, 18)), "9"))
    parts.append(_median_section([1, 2, 3], [4, 5, 6], "3.5"))

    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the cheat sheet and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="cheatsheet",
        description="Print worked examples of array and string techniques.",
    )
    parser.parse_args(argv)
    print(render(), end="")
    return 0