# cheatsheet

A small collection of worked answers to classic array and string problems. Each answer
shows one common technique.

## What is in it

- `cheatsheet.two_pointers`
  - `pair_with_sum(values, target)`: takes a list sorted in ascending order and
    returns a pair of indices `(left, right)` whose values add up to `target`.
    The search starts with one pointer at each end. When the pointers meet, the
    single remaining entry is tried against itself. If no pair is found, or the
    list is empty, it raises `NoPairFoundError`, which is a subclass of
    `LookupError`.
  - `has_cycle(values)`: treats each value as the index of the next step, starting
    from index 0. A slow pointer and a fast pointer move through the list, and the
    function returns `True` if they meet (Floyd's tortoise and hare). This is how a
    duplicate number is detected. It returns `False` once either pointer leaves the
    list. If a value points outside the list while the fast pointer is stepping, it
    raises `IndexError`.
  - `backspace_equal(a, b)`: returns `True` if the two strings give the same text
    when typed into an editor where `#` is a backspace. A backspace on empty text
    does nothing.
- `cheatsheet.sliding_window`
  - `longest_unique_substring_length(text)`: returns the length of the longest
    substring that has no repeated character. The result is never below 1, even
    for an empty string.
- `cheatsheet.binary_search`
  - `median_of_two_sorted(a, b)`: returns the median of two ascending lists as a
    `float`, without merging them. It finds the split point by binary search over
    the shorter list. If both lists are empty, it raises `ValueError`.

## Installation

```
pip install .
```

## Usage

```python
from cheatsheet.two_pointers import pair_with_sum, has_cycle, backspace_equal
from cheatsheet.sliding_window import longest_unique_substring_length
from cheatsheet.binary_search import median_of_two_sorted

values = [2, 3, 4, 5, 6]
i, j = pair_with_sum(values, 10)
print(values[i], values[j])                       # 4 6

print(has_cycle([1, 3, 4, 2, 2]))                 # True
print(backspace_equal("a#b#c#d##e#f", "##f"))     # True
print(longest_unique_substring_length("pwwkew"))  # 3
print(median_of_two_sorted([1, 2], [3, 4]))       # 2.5
```

## Command line

Run this to print the full cheat sheet, with every example and its result:

```
cheatsheet
```

The command takes no options apart from `--help`. The same text is available from
Python as `cheatsheet.cli.render()`.

## What it does not do

The command only prints a fixed set of examples. It does not read your own inputs.
To try other values, call the functions from Python.

## Running the tests

```
pip install .[test]
pytest
```