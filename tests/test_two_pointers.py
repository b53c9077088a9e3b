import pytest
from hypothesis import given
from hypothesis import strategies as st

from cheatsheet.two_pointers import (
    NoPairFoundError,
    backspace_equal,
    has_cycle,
    pair_with_sum,
)


def test_pair_with_sum_example():
    values = [2, 3, 4, 5, 6]
    left, right = pair_with_sum(values, 10)
    assert (values[left], values[right]) == (4, 6)


def test_pair_not_found_raises():
    with pytest.raises(NoPairFoundError, match="No such combination"):
        pair_with_sum([1, 2], 100)


def test_pair_empty_raises():
    with pytest.raises(NoPairFoundError):
        pair_with_sum([], 0)


def test_single_entry_pairs_with_itself():
    assert pair_with_sum([5], 10) == (0, 0)


sorted_lists = st.lists(st.integers(min_value=-100, max_value=100), min_size=2, max_size=25).map(sorted)


@given(sorted_lists, st.data())
def test_pair_found_when_one_exists(values, data):
    x = data.draw(st.integers(min_value=0, max_value=len(values) - 2))
    y = data.draw(st.integers(min_value=x + 1, max_value=len(values) - 1))
    target = values[x] + values[y]
    left, right = pair_with_sum(values, target)
    assert values[left] + values[right] == target
    assert left < right


@given(sorted_lists, st.integers(min_value=-300, max_value=300))
def test_pair_result_always_sums_to_target(values, target):
    try:
        left, right = pair_with_sum(values, target)
    except NoPairFoundError:
        sums = {values[p] + values[q] for p in range(len(values)) for q in range(p + 1, len(values))}
        assert target not in sums
    else:
        assert values[left] + values[right] == target


def test_cycle_detected_in_example():
    assert has_cycle([1, 3, 4, 2, 2]) is True


def test_walk_leaving_sequence_has_no_cycle():
    assert has_cycle([1, 5]) is False


def test_empty_sequence_has_no_cycle():
    assert has_cycle([]) is False


def test_two_cycle_detected():
    assert has_cycle([1, 0]) is True


def test_out_of_range_step_raises():
    with pytest.raises(IndexError):
        has_cycle([1])


@given(st.integers(min_value=1, max_value=30), st.data())
def test_in_range_values_always_cycle(n, data):
    values = data.draw(st.lists(st.integers(min_value=1, max_value=n), min_size=n + 1, max_size=n + 1))
    assert has_cycle(values) is True


def test_backspace_source_example():
    assert backspace_equal("a#b#c#d##e#f", "##f") is True


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [("ab#c", "ad#c", True), ("ab##", "c#d#", True), ("a#c", "b", False)],
)
def test_backspace_cases(a, b, expected):
    assert backspace_equal(a, b) is expected


@given(st.text(alphabet="ab#", max_size=20))
def test_backspace_reflexive(text):
    assert backspace_equal(text, text) is True


@given(st.text(alphabet="ab#", max_size=20))
def test_typed_then_erased_character_is_ignored(text):
    assert backspace_equal(text + "x#", text) is True


@given(st.text(alphabet="ab#", max_size=20))
def test_extra_trailing_character_differs(text):
    assert backspace_equal(text + "z", text) is False