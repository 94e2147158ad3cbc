import math

import pytest

from dsakit.recursion import (
    bubble_sort_recursive,
    bubble_sort_stepwise,
    decreasing,
    factorial,
    fast_power,
    fib,
    first_occurrence,
    increasing,
    is_sorted,
    last_occurrence,
    power,
    spell,
)

SEARCH_ARR = [1, 3, 5, 8, 7, 6, 2, 8, 7, 11, 21]


@pytest.mark.parametrize("sorter", [bubble_sort_recursive, bubble_sort_stepwise])
@pytest.mark.parametrize(
    "arr",
    [[-2, 3, 4, -1, 5, -12, 6, 1, 3], [], [1], [5, 4, 3, 2, 1], [2, 2, 1, 1]],
)
def test_bubble_sorts(sorter, arr):
    expected = sorted(arr)
    sorter(arr)
    assert arr == expected


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


@pytest.mark.parametrize("n", range(2, 40))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_negative():
    with pytest.raises(ValueError):
        fib(-3)


@pytest.mark.parametrize("n", [0, 1, 5, 12])
def test_decreasing_and_increasing(n):
    assert decreasing(n) == list(range(n, 0, -1))
    assert increasing(n) == decreasing(n)[::-1]


def test_decreasing_negative():
    with pytest.raises(ValueError):
        decreasing(-1)


@pytest.mark.parametrize("a, n", [(2, 0), (2, 10), (3, 5), (-4, 3), (7, 11)])
def test_powers(a, n):
    assert power(a, n) == a**n
    assert fast_power(a, n) == power(a, n)


def test_power_negative_exponent():
    with pytest.raises(ValueError):
        fast_power(2, -1)


@pytest.mark.parametrize("key", sorted(set(SEARCH_ARR)))
def test_occurrences(key):
    first = first_occurrence(SEARCH_ARR, key)
    last = last_occurrence(SEARCH_ARR, key)
    assert SEARCH_ARR[first] == key
    assert SEARCH_ARR[last] == key
    assert key not in SEARCH_ARR[:first]
    assert key not in SEARCH_ARR[last + 1 :]
    assert first <= last


def test_occurrences_missing():
    assert first_occurrence(SEARCH_ARR, 99) == -1
    assert last_occurrence(SEARCH_ARR, 99) == -1
    assert last_occurrence([], 1) == -1


def test_is_sorted_source_array():
    assert is_sorted([1, 2, 3, 5, 16, 7]) is False


def test_is_sorted_true_cases():
    assert is_sorted([1, 2, 3, 5, 7, 16])
    assert is_sorted([])
    assert is_sorted([4])


def test_is_sorted_is_strict():
    assert not is_sorted([1, 2, 2, 3])


def test_spell():
    assert spell(1234) == "one two three four"
    assert spell(10) == "one zero"


def test_spell_zero_is_empty():
    assert spell(0) == ""


def test_spell_word_count_matches_digits():
    for n in (7, 40, 905, 123456):
        assert len(spell(n).split()) == len(str(n))


def test_spell_negative():
    with pytest.raises(ValueError):
        spell(-5)