import pytest

from dsakit.ranking import (
    find_index,
    sort_fruits_by_price,
    sort_students_by_total,
    total_marks,
)

ARR = [10, 11, 2, 3, 4, 6, 7, 8]

FRUITS = [
    ("apple", 10),
    ("mango", 100),
    ("guava", 20),
    ("papaya", 40),
    ("orange", 60),
    ("banana", 120),
]

STUDENTS = [
    ("Rohan", [10, 20, 11]),
    ("Prateek", [10, 21, 3]),
    ("Vivek", [4, 5, 6]),
    ("Rijul", [10, 13, 20]),
]


@pytest.mark.parametrize("key", ARR)
def test_find_index_locates_present_keys(key):
    index = find_index(ARR, key)
    assert ARR[index] == key


def test_find_index_first_match():
    assert find_index([5, 1, 5], 5) == 0


def test_find_index_missing_key():
    assert find_index(ARR, 99) == -1


def test_fruits_sorted_by_price_descending():
    ordered = sort_fruits_by_price(FRUITS)
    assert [name for name, _ in ordered] == [
        "banana",
        "mango",
        "orange",
        "papaya",
        "guava",
        "apple",
    ]
    assert sorted(ordered) == sorted(FRUITS)


def test_fruit_sort_leaves_input_alone():
    fruits = list(FRUITS)
    sort_fruits_by_price(fruits)
    assert fruits == FRUITS


def test_total_marks_sums_first_three():
    assert total_marks([4, 5, 6]) == total_marks([6, 5, 4])
    assert total_marks([1, 2, 3, 100]) == total_marks([1, 2, 3])


def test_total_marks_too_few():
    with pytest.raises(ValueError):
        total_marks([1, 2])


def test_students_sorted_by_total():
    ordered = sort_students_by_total(STUDENTS)
    assert [name for name, _ in ordered] == ["Rijul", "Rohan", "Prateek", "Vivek"]
    totals = [total_marks(marks) for _, marks in ordered]
    assert totals == sorted(totals, reverse=True)