from hypothesis import given
from hypothesis import strategies as st
import pytest

from dskit.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)


@pytest.mark.parametrize(
    "data, expected",
    [
        ([11, 2, 33, 4, 25, 6, 75, 8, 49, 21], [2, 4, 6, 8, 11, 21, 25, 33, 49, 75]),
        ([40, 20, 60, 30, 50, 10], [10, 20, 30, 40, 50, 60]),
        ([], []),
        ([7], [7]),
        ([5, 1, 5, 1, 5, 0], [0, 1, 1, 5, 5, 5]),
    ],
)
def test_sorts_known_arrays(data, expected):
    assert (
        bubble_sort(data)
        == insertion_sort(data)
        == selection_sort(data)
        == merge_sort(data)
        == quick_sort(data)
        == expected
    )


def test_input_is_left_unchanged():
    data = [3, 1, 2]
    results = [
        bubble_sort(data),
        insertion_sort(data),
        selection_sort(data),
        merge_sort(data),
        quick_sort(data),
    ]
    assert data == [3, 1, 2]
    assert all(result == [1, 2, 3] and result is not data for result in results)


def test_accepts_any_iterable_of_comparables():
    words = ("pear", "apple", "fig")
    results = [
        bubble_sort(iter(words)),
        insertion_sort(iter(words)),
        selection_sort(iter(words)),
        merge_sort(iter(words)),
        quick_sort(iter(words)),
    ]
    assert results == [["apple", "fig", "pear"]] * 5


@given(data=st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_matches_builtin_sorted(data):
    results = {
        "bubble": bubble_sort(data),
        "insertion": insertion_sort(data),
        "selection": selection_sort(data),
        "merge": merge_sort(data),
        "quick": quick_sort(data),
    }
    assert all(result == sorted(data) for result in results.values())


@given(data=st.lists(st.tuples(st.integers(0, 3), st.integers())))
def test_merge_sort_is_stable(data):
    keyed = [(key, index) for index, (key, _) in enumerate(data)]

    class Item:
        def __init__(self, key, index):
            self.key = key
            self.index = index

        def __lt__(self, other):
            return self.key < other.key

        def __gt__(self, other):
            return self.key > other.key

    result = merge_sort(Item(k, i) for k, i in keyed)
    assert [(item.key, item.index) for item in result] == sorted(keyed, key=lambda p: p[0])