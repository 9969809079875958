import pytest

from examdrills.sorting import quick_sort


@pytest.mark.parametrize(
    "values",
    [
        [5, 1, 2, 4, 3, 8, 7, 6, 9, 12],
        [1, 5],
        [5, 1],
        [3, 3, 3, 3],
        [9, 8, 7, 6, 5, 4, 3, 2, 1],
        [-2, 0, 7, -2, 4, 0],
        [42],
    ],
)
def test_quick_sort_orders_values(values):
    assert quick_sort(values) == sorted(values)


def test_quick_sort_empty():
    assert quick_sort([]) == []


def test_quick_sort_leaves_input_unchanged():
    values = [3, 1, 2]
    result = quick_sort(values)
    assert values == [3, 1, 2]
    assert result == [1, 2, 3]


def test_quick_sort_accepts_iterables():
    assert quick_sort(iter((2, 1, 3))) == [1, 2, 3]


def test_quick_sort_large_input_is_permutation():
    values = [(i * 7919) % 1000 for i in range(2000)]
    result = quick_sort(values)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert sorted(result) == sorted(values)