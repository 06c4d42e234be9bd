import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.subarray import max_subarray_divide, max_subarray_kadane

lists = st.lists(st.integers(min_value=-100, max_value=100), min_size=1, max_size=40)


def _slice_sums(values):
    return {
        sum(values[i:j]) for i in range(len(values)) for j in range(i + 1, len(values) + 1)
    }


def test_kadane_source_example():
    assert max_subarray_kadane([2, 3, -8, 7, -1, 2, 3]) == 11


def test_divide_source_example():
    assert max_subarray_divide([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_all_negative_gives_largest_element():
    assert max_subarray_kadane([-7, -3, -9]) == -3
    assert max_subarray_divide([-7, -3, -9]) == -3


def test_single_element():
    assert max_subarray_kadane([5]) == 5
    assert max_subarray_divide([5]) == 5


def test_kadane_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_kadane([])


def test_divide_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_divide([])


@given(lists)
def test_both_methods_agree(values):
    assert max_subarray_kadane(values) == max_subarray_divide(values)


@given(values=lists)
def test_result_bounds_every_slice_and_is_reached(values):
    sums = _slice_sums(values)
    kadane = max_subarray_kadane(values)
    divide = max_subarray_divide(values)
    assert kadane in sums
    assert kadane == max(sums)
    assert divide in sums
    assert divide == max(sums)


@given(st.lists(st.integers(min_value=0, max_value=100), min_size=1))
def test_non_negative_values_sum_whole_list(values):
    assert max_subarray_kadane(values) == sum(values)