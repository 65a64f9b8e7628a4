import logging

import pytest

import sorted_bounds
from sorted_bounds.checks import check_sorted, check_partitioned
from sorted_bounds.exception import (
    SortedBoundsUsageError,
    NotSortedError,
    NotPartitionedError,
)


def test_check_sorted_accepts_sorted():
    check_sorted([])
    check_sorted([1])
    check_sorted([1, 2, 2, 3])


def test_check_sorted_rejects_unsorted():
    with pytest.raises(NotSortedError) as e:
        check_sorted([1, 3, 2, 4])
    msg = str(e.value)
    assert 'sorted sequence precondition violated' in msg
    assert 'element 2 at index 2' in msg
    assert 'element 3 at index 1' in msg
    assert isinstance(e.value, SortedBoundsUsageError)


def test_check_sorted_logs_before_raising(caplog):
    with caplog.at_level(logging.DEBUG, logger='sorted_bounds.checks'):
        with pytest.raises(NotSortedError):
            check_sorted([2, 1])
    assert 'not sorted at index 0' in caplog.text


def test_check_partitioned():
    check_partitioned([1, 2, 5, 6], lambda x: x < 3)
    check_partitioned([], lambda x: x < 3)
    with pytest.raises(NotPartitionedError):
        check_partitioned([1, 5, 2], lambda x: x < 3)


def test_public_api():
    assert sorted_bounds.lower_bound([1, 2, 3], sorted_bounds.at_least(2)) == 1
    assert sorted_bounds.upper_bound([1, 2, 3], sorted_bounds.at_most(2)) == 2
    assert sorted_bounds.binary_search([1, 2, 3], 3)
    assert sorted_bounds.is_sorted([1, 2, 3])


def test_check_sorted_on_iterables():
    check_sorted(x for x in [1, 2, 2])
    check_sorted({1: 'a', 2: 'b'}.keys())

    with pytest.raises(NotSortedError) as e:
        check_sorted(x for x in [2, 1])
    assert 'element 1 at index 1' in str(e.value)

    with pytest.raises(NotSortedError) as e:
        check_sorted({2: 'a', 1: 'b'}.keys())
    assert 'element 2 at index 0' in str(e.value)


def test_check_sorted_stops_at_first_inversion():
    visited = []

    def key(x):
        visited.append(x)
        return x

    with pytest.raises(NotSortedError):
        check_sorted([1, 3, 2, 0, 5], key=key)
    # each element's key is computed once, and the scan stops at index 2
    assert visited == [1, 3, 2]


def test_check_partitioned_on_iterables():
    check_partitioned((x for x in [1, 2, 5]), lambda x: x < 3)
    with pytest.raises(NotPartitionedError) as e:
        check_partitioned((x for x in [1, 5, 2]), lambda x: x < 3)
    assert 'element 2 at index 2' in str(e.value)
    assert 'partitioned sequence precondition violated' in str(e.value)
