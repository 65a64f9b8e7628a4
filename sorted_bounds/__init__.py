from sorted_bounds.algo import (
    identity,
    is_sorted,
    is_partitioned,
    lower_bound,
    upper_bound,
    partition_point,
    equal_range,
    contains,
)
from sorted_bounds.predicates import (
    at_least,
    greater_than,
    less_than,
    at_most,
    binary_search,
    value_range,
)
from sorted_bounds.checks import check_sorted, check_partitioned
from sorted_bounds.exception import (
    SortedBoundsUsageError,
    NotSortedError,
    NotPartitionedError,
)
