"""
  Builds the monotonic predicates expected by `sorted_bounds.algo`
  out of a value, a `key` and a strict `comp`
"""
import operator

from sorted_bounds.algo import identity, contains, equal_range
from sorted_bounds.checks import check_sorted


def at_least(value, key=identity, comp=operator.lt):
    """To be used with `lower_bound`: first element not less than `value`"""
    def pred(elem):
        return not comp(key(elem), value)

    return pred


def greater_than(value, key=identity, comp=operator.lt):
    """To be used with `lower_bound`: first element greater than `value`"""
    def pred(elem):
        return comp(value, key(elem))

    return pred


def less_than(value, key=identity, comp=operator.lt):
    """To be used with `upper_bound`: first element not less than `value`"""
    def pred(elem):
        return comp(key(elem), value)

    return pred


def at_most(value, key=identity, comp=operator.lt):
    """To be used with `upper_bound`: first element greater than `value`"""
    def pred(elem):
        return not comp(value, key(elem))

    return pred


def binary_search(seq, value, key=identity, comp=operator.lt, check=False):
    """
    Tells if `value` is in sorted sequence `seq`

    If `check` is true, `seq` is first checked to be sorted,
    which costs a linear scan
    """
    if check:
        check_sorted(seq, comp, key)
    return contains(seq, at_least(value, key, comp), greater_than(value, key, comp))


def value_range(seq, value, key=identity, comp=operator.lt, check=False):
    """
    Gives the `(first, last)` indices such that
    `seq[first:last]` are the elements of `seq` equivalent to `value`
    """
    if check:
        check_sorted(seq, comp, key)
    return equal_range(seq, at_least(value, key, comp), at_most(value, key, comp))
