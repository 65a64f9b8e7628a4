"""
  Searches over sorted sequences, similar to those of the STL

  Every search takes a predicate instead of a value:
  see `sorted_bounds.predicates` to build one from a value.
"""
import operator


def identity(elem):
    return elem


def is_sorted(seq, comp=operator.lt, key=identity):
    """
    Tells if `seq` is sorted in non-decreasing order, that is
    if no `comp(key(seq[i+1]), key(seq[i]))` holds

    Complexity:
      with N = len(seq)
      Time:
        N-1 applications of `comp`
      Space
        Constant
    """
    it = iter(seq)
    try:
        prev = key(next(it))
    except StopIteration:
        return True
    for elem in it:
        cur = key(elem)
        if comp(cur, prev):
            return False
        prev = cur
    return True


def is_partitioned(seq, pred):
    """
    Tells if `seq` is partitioned into
      first elements for which `pred` is true
      then elements for which `pred` is false

    Complexity:
      with N = len(seq)
      Time:
        at most N applications of `pred`
    """
    it = iter(seq)
    for elem in it:
        if not pred(elem):
            break
    for elem in it:
        if pred(elem):
            return False
    return True


def lower_bound(seq, pred):
    """
    Gives the first index i of `seq` for which `pred(seq[i])` is true,
    or `len(seq)` if there is none

    Precondition: `seq` is supposed to be partitioned into
      first elements for which `pred` is false
      then elements for which `pred` is true
    This is not checked. If it does not hold, the result is unspecified.

    Complexity:
      with N = len(seq)
      Time:
        log_2(N)+1 applications of `pred`
      Space
        Constant
    """
    first = 0
    count = len(seq)
    while count > 0:
        step = count // 2
        mid = first + step
        if not pred(seq[mid]):
            first = mid + 1
            count -= step + 1
        else:
            count = step
    return first


def upper_bound(seq, pred):
    """
    Gives the first index i of `seq` for which `pred(seq[i])` is false,
    or `len(seq)` if there is none

    Precondition: `seq` is supposed to be partitioned into
      first elements for which `pred` is true
      then elements for which `pred` is false
    This is not checked. If it does not hold, the result is unspecified.

    Complexity:
      with N = len(seq)
      Time:
        log_2(N)+1 applications of `pred`
      Space
        Constant
    """
    first = 0
    count = len(seq)
    while count > 0:
        step = count // 2
        mid = first + step
        if pred(seq[mid]):
            first = mid + 1
            count -= step + 1
        else:
            count = step
    return first


# the STL name of `upper_bound` with a predicate
partition_point = upper_bound


def equal_range(seq, lower_pred, upper_pred):
    """
    Gives `(lower_bound(seq, lower_pred), upper_bound(seq, upper_pred))`

    With `lower_pred` meaning "at least the target"
    and `upper_pred` meaning "at most the target",
    `seq[first:last]` are the elements equivalent to the target
    """
    return lower_bound(seq, lower_pred), upper_bound(seq, upper_pred)


def contains(seq, pred, exceeds):
    """
    Tells if `seq` holds an element equivalent to some target

      `pred(elem)`    is true if `elem` is at least the target
      `exceeds(elem)` is true if `elem` is strictly greater than the target

    Complexity:
      one `lower_bound` plus one application of `exceeds`
    """
    i = lower_bound(seq, pred)
    return i != len(seq) and not exceeds(seq[i])
