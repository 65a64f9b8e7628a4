import logging
import operator

from sorted_bounds.algo import identity
from sorted_bounds.exception import NotSortedError, NotPartitionedError

logger = logging.getLogger(__name__)


def check_sorted(seq, comp=operator.lt, key=identity):
  """
  Raises `NotSortedError` if `seq` is not sorted,
  to be called before searching when the caller cannot guarantee it

  `seq` is scanned once: an iterator passed here is consumed
  """
  it = enumerate(seq)
  try:
    _, prev = next(it)
  except StopIteration:
    return
  prev_key = key(prev)
  for i, elem in it:
    cur_key = key(elem)
    if comp(cur_key, prev_key):
      logger.debug('sequence is not sorted at index %d', i-1)
      raise NotSortedError(
        f'element {elem!r} at index {i} '
        f'is ordered before element {prev!r} at index {i-1}'
      )
    prev, prev_key = elem, cur_key


def check_partitioned(seq, pred):
  """
  Raises `NotPartitionedError` if `pred` flips back to true after being false on `seq`

  `seq` is scanned once: an iterator passed here is consumed
  """
  it = enumerate(seq)
  for _, elem in it:
    if not pred(elem):
      break
  for i, elem in it:
    if pred(elem):
      name = getattr(pred, '__qualname__', pred)
      logger.debug('sequence is not partitioned by %s at index %d', name, i)
      raise NotPartitionedError(
        f'element {elem!r} at index {i} satisfies predicate {name} '
        'after an element that does not'
      )
