def _to_bold_red(s):
  red = '\x1b[31m'
  bold = '\x1b[1m'
  reset = '\x1b[0m'
  return red + bold + s + reset

class SortedBoundsUsageError(Exception):
  """Base of the errors raised when a search precondition does not hold"""
  precondition = 'usage'

  def __init__(self, msg):
    self.msg = msg
    banner = f'sorted_bounds: {self.precondition} precondition violated'
    Exception.__init__(self, _to_bold_red(banner) + '\n' + msg)

class NotSortedError(SortedBoundsUsageError):
  precondition = 'sorted sequence'

class NotPartitionedError(SortedBoundsUsageError):
  precondition = 'partitioned sequence'
