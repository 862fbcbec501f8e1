'''
decimal number to binary number, using a stack

divide by the base and push each remainder; popping the stack back off
gives the digits most significant first.
'''
import logging

logger = logging.getLogger(__name__)

BASE = 2


class InvalidInput(ValueError):
  '''raised for anything that is not a non-negative int'''


class Stack:
  '''LIFO container backed by a list'''

  def __init__(self):
    self._items = []

  def push(self, item):
    self._items.append(item)

  def pop(self):
    if self.is_empty():
      raise IndexError("pop from empty stack")
    return self._items.pop()

  def peek(self):
    if self.is_empty():
      return None
    return self._items[-1]

  def is_empty(self):
    return len(self._items) == 0

  def size(self):
    return len(self._items)

  def __len__(self):
    return self.size()


def convert(n):
  '''
  digits of `n` in base 2, most significant first.
  `convert(10)` -> `[1, 0, 1, 0]`
  '''
  if isinstance(n, bool) or not isinstance(n, int):
    raise InvalidInput("expected an int, got %r" % (n,))
  if (n < 0):
    raise InvalidInput("negative number has no binary form: %d" % n)
  if (n == 0):
    return [0]

  stack = Stack()
  value = n
  while (value > 0):
    stack.push(value % BASE)
    value //= BASE

  digits = []
  while not stack.is_empty():
    digits.append(stack.pop())

  logger.debug("%d -> base%d (%d digits)", n, BASE, len(digits))
  return digits


def render(digits):
  '''join digits into a string like "1010", no separators'''
  digits = list(digits)
  if not digits:
    raise InvalidInput("no digits to render")
  repr = ""
  for digit in digits:
    if isinstance(digit, bool) or not isinstance(digit, int) or digit not in (0, 1):
      raise InvalidInput("not a binary digit: %r" % (digit,))
    repr += str(digit)
  return repr


def to_binary(n):
  return render(convert(n))
