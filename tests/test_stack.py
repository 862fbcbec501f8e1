import pytest

from binary import Stack


def test_pop_is_last_in_first_out():
  stack = Stack()
  for item in (1, 0, 1, 1):
    stack.push(item)
  assert [stack.pop() for _ in range(4)] == [1, 1, 0, 1]
  assert stack.is_empty()


def test_peek_does_not_remove():
  stack = Stack()
  assert stack.peek() is None
  stack.push(7)
  assert stack.peek() == 7
  assert stack.size() == 1
  assert len(stack) == 1


def test_pop_empty_raises():
  with pytest.raises(IndexError, match="pop from empty stack"):
    Stack().pop()
