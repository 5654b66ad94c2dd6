"""Two stack implementations sharing a common size interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, Protocol, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when popping or peeking an empty stack."""

    def __init__(self) -> None:
        super().__init__("stack is empty")


class Sized(Protocol):
    """Anything that reports emptiness and a length."""

    def is_empty(self) -> bool: ...

    def __len__(self) -> int: ...


class Stack(Generic[T]):
    """A stack backed by a Python list."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        if not self._items:
            raise EmptyStackError()
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise EmptyStackError()
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"]


class StackList(Generic[T]):
    """A stack backed by a singly linked list."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None

    def push(self, value: T) -> None:
        self._head = _Node(value, self._head)

    def pop(self) -> T:
        if self._head is None:
            raise EmptyStackError()
        value = self._head.value
        self._head = self._head.next
        return value

    def peek(self) -> T:
        if self._head is None:
            raise EmptyStackError()
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        size = 0
        node = self._head
        while node is not None:
            node = node.next
            size += 1
        return size


def get_stats(container: Sized) -> str:
    """Describe the size of any container with ``is_empty`` and ``len``."""
    if container.is_empty():
        return "The datastructures is empty"
    return f"The size is {len(container)}"


def get_stats_stack(stack: Stack) -> str:
    """Describe the size of a list-backed :class:`Stack`."""
    if not isinstance(stack, Stack):
        raise TypeError(f"expected Stack, got {type(stack).__name__}")
    if stack.is_empty():
        return "The stack is empty"
    return f"The size is {len(stack)}"


def demo() -> None:
    """Push and pop on both stacks and print their statistics."""
    stack: Stack[int] = Stack()
    stack_list: StackList[int] = StackList()
    stack_list.push(4)
    stack.push(10)
    stack.push(20)
    stack.pop()
    stack.pop()
    print(get_stats(stack_list))
    print(get_stats(stack))
    print(get_stats_stack(stack))