"""Linked List implementation in Python."""

import sys
from typing import Generic, Iterable, Iterator, Optional, TextIO, TypeVar
import warnings

from .node import Node
from .utils.util_logging import setup_debugger

logger = setup_debugger(__name__)

T = TypeVar("T")


class EmptyListError(IndexError):
    """Raised when removing from an empty linked list"""

    def __init__(self, operation: str):
        super().__init__(f"{operation} from empty list")
        self.operation = operation


class LinkedListValues(Generic[T], Iterable[T]):
    """Read-only view of the values of a linked list, from head to tail.

    Every iteration starts a new walk from the current head, so the view can
    be iterated any number of times and reflects later mutations.
    """

    def __init__(self, linked_list: "LinkedList[T]") -> None:
        self._linked_list = linked_list

    def __iter__(self) -> Iterator[T]:
        current = self._linked_list.head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return len(self._linked_list)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)})"


class LinkedList(Generic[T], Iterable[T]):
    """Doubly linked list with an uncached tail"""

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        if iterable is None:
            return
        last: Optional[Node[T]] = None
        for value in iterable:
            node = Node(value)
            if last is None:
                self._head = node
            else:
                last.next = node
                node.prev = last
            last = node
        if __debug__:
            LinkedList.sanity_check(self)

    def sanity_check(self) -> None:
        """Check if the linked list is sane"""
        if not __debug__:
            warnings.warn("Sanity checks are disabled", RuntimeWarning)
            return
        if self._head is None:
            return
        assert self._head.prev is None
        visited = {id(self._head)}
        current = self._head
        while current.next is not None:
            assert id(current.next) not in visited, "cycle in linked list"
            assert current.next.prev is current
            current = current.next
            visited.add(id(current))
        assert current.next is None

    @property
    def head(self) -> Optional[Node[T]]:
        return self._head

    @property
    def tail(self) -> Optional[Node[T]]:
        """Time complexity: O(n)"""
        return self._tail_node()

    def _tail_node(self) -> Optional[Node[T]]:
        current = self._head
        if current is None:
            return None
        while current.next is not None:
            current = current.next
        return current

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_sequence())

    def is_empty(self) -> bool:
        return self._head is None

    def __bool__(self) -> bool:
        return not self.is_empty()

    def add_to_head(self, value: T) -> None:
        """Time complexity: O(1)"""
        logger.debug("add_to_head: %r", value)
        node = Node(value)
        if self._head is not None:
            node.next = self._head
            self._head.prev = node
        self._head = node
        if __debug__:
            LinkedList.sanity_check(self)

    def add_to_tail(self, value: T) -> None:
        """Time complexity: O(n)"""
        logger.debug("add_to_tail: %r", value)
        node = Node(value)
        tail = self._tail_node()
        if tail is None:
            self._head = node
        else:
            tail.next = node
            node.prev = tail
        if __debug__:
            LinkedList.sanity_check(self)

    def remove_head(self) -> T:
        """Time complexity: O(1). Remove the first node and return its value.

        Raises:
            EmptyListError: If the list is empty. The list is left unchanged.
        """
        head = self._head
        if head is None:
            raise EmptyListError("remove_head")

        self._head = head.next
        if self._head is not None:
            self._head.prev = None
        head.next = None
        logger.debug("remove_head: %r", head.value)
        if __debug__:
            LinkedList.sanity_check(self)
        return head.value

    def remove_tail(self) -> T:
        """Time complexity: O(n). Remove the last node and return its value.

        Raises:
            EmptyListError: If the list is empty. The list is left unchanged.
        """
        head = self._head
        if head is None:
            raise EmptyListError("remove_tail")

        if head.next is None:
            tail = head
            self._head = None
        else:
            # Walk to the second-to-last node
            current = head
            while current.next.next is not None:
                current = current.next
            tail = current.next
            current.next = None
            tail.prev = None
        logger.debug("remove_tail: %r", tail.value)
        if __debug__:
            LinkedList.sanity_check(self)
        return tail.value

    def clear(self) -> None:
        """Release every node, leaving the list empty"""
        current = self._head
        self._head = None
        while current is not None:
            following = current.next
            current.next = None
            current.prev = None
            current = following

    def to_sequence(self) -> LinkedListValues[T]:
        return LinkedListValues(self)

    def print_list(self, file: Optional[TextIO] = None) -> None:
        print(str(self), file=file if file is not None else sys.stdout)

    def __str__(self) -> str:
        return " ".join(["<head>", *map(str, self), "<tail>"])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)})"

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __copy__(self) -> "LinkedList[T]":
        return self.__class__(self)
