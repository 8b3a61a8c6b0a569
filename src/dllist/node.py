"""Node class for doubly linked list."""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """One element of the chain.

    `next` is the owning link to the successor; `prev` is a back-reference
    used only for traversal. The setters change one field each and never fix
    up the neighbour on the other side.
    """

    next: Optional["Node[T]"]
    prev: Optional["Node[T]"]
    value: T

    def __init__(self, value: T) -> None:
        self.next = None
        self.prev = None
        self.value = value

    def get_next(self) -> Optional["Node[T]"]:
        return self.next

    def get_prev(self) -> Optional["Node[T]"]:
        return self.prev

    def set_next(self, node: Optional["Node[T]"]) -> None:
        self.next = node

    def set_prev(self, node: Optional["Node[T]"]) -> None:
        self.prev = node

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"
