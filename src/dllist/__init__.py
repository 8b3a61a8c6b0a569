"""Doubly linked list"""

from .linked_list import EmptyListError
from .linked_list import LinkedList
from .linked_list import LinkedListValues
from .node import Node

__all__ = ["EmptyListError", "LinkedList", "LinkedListValues", "Node"]
