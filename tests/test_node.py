"""Unit tests for node.py"""
import unittest

from dllist import Node


class TestNode(unittest.TestCase):
    def test_new_node_is_unlinked(self) -> None:
        node = Node(3)
        self.assertEqual(node.value, 3)
        self.assertIsNone(node.get_next())
        self.assertIsNone(node.get_prev())

    def test_setters(self) -> None:
        first, second = Node("a"), Node("b")
        first.set_next(second)
        second.set_prev(first)
        self.assertIs(first.get_next(), second)
        self.assertIs(second.get_prev(), first)
        self.assertIsNone(first.get_prev())
        self.assertIsNone(second.get_next())

    def test_set_next_does_not_fix_up_replaced_node(self) -> None:
        first, second, third = Node(1), Node(2), Node(3)
        first.set_next(second)
        second.set_prev(first)
        first.set_next(third)
        self.assertIs(first.get_next(), third)
        self.assertIs(second.get_prev(), first)
        self.assertIsNone(third.get_prev())

    def test_repr(self) -> None:
        self.assertEqual(repr(Node("x")), "Node('x')")
