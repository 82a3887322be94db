"""
Shared pytest fixtures for ordered set tests.
"""

import pytest

from rbset import RedBlackSet


def _in_order(tree):
    values = []
    stack = []
    node = tree._root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.value)
        node = node.right
    return values


def _snapshot(tree):
    def shape(node):
        if node is None:
            return None
        return (id(node), node.value, node.color, shape(node.left), shape(node.right))

    return shape(tree._root), tree.size()


@pytest.fixture
def in_order():
    """Provide a function listing a tree's values in order."""
    return _in_order


@pytest.fixture
def snapshot():
    """Provide a function capturing a tree's exact structure, colors and node identities."""
    return _snapshot


@pytest.fixture
def empty_set():
    """Provide a fresh RedBlackSet instance."""
    return RedBlackSet()


@pytest.fixture
def fan_in_sequence():
    """Provide an insertion order that exercises every insert fix-up case."""
    return [1, 5, 2, 3, 4, 7, 6, 8, 0, -1, -2, -3, -4]


@pytest.fixture
def ascending_set():
    """Provide a set built by inserting 1..100 in ascending order."""
    tree = RedBlackSet()
    for i in range(1, 101):
        tree.insert(i)
    return tree
