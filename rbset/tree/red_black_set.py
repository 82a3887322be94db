"""
Red-Black Tree implementation of an ordered set.

Parent-linked nodes, iterative fix-ups, structural node swap on delete.
"""

import logging
from typing import Any

from rbset.interfaces.ordered_set import OrderedSet
from rbset.models.exceptions import InvariantViolationError
from rbset.models.node import Color, Node, is_black
from rbset.tree.invariant_checker import InvariantChecker
from rbset.tree.renderer import TreeRenderer

logger = logging.getLogger(__name__)


class RedBlackSet(OrderedSet):
    """
    Red-Black Tree implementation of OrderedSet.

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from root to leaf has same number of black nodes
    5. Every non-root node is a child of its parent
    """

    def __init__(self, renderer: TreeRenderer | None = None) -> None:
        """
        Initialize an empty set.

        Args:
            renderer: Layout used by render(). Defaults to TreeRenderer().
        """
        self._root: Node | None = None
        self._size: int = 0
        self._renderer = renderer if renderer is not None else TreeRenderer()

    def insert(self, value: Any) -> bool:
        """Insert a value, no-op if present. O(log N)"""
        if self._root is None:
            self._root = Node(value=value, color=Color.BLACK)
            self._size = 1
            return True

        parent, found, go_left = self._locate(value)
        if found:
            return False

        new_node = Node(value=value, parent=parent)
        if go_left:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        self._fix_insert(new_node)
        logger.debug(f"Inserted {value!r}, size {self._size}")
        return True

    def contains(self, value: Any) -> bool:
        """Membership test. O(log N)"""
        _, found, _ = self._locate(value)
        return found

    def remove(self, value: Any) -> bool:
        """Remove a value, no-op if absent. O(log N)"""
        node, found, _ = self._locate(value)
        if not found:
            return False

        self._delete_node(node)
        self._size -= 1
        logger.debug(f"Removed {value!r}, size {self._size}")
        return True

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        height = 0
        stack = [(self._root, 1)] if self._root else []
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            if node.left:
                stack.append((node.left, depth + 1))
            if node.right:
                stack.append((node.right, depth + 1))
        return height

    def validate(self) -> None:
        """
        Verify every red-black invariant.

        Raises:
            InvariantViolationError: Describing the first broken invariant.
        """
        InvariantChecker.check(self._root)

    def check_invariants(self) -> bool:
        try:
            self.validate()
        except InvariantViolationError as e:
            logger.warning(f"Invariant check failed: {e}")
            return False
        return True

    def render(self) -> str:
        return self._renderer.render(self._root)

    def _locate(self, value: Any) -> tuple[Node | None, bool, bool]:
        """
        Find the node holding value, comparing against each node once.

        Returns:
            (node, True, False) on a hit, otherwise (parent, False, go_left)
            where parent is the node a new leaf would hang from (None for an
            empty tree) and go_left tells which of its slots is empty.
        """
        current = self._root
        while current is not None:
            if value == current.value:
                return current, True, False
            go_left = value < current.value
            child = current.left if go_left else current.right
            if child is None:
                return current, False, go_left
            current = child
        return None, False, False

    def _fix_insert(self, node: Node) -> None:
        """Fix Red-Black Tree properties after insert."""
        while True:
            parent = node.parent
            if parent is None:
                # Red propagated up to the root
                node.color = Color.BLACK
                return
            if parent.color is Color.BLACK:
                return

            # A red parent is never the root, so the grandparent exists
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
            else:
                uncle = grandparent.left

            if uncle is not None and uncle.is_red:
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
                continue

            if parent is grandparent.left:
                if node is parent.right:
                    # Inner child: turn it into an outer one
                    self._rotate_left(parent)
                    node, parent = parent, node
                parent.color, grandparent.color = grandparent.color, parent.color
                self._rotate_right(grandparent)
            else:
                if node is parent.left:
                    self._rotate_right(parent)
                    node, parent = parent, node
                parent.color, grandparent.color = grandparent.color, parent.color
                self._rotate_left(grandparent)
            return

    def _replace_child(self, parent: Node | None, old: Node, new: Node | None) -> None:
        """Point the slot that owns old (a child slot or the root) at new."""
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, node: Node) -> None:
        """Left rotation."""
        right_child = node.right
        if right_child is None:
            return

        node.right = right_child.left
        if right_child.left:
            right_child.left.parent = node

        right_child.parent = node.parent
        self._replace_child(node.parent, node, right_child)

        right_child.left = node
        node.parent = right_child

    def _rotate_right(self, node: Node) -> None:
        """Right rotation."""
        left_child = node.left
        if left_child is None:
            return

        node.left = left_child.right
        if left_child.right:
            left_child.right.parent = node

        left_child.parent = node.parent
        self._replace_child(node.parent, node, left_child)

        left_child.right = node
        node.parent = left_child

    def _swap_nodes(self, node: Node, other: Node) -> None:
        """
        Exchange the tree positions of node and other.

        other must lie in node's subtree. Links and colors move with the
        position; values stay with their nodes.
        """
        node_parent, other_parent = node.parent, other.parent
        node_left, node_right = node.left, node.right
        other_left, other_right = other.left, other.right

        self._replace_child(node_parent, node, other)
        if other_parent is node:
            if node_left is other:
                other.left, other.right = node, node_right
            else:
                other.left, other.right = node_left, node
            node.parent = other
        else:
            self._replace_child(other_parent, other, node)
            other.left, other.right = node_left, node_right
            node.parent = other_parent
        other.parent = node_parent
        node.left, node.right = other_left, other_right

        for child in (other.left, other.right):
            if child:
                child.parent = other
        for child in (node.left, node.right):
            if child:
                child.parent = node

        node.color, other.color = other.color, node.color

    def _delete_node(self, node: Node) -> None:
        """Delete a node from the tree."""
        # Predecessor first, successor if there is no left subtree
        replacement = None
        if node.left:
            replacement = node.left
            while replacement.right:
                replacement = replacement.right
        elif node.right:
            replacement = node.right
            while replacement.left:
                replacement = replacement.left

        if replacement is not None:
            self._swap_nodes(node, replacement)

        # Node has at most one child
        child = node.left if node.left else node.right
        parent = node.parent
        self._replace_child(parent, node, child)
        if child:
            child.parent = parent
        node.detach()

        if node.is_red:
            return
        if child is not None and child.is_red:
            child.color = Color.BLACK
            return
        self._fix_delete(child, parent)

    def _fix_delete(self, node: Node | None, parent: Node | None) -> None:
        """
        Resolve a double black at node (possibly an empty slot) under parent.
        """
        while parent is not None and is_black(node):
            if node is parent.left:
                sibling = parent.right

                if sibling.is_red:
                    sibling.color, parent.color = parent.color, sibling.color
                    self._rotate_left(parent)
                    sibling = parent.right

                if is_black(sibling.left) and is_black(sibling.right):
                    sibling.color = Color.RED
                    if parent.is_red:
                        parent.color = Color.BLACK
                        return
                    node, parent = parent, parent.parent
                    continue

                if is_black(sibling.right):
                    sibling.color, sibling.left.color = sibling.left.color, sibling.color
                    self._rotate_right(sibling)
                    sibling = parent.right

                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.right.color = Color.BLACK
                self._rotate_left(parent)
                return
            else:
                sibling = parent.left

                if sibling.is_red:
                    sibling.color, parent.color = parent.color, sibling.color
                    self._rotate_right(parent)
                    sibling = parent.left

                if is_black(sibling.left) and is_black(sibling.right):
                    sibling.color = Color.RED
                    if parent.is_red:
                        parent.color = Color.BLACK
                        return
                    node, parent = parent, parent.parent
                    continue

                if is_black(sibling.left):
                    sibling.color, sibling.right.color = sibling.right.color, sibling.color
                    self._rotate_left(sibling)
                    sibling = parent.left

                sibling.color = parent.color
                parent.color = Color.BLACK
                sibling.left.color = Color.BLACK
                self._rotate_right(parent)
                return

        if node is not None:
            node.color = Color.BLACK
