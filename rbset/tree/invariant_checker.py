"""
InvariantChecker - Structural validation of a red-black tree.
"""

from typing import Any

from rbset.models.exceptions import InvariantViolationError
from rbset.models.node import Color, Node


class InvariantChecker:
    """
    Validates the red-black properties of a tree rooted at a given node.

    Checks:
    1. In-order sequence is strictly ascending
    2. Root is black and has no parent
    3. Red nodes cannot have red children
    4. Every path from root to an empty slot has the same number of black nodes
    5. Every child points back to its parent

    The walk is iterative, visits each node once and never mutates the tree.
    """

    @staticmethod
    def check(root: Node | None) -> None:
        """
        Validate the tree.

        Args:
            root: Root node of the tree, or None for an empty tree.

        Raises:
            InvariantViolationError: On the first invariant found broken.
        """
        if root is None:
            return
        if root.parent is not None:
            raise InvariantViolationError("root has a parent", root.value)
        if root.color is not Color.BLACK:
            raise InvariantViolationError("root is red", root.value)

        black_height: int | None = None
        # (node, lower bound, upper bound, black nodes above this node)
        stack: list[tuple[Node, Any, Any, int]] = [(root, None, None, 0)]

        while stack:
            node, low, high, blacks = stack.pop()
            if node.color is Color.BLACK:
                blacks += 1

            if low is not None and not low.value < node.value:
                raise InvariantViolationError(
                    f"out of order after {low.value!r}", node.value
                )
            if high is not None and not node.value < high.value:
                raise InvariantViolationError(
                    f"out of order before {high.value!r}", node.value
                )

            for child, child_low, child_high in (
                (node.right, node, high),
                (node.left, low, node),
            ):
                if child is None:
                    if black_height is None:
                        black_height = blacks
                    elif blacks != black_height:
                        raise InvariantViolationError(
                            f"black height {blacks} differs from {black_height}",
                            node.value,
                        )
                    continue

                if child.parent is not node:
                    raise InvariantViolationError(
                        "child does not link back to its parent", child.value
                    )
                if node.is_red and child.is_red:
                    raise InvariantViolationError(
                        "red node has a red child", node.value
                    )
                stack.append((child, child_low, child_high, blacks))
