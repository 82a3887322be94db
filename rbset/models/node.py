"""
Tree node and colour definitions.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Node color for Red-Black Tree. The integer value is the render code."""

    BLACK = 0
    RED = 1


@dataclass(eq=False)
class Node:
    """
    Node in the Red-Black Tree.

    Children are owned by the node; ``parent`` is a back-reference and is
    None only at the root. Equality is identity.
    """

    value: Any
    color: Color = Color.RED
    left: "Node | None" = None
    right: "Node | None" = None
    parent: "Node | None" = None

    @property
    def is_red(self) -> bool:
        return self.color is Color.RED

    def detach(self) -> None:
        """Clear every link of an unlinked node."""
        self.left = None
        self.right = None
        self.parent = None


def is_black(node: Node | None) -> bool:
    """Empty child slots count as black."""
    return node is None or node.color is Color.BLACK
