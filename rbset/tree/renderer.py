"""
TreeRenderer - Two-dimensional text layout of a red-black tree.
"""

import logging
from dataclasses import dataclass
from typing import Any

from rbset.models.node import Node

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _LayoutNode:
    """Shadow of a tree node carrying its horizontal offset."""

    value: Any
    color_code: int
    left: "_LayoutNode | None" = None
    right: "_LayoutNode | None" = None
    offset: int = 0


class TreeRenderer:
    """
    Renders a tree as one text row per level.

    Every node is printed as its value right-aligned to
    ``2 * half_print_width - 2`` characters, a comma and its color code
    (1 red, 0 black). Horizontal positions follow the in-order position of
    each node within its subtree, measured in units of ``half_print_width``
    characters.
    """

    # Three half-units give the "%4d,%d" cell
    DEFAULT_HALF_PRINT_WIDTH = 3

    def __init__(self, half_print_width: int = DEFAULT_HALF_PRINT_WIDTH) -> None:
        """
        Initialize the renderer.

        Args:
            half_print_width: Characters per horizontal unit. Each node cell
                spans two units. Must be between 2 and 16.
        """
        if not isinstance(half_print_width, int) or isinstance(half_print_width, bool):
            raise ValueError(
                f"half_print_width must be an integer, got {half_print_width!r}"
            )
        if half_print_width < 2:
            raise ValueError(f"half_print_width must be >= 2, got {half_print_width}")
        if half_print_width > 16:
            raise ValueError(
                f"half_print_width cannot exceed 16, got {half_print_width}"
            )

        self._half_print_width = half_print_width
        self._value_width = 2 * half_print_width - 2

    @property
    def half_print_width(self) -> int:
        return self._half_print_width

    def render(self, root: Node | None) -> str:
        """
        Render the tree rooted at ``root``.

        Args:
            root: Root node, or None for an empty tree.

        Returns:
            The rendering, each row terminated by a newline. An empty tree
            renders to the empty string.
        """
        if root is None:
            return ""

        layout_root, _ = self._layout(root, 0)
        rows = self._rows(layout_root)
        logger.debug(f"Rendered tree with {len(rows)} levels")
        return "".join(row + "\n" for row in rows)

    def _layout(self, node: Node, padding: int) -> tuple[_LayoutNode, int]:
        """Post-order pass assigning offsets; returns the subtree width."""
        layout = _LayoutNode(value=node.value, color_code=int(node.color))

        left_width = 1
        if node.left is not None:
            layout.left, left_width = self._layout(node.left, padding)

        right_width = 1
        if node.right is not None:
            layout.right, right_width = self._layout(
                node.right, padding + left_width
            )

        layout.offset = padding + left_width - 1
        return layout, left_width + right_width

    def _rows(self, root: _LayoutNode) -> list[str]:
        """Level-order pass emitting one row per level."""
        rows = []
        level = [root]

        while level:
            cells = []
            cursor = 0
            next_level = []
            for layout in level:
                if layout.left is not None:
                    next_level.append(layout.left)
                if layout.right is not None:
                    next_level.append(layout.right)

                cells.append(" " * ((layout.offset - cursor) * self._half_print_width))
                cells.append(
                    f"{str(layout.value):>{self._value_width}},{layout.color_code}"
                )
                cursor = layout.offset + 2

            rows.append("".join(cells))
            level = next_level

        return rows
