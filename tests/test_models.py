"""
Tests for data models: Color, Node and InvariantViolationError.
"""

from rbset.models import Color, InvariantViolationError, Node
from rbset.models.node import is_black


class TestColor:
    """Tests for Color."""

    def test_render_codes(self):
        """Red renders as 1, black as 0."""
        assert int(Color.RED) == 1
        assert int(Color.BLACK) == 0


class TestNode:
    """Tests for Node."""

    def test_new_node_is_red_leaf(self):
        """Test default node state."""
        node = Node(value=3)
        assert node.color is Color.RED
        assert node.is_red
        assert node.left is None
        assert node.right is None
        assert node.parent is None

    def test_is_red_follows_color(self):
        """Test is_red tracks recoloring."""
        node = Node(value=3)
        node.color = Color.BLACK
        assert not node.is_red
        node.color = Color.RED
        assert node.is_red

    def test_identity_equality(self):
        """Nodes with equal fields are still distinct."""
        assert Node(value=1) != Node(value=1)
        node = Node(value=1)
        assert node == node

    def test_detach(self):
        """Test clearing links."""
        parent = Node(value=2, color=Color.BLACK)
        child = Node(value=1, parent=parent)
        parent.left = child
        child.left = Node(value=0, parent=child)

        child.detach()

        assert child.parent is None
        assert child.left is None
        assert child.right is None

    def test_is_black(self):
        """Empty slots count as black."""
        assert is_black(None)
        assert is_black(Node(value=1, color=Color.BLACK))
        assert not is_black(Node(value=1))


class TestInvariantViolationError:
    """Tests for InvariantViolationError."""

    def test_message_with_value(self):
        """Test message names the offending value."""
        error = InvariantViolationError("root is red", 7)
        assert error.reason == "root is red"
        assert error.value == 7
        assert str(error) == "Red-black invariant violated at 7: root is red"

    def test_message_without_value(self):
        """Test message without a value."""
        error = InvariantViolationError("broken")
        assert error.value is None
        assert str(error) == "Red-black invariant violated: broken"
