"""
Tests for the example driver.
"""

import print_tree


class TestPrintTree:
    """Tests for print_tree.main."""

    def test_prints_rendering_and_verdict(self, capsys, fan_in_sequence):
        """Test output is the rendering followed by the verdict."""
        assert print_tree.FAN_IN_SEQUENCE == fan_in_sequence

        assert print_tree.main() == 0

        out = capsys.readouterr().out
        expected = print_tree.build_tree(fan_in_sequence).render()
        assert out == expected + "\n" + "Tree is good.\n"
