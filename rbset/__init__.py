"""
In-memory ordered set backed by a parent-linked red-black tree.

This package provides:
- insert(value) - O(log N), re-inserting an existing value is a no-op
- contains(value) - O(log N) membership test
- remove(value) - O(log N), removing an absent value is a no-op
- check_invariants() - Red-black structural validation (debugging aid)
- render() - Two-dimensional text rendering of the tree
"""

from rbset.tree.red_black_set import RedBlackSet

__all__ = ["RedBlackSet"]
