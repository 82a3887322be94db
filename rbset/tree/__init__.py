"""
Red-black tree engine and its diagnostics.
"""

from rbset.tree.invariant_checker import InvariantChecker
from rbset.tree.red_black_set import RedBlackSet
from rbset.tree.renderer import TreeRenderer

__all__ = ["InvariantChecker", "RedBlackSet", "TreeRenderer"]
