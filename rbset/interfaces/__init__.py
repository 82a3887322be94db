"""
Abstract base classes for the ordered set.
"""

from rbset.interfaces.ordered_set import OrderedSet

__all__ = ["OrderedSet"]
