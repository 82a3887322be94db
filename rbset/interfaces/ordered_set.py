"""
OrderedSet abstract base class for sorted set data structures.
"""

from abc import ABC, abstractmethod
from typing import Any


class OrderedSet(ABC):
    """
    Abstract base class for ordered sets of mutually comparable values.

    Provides O(log N) operations for insert, contains, and remove.
    Values are ordered by their natural ordering (``<`` and ``==``);
    equal values are stored once.

    Implementations:
    - RedBlackSet: Parent-linked red-black tree
    """

    @abstractmethod
    def insert(self, value: Any) -> bool:
        """
        Insert a value.

        Args:
            value: The value to insert.

        Returns:
            True if the value was new, False if it was already present.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def contains(self, value: Any) -> bool:
        """
        Check if a value is present.

        Args:
            value: The value to look up.

        Returns:
            True if the value is present, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, value: Any) -> bool:
        """
        Remove a value.

        Args:
            value: The value to remove.

        Returns:
            True if the value was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of values.

        Returns:
            The count of values in the set.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def check_invariants(self) -> bool:
        """
        Check the structural invariants of the backing tree.

        Returns:
            True if every invariant holds, False otherwise.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def render(self) -> str:
        """
        Return a human-readable rendering of the backing tree.

        Returns:
            One line per tree level, empty string for an empty set.
        """
        pass

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return self.size()
