"""
Custom exceptions for the ordered set.
"""

from typing import Any


class InvariantViolationError(Exception):
    """
    Raised when a red-black tree structural invariant does not hold.

    Only the invariant checker raises this; insert and remove never do.
    """

    def __init__(self, reason: str, value: Any = None):
        """
        Initialize violation error.

        Args:
            reason: Which invariant failed.
            value: Value held by the offending node, if any.
        """
        self.reason = reason
        self.value = value
        if value is None:
            message = f"Red-black invariant violated: {reason}"
        else:
            message = f"Red-black invariant violated at {value!r}: {reason}"
        super().__init__(message)
