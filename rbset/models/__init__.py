"""
Data models for the ordered set.
"""

from rbset.models.exceptions import InvariantViolationError
from rbset.models.node import Color, Node

__all__ = ["Color", "InvariantViolationError", "Node"]
