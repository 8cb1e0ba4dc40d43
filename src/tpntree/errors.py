"""
Errors and warnings raised by tpn-trees.

All errors derive from TpnTreeError, which is a ValueError so that callers
treating bad input generically keep working.
"""

from __future__ import annotations

from typing import Optional


class TpnTreeError(ValueError):
    """Base exception for tpn-tree errors."""

    default_message = "Invalid tpn-tree operation."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class DoesNotSpanError(TpnTreeError):
    """Raised when a region does not contain the coordinates of an item."""

    default_message = "The tree does not span over the provided data coordinates."


class CanNotDivideError(TpnTreeError):
    """Raised when dividing a node that already has children."""

    default_message = "The tree has been divided before."


class DimensionMismatchError(TpnTreeError):
    """Raised when coordinate counts disagree with the tree's dimensionality."""

    default_message = "The dimension of the data did not match the dimension of the tree."


class DegenerateRegionWarning(UserWarning):
    """Warning for regions whose span is not a positive finite number."""

    pass


__all__ = [
    "TpnTreeError",
    "DoesNotSpanError",
    "CanNotDivideError",
    "DimensionMismatchError",
    "DegenerateRegionWarning",
]
