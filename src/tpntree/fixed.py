"""
Fixed-dimension tpn-trees.

These classes pin the number of axes, so constructing a region of any other
dimensionality fails immediately and root() needs only a span. Children and
adjacent trees keep the class of the node they come from.

    >>> root = TpnTree3D.root(1.0)
    >>> root.divide()
    >>> root.child_count()
    8
"""

from __future__ import annotations

from typing import TypeVar

from .spatial import SpatialTree
from .tree import TpnTree

T = TypeVar("T")


class TpnTree1D(TpnTree[T]):
    """Tpn-tree over a line (binary tree of segments)."""

    DIMENSIONS = 1


class TpnTree2D(TpnTree[T]):
    """Tpn-tree over the plane (quadtree)."""

    DIMENSIONS = 2


class TpnTree3D(TpnTree[T]):
    """Tpn-tree over space (octree)."""

    DIMENSIONS = 3


class SpatialTree1D(SpatialTree[T]):
    """Spatial tree over a line."""

    DIMENSIONS = 1


class SpatialTree2D(SpatialTree[T]):
    """Spatial tree over the plane."""

    DIMENSIONS = 2


class SpatialTree3D(SpatialTree[T]):
    """Spatial tree over space."""

    DIMENSIONS = 3


# Spatial octree of plain (x, y, z) points
Tree3D = SpatialTree3D


__all__ = [
    "TpnTree1D",
    "TpnTree2D",
    "TpnTree3D",
    "SpatialTree1D",
    "SpatialTree2D",
    "SpatialTree3D",
    "Tree3D",
]
