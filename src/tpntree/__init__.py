"""
tpntree: N-dimensional generalized quadtrees.

A tpn-tree ("two-power-n tree") recursively divides a hyperrectangular
region into 2^N congruent children, where N is the number of axes.

Provides:
- tree: The region node (TpnTree) with division and adjacency
- fixed: Fixed-dimension variants (TpnTree2D, TpnTree3D, Tree3D, ...)
- spatial: Coordinate driven insert/find over bags of items (SpatialTree)
- traversal: Depth-first and breadth-first iterators
- division: Reusable division conditions
- metrics: Variance and occupancy statistics
"""

__version__ = "0.1.0"

from .division import all_of, any_of, below_level, holds_at_least, never
from .errors import (
    CanNotDivideError,
    DegenerateRegionWarning,
    DimensionMismatchError,
    DoesNotSpanError,
    TpnTreeError,
)
from .fixed import (
    SpatialTree1D,
    SpatialTree2D,
    SpatialTree3D,
    TpnTree1D,
    TpnTree2D,
    TpnTree3D,
    Tree3D,
)
from .metrics import item_count, leaf_count, max_level, occupancy_summary, variance
from .spatial import HasCoordinates, SpatialTree, coordinates_of
from .traversal import BreadthFirstIterator, DepthFirstIterator
from .tree import TpnTree

__all__ = [
    # Trees
    "TpnTree",
    "TpnTree1D",
    "TpnTree2D",
    "TpnTree3D",
    "SpatialTree",
    "SpatialTree1D",
    "SpatialTree2D",
    "SpatialTree3D",
    "Tree3D",
    "HasCoordinates",
    "coordinates_of",
    # Traversal
    "DepthFirstIterator",
    "BreadthFirstIterator",
    # Division conditions
    "holds_at_least",
    "below_level",
    "all_of",
    "any_of",
    "never",
    # Metrics
    "variance",
    "leaf_count",
    "max_level",
    "item_count",
    "occupancy_summary",
    # Errors
    "TpnTreeError",
    "DoesNotSpanError",
    "CanNotDivideError",
    "DimensionMismatchError",
    "DegenerateRegionWarning",
]
