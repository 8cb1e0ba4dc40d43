"""
N-dimensional region tree (tpn-tree).

A tpn-tree ("two-power-n tree") generalizes the quadtree and octree to any
number of axes: every internal node has exactly 2^N children, one for each
combination of moving half a span up or down along every axis.

TpnTree is the runtime-dimensioned form, where N is simply the length of the
coordinate sequence. Subclasses may pin N by setting DIMENSIONS (see
tpntree.fixed).
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Generic, Iterator, List, Optional, Tuple, TypeVar

from ._subdivision import adjacent_regions, child_regions
from .errors import CanNotDivideError, DegenerateRegionWarning, DimensionMismatchError
from .traversal import BreadthFirstIterator, DepthFirstIterator

if TYPE_CHECKING:
    from typing_extensions import Self

T = TypeVar("T")


@dataclass
class TpnTree(Generic[T]):
    """
    A node in a tpn-tree.

    Attributes:
        coordinates: Center of this region
        span: Half extent of this region along each axis
        level: Depth below the root (root is 0)
        children: Zero or 2^N child regions in enumeration order
        data: Optional payload, usually only held by leaves

    Example:
        A square centered at (1, 1) that is 4 units wide and 1 unit tall:

        >>> node = TpnTree((1.0, 1.0), (2.0, 0.5))
        >>> node.divide()
        >>> node.child_count()
        4
    """

    DIMENSIONS: ClassVar[Optional[int]] = None

    coordinates: Tuple[float, ...]
    span: Tuple[float, ...]
    level: int = 0
    children: List[TpnTree[T]] = field(default_factory=list, init=False, repr=False)
    data: Optional[T] = None

    def __post_init__(self) -> None:
        self.coordinates = tuple(float(c) for c in self.coordinates)
        self.span = tuple(float(s) for s in self.span)

        if len(self.coordinates) != len(self.span):
            raise DimensionMismatchError(
                f"coordinates have {len(self.coordinates)} axes but span has {len(self.span)}"
            )
        if not self.coordinates:
            raise DimensionMismatchError("a region needs at least one axis")
        if self.DIMENSIONS is not None and len(self.coordinates) != self.DIMENSIONS:
            raise DimensionMismatchError(
                f"{type(self).__name__} has {self.DIMENSIONS} axes, "
                f"got {len(self.coordinates)}"
            )
        if self.level < 0:
            raise ValueError(f"level must be >= 0, got {self.level}")

        if not all(math.isfinite(s) and s > 0 for s in self.span):
            warnings.warn(
                f"Region at {self.coordinates} has span {self.span}. "
                "Spans should be positive and finite; "
                "containment and division will be degenerate.",
                DegenerateRegionWarning,
                stacklevel=3,
            )

    @classmethod
    def root(cls, span: float, dimensions: Optional[int] = None) -> Self:
        """
        Create a level 0 hypercube centered at the origin.

        Args:
            span: Half edge length, the same along every axis
            dimensions: Number of axes. Defaults to DIMENSIONS for
                fixed-dimension classes.

        Returns:
            New leaf node

        Raises:
            DimensionMismatchError: If dimensions disagrees with DIMENSIONS
            ValueError: If no dimension can be determined
        """
        if dimensions is None:
            dimensions = cls.DIMENSIONS
        if dimensions is None:
            raise ValueError(f"{cls.__name__}.root() needs the number of dimensions")
        return cls((0.0,) * dimensions, (float(span),) * dimensions, 0)

    @property
    def dimensions(self) -> int:
        """Number of axes of this region."""
        return len(self.coordinates)

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children

    def is_root(self) -> bool:
        """True if this node sits at level 0."""
        return self.level == 0

    def divide(self) -> None:
        """
        Split this region into 2^N children.

        Each child has half the span of this node and its center moved by
        half a span up or down along every axis; every combination of moves
        occurs exactly once. The payload is left untouched.

        Raises:
            CanNotDivideError: If this node already has children
        """
        if self.children:
            raise CanNotDivideError()

        cls = type(self)
        self.children = [
            cls(center, half, self.level + 1)
            for center, half in child_regions(self.coordinates, self.span)
        ]

    def get_child(self, index: int) -> Optional[Self]:
        """Get the child at an enumeration index, or None if there is none."""
        if 0 <= index < len(self.children):
            return self.children[index]  # type: ignore[return-value]
        return None

    def child_count(self) -> int:
        """Number of direct children (0 or 2^N)."""
        return len(self.children)

    def iter_children(self) -> Iterator[Self]:
        """Iterate over direct children in enumeration order."""
        return iter(self.children)  # type: ignore[arg-type]

    def adjacent_trees(self) -> List[Self]:
        """
        Build the same-sized regions bordering this one.

        The new nodes are unattached level 0 trees, ordered by axis and with
        the region above (positive offset) before the one below.

        Returns:
            2 * N new leaf nodes
        """
        cls = type(self)
        return [cls(center, span, 0) for center, span in adjacent_regions(self.coordinates, self.span)]

    def iter_depth_first(self) -> DepthFirstIterator[Self]:
        """Iterate this subtree depth first, starting with this node."""
        return DepthFirstIterator(self)

    def iter_breadth_first(self) -> BreadthFirstIterator[Self]:
        """Iterate this subtree level by level, starting with this node."""
        return BreadthFirstIterator(self)


__all__ = ["TpnTree"]
