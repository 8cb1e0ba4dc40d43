"""
Spatial collections on top of tpn-trees.

A SpatialTree stores a bag (list) of items per leaf and routes items to
regions by their coordinates. Leaves split lazily: before a leaf absorbs an
item, a caller supplied division condition decides whether it should divide
first and hand its items down to its children.

Usage:
    tree = SpatialTree.root(1.0, dimensions=3)
    holds_one = lambda node: bool(node.data)
    tree.insert_by_coordinates((1.0, 1.0, 1.0), holds_one)
    tree.insert_by_coordinates((-1.0, -1.0, -1.0), holds_one)

    leaf = tree.find_by_coordinates((0.5, 0.5, 0.5))
    assert (1.0, 1.0, 1.0) in leaf.data
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Protocol, Sequence, Tuple, TypeVar, Union

from ._subdivision import child_index
from .errors import DimensionMismatchError, DoesNotSpanError
from .tree import TpnTree

T = TypeVar("T")

DivisionCondition = Callable[["SpatialTree[Any]"], bool]


class HasCoordinates(Protocol):
    """Protocol for items that expose their position."""

    @property
    def coordinates(self) -> Union[Sequence[float], Callable[[], Sequence[float]]]: ...


def coordinates_of(item: Any) -> Tuple[float, ...]:
    """
    Extract the position of an item.

    Items with a ``coordinates`` attribute (a sequence or a zero-argument
    method returning one) use it; anything else is read as a sequence of
    numbers, which covers tuples, lists and numpy arrays.

    Args:
        item: Item to locate

    Returns:
        Tuple of floats, one per axis
    """
    position = getattr(item, "coordinates", item)
    if callable(position):
        position = position()
    return tuple(float(c) for c in position)


class SpatialTree(TpnTree[List[T]]):
    """
    Tpn-tree whose leaves hold bags of spatially located items.

    The runtime-dimensioned form; see tpntree.fixed for SpatialTree3D and
    friends.
    """

    def position_of(self, item: T) -> Tuple[float, ...]:
        """
        Extract an item's coordinates and check them against this tree.

        Raises:
            DimensionMismatchError: If the item has a different number of axes
        """
        position = coordinates_of(item)
        if len(position) != self.dimensions:
            raise DimensionMismatchError(
                f"item has {len(position)} coordinates, tree has {self.dimensions} axes"
            )
        return position

    def spans(self, item: T) -> bool:
        """
        Check whether this region contains an item.

        Bounds are inclusive, so neighbouring regions overlap on their
        shared faces.
        """
        return self._spans_position(self.position_of(item))

    def _spans_position(self, position: Sequence[float]) -> bool:
        return all(
            abs(p - c) <= s for p, c, s in zip(position, self.coordinates, self.span)
        )

    def insert_by_coordinates(self, item: T, division_condition: DivisionCondition) -> None:
        """
        Insert an item into the region that contains it.

        Leaves evaluate ``division_condition`` before taking the item. When it
        returns True the leaf divides and passes its items, followed by the
        new one, to its children; otherwise the item joins the leaf's bag.
        Internal nodes forward the item to the first child that spans it.
        Only a root checks containment; a subtree takes whatever it is given
        and routes it to the child on the item's side of its center.
        Args:
            item: Item to insert
            division_condition: Read-only predicate over a leaf deciding
                whether it should divide first

        Raises:
            DimensionMismatchError: If the item has a different number of axes
            DoesNotSpanError: If this is a root that does not contain the item
        """
        position = self.position_of(item)
        if self.is_root() and not self._spans_position(position):
            raise DoesNotSpanError()
        self._insert(item, position, division_condition)

    def _insert(
        self,
        item: T,
        position: Tuple[float, ...],
        division_condition: DivisionCondition,
    ) -> None:
        if not self.is_leaf():
            self._child_spanning(position)._insert(item, position, division_condition)
            return

        if not division_condition(self):
            if self.data is None:
                self.data = []
            self.data.append(item)
            return

        self.divide()
        pending = self.data or []
        self.data = None
        pending.append(item)

        for pending_item in pending:
            pending_position = coordinates_of(pending_item)
            self._child_spanning(pending_position)._insert(
                pending_item, pending_position, division_condition
            )

    def _child_spanning(self, position: Sequence[float]) -> SpatialTree[T]:
        """Get the first child spanning a point, else the child in its orthant."""
        for child in self.iter_children():
            if child._spans_position(position):
                return child
        # Rounding can leave a boundary point outside every half-size child
        return self.children[child_index(self.coordinates, position)]  # type: ignore[return-value]

    def find_by_coordinates(self, item: T) -> SpatialTree[T]:
        """
        Find the deepest region containing an item's coordinates.

        Follows the same routing as insertion, so an inserted item is always
        found in the leaf that holds it. Starting from a non-root node that
        does not contain the point, descends through first spanning
        children and stops at the first node without one.

        Args:
            item: Item, or bare coordinates, to look up

        Returns:
            The located node

        Raises:
            DimensionMismatchError: If the item has a different number of axes
            DoesNotSpanError: If this is a root that does not contain the item
        """
        position = self.position_of(item)
        if self.is_root() and not self._spans_position(position):
            raise DoesNotSpanError()

        node = self
        if node._spans_position(position):
            while not node.is_leaf():
                node = node._child_spanning(position)
            return node

        while True:
            for child in node.iter_children():
                if child._spans_position(position):
                    node = child
                    break
            else:
                return node

    def items(self) -> Iterator[T]:
        """Iterate over every stored item, depth first."""
        for node in self.iter_depth_first():
            if node.data:
                yield from node.data


__all__ = ["SpatialTree", "HasCoordinates", "DivisionCondition", "coordinates_of"]
