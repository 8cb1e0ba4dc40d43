"""
Read-only traversals over tpn-trees.

Both iterators are lazy and start from the node they are created with.
They must not be used while the tree is being divided or filled.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Generic, Iterator, List, TypeVar

if TYPE_CHECKING:
    from .tree import TpnTree

NodeT = TypeVar("NodeT", bound="TpnTree")


class DepthFirstIterator(Generic[NodeT]):
    """
    Depth-first (pre-order) traversal.

    Nodes are popped from a stack and their children pushed in enumeration
    order, so among siblings the last enumerated child is visited first:
    after the root come child 2^N - 1 and its whole subtree, then child
    2^N - 2, down to child 0.
    """

    def __init__(self, root: NodeT) -> None:
        self._stack: List[NodeT] = [root]

    def __iter__(self) -> Iterator[NodeT]:
        return self

    def __next__(self) -> NodeT:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._stack.extend(node.iter_children())
        return node


class BreadthFirstIterator(Generic[NodeT]):
    """
    Breadth-first (level order) traversal.

    Every node at level d is yielded before any node at level d + 1;
    siblings come in enumeration order.
    """

    def __init__(self, root: NodeT) -> None:
        self._queue: deque[NodeT] = deque([root])

    def __iter__(self) -> Iterator[NodeT]:
        return self

    def __next__(self) -> NodeT:
        if not self._queue:
            raise StopIteration
        node = self._queue.popleft()
        self._queue.extend(node.iter_children())
        return node


__all__ = ["DepthFirstIterator", "BreadthFirstIterator"]
