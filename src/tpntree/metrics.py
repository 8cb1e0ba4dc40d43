"""
Tree statistics.

Aggregations computed from the public node interface (children, level and
payload); nothing here changes a tree.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .spatial import SpatialTree
from .tree import TpnTree


def variance(tree: TpnTree[float]) -> float:
    """
    Population variance of the direct children's scalar payloads.

    Children without data count as 0.0.

    Args:
        tree: Node whose children are aggregated

    Returns:
        Variance, or 0.0 for a leaf
    """
    if tree.is_leaf():
        return 0.0
    values = np.array(
        [child.data if child.data is not None else 0.0 for child in tree.iter_children()],
        dtype=float,
    )
    return float(np.var(values))


def leaf_count(tree: TpnTree[Any]) -> int:
    """Number of leaves in the subtree."""
    return sum(1 for node in tree.iter_depth_first() if node.is_leaf())


def max_level(tree: TpnTree[Any]) -> int:
    """Deepest level present in the subtree."""
    return max(node.level for node in tree.iter_depth_first())


def item_count(tree: SpatialTree[Any]) -> int:
    """Total size of all payload bags in a spatial subtree."""
    return sum(len(node.data) for node in tree.iter_depth_first() if node.data)


def occupancy_summary(tree: SpatialTree[Any]) -> dict[str, Any]:
    """
    Summarize how a spatial tree is filled.

    Payloads must be bags (lists) of items, as in SpatialTree.

    Returns:
        Dictionary with:
        - node_count: Number of nodes
        - leaf_count: Number of leaves
        - max_level: Deepest level
        - item_count: Number of stored items
        - mean_leaf_items: Average bag size over leaves
    """
    nodes = list(tree.iter_breadth_first())
    leaves = [node for node in nodes if node.is_leaf()]
    sizes = np.array([len(node.data) if node.data else 0 for node in leaves], dtype=float)
    return {
        "node_count": len(nodes),
        "leaf_count": len(leaves),
        "max_level": max(node.level for node in nodes),
        "item_count": int(sizes.sum()),
        "mean_leaf_items": float(sizes.mean()),
    }


__all__ = ["variance", "leaf_count", "max_level", "item_count", "occupancy_summary"]
