"""
Subdivision engine for tpn-trees.

A region with N axes divides into 2^N congruent children. Children are
enumerated by a counter running from 0 to 2^N - 1 whose bit i selects the
offset along axis i:

    bit i == 0  ->  center[i] + span[i] / 2
    bit i == 1  ->  center[i] - span[i] / 2

so the first child always lies in the all-positive corner and the last in
the all-negative one. For two axes the order is:

    +---+---+      axis 1
    | 1 | 0 |        ^
    +---+---+        |
    | 3 | 2 |        +--> axis 0
    +---+---+
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

Region = Tuple[Tuple[float, ...], Tuple[float, ...]]


def sign_patterns(dimensions: int) -> Iterator[Tuple[int, ...]]:
    """
    Yield the per-axis offset signs for every child in enumeration order.

    Args:
        dimensions: Number of axes

    Yields:
        Tuple of +1/-1 per axis
    """
    for counter in range(1 << dimensions):
        yield tuple(-1 if (counter >> axis) & 1 else 1 for axis in range(dimensions))


def child_regions(center: Sequence[float], span: Sequence[float]) -> List[Region]:
    """
    Compute the (center, span) pairs of all children of a region.

    Args:
        center: Center of the parent region
        span: Half extent of the parent region per axis

    Returns:
        List of 2^N (center, span) tuples in enumeration order
    """
    half = tuple(s / 2.0 for s in span)
    regions: List[Region] = []
    for signs in sign_patterns(len(center)):
        child_center = tuple(c + sign * h for c, sign, h in zip(center, signs, half))
        regions.append((child_center, half))
    return regions


def child_index(center: Sequence[float], position: Sequence[float]) -> int:
    """
    Get the enumeration index of the child whose orthant contains a point.

    Points exactly on the parent's center plane count as positive, matching
    the first-spanning-child rule used by the locator.
    """
    index = 0
    for axis, (c, p) in enumerate(zip(center, position)):
        if p < c:
            index |= 1 << axis
    return index


def adjacent_regions(center: Sequence[float], span: Sequence[float]) -> List[Region]:
    """
    Compute the same-sized regions bordering a region along each axis.

    Returns:
        2 * N (center, span) tuples, axis-major, positive side first
    """
    span = tuple(span)
    regions: List[Region] = []
    for axis in range(len(center)):
        for sign in (1, -1):
            moved = list(center)
            moved[axis] += sign * 2.0 * span[axis]
            regions.append((tuple(moved), span))
    return regions


__all__ = ["sign_patterns", "child_regions", "child_index", "adjacent_regions"]
