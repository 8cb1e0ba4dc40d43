"""
Division conditions for spatial trees.

A division condition is any callable taking a leaf and returning True when
the leaf should divide before absorbing the next item. The helpers below
build common policies and combine them:

    # Split once a leaf holds 8 items, but never below level 10
    condition = all_of(holds_at_least(8), below_level(10))
    tree.insert_by_coordinates(point, condition)

A condition that keeps returning True for ever smaller regions makes
insertion recurse without bound; bounding the depth is up to the caller.
"""

from __future__ import annotations

from typing import Any, Callable

from .tree import TpnTree

Condition = Callable[[TpnTree[Any]], bool]


def holds_at_least(count: int = 1) -> Condition:
    """
    Divide leaves already holding ``count`` or more items.

    Args:
        count: Number of items a leaf keeps before dividing

    Returns:
        Division condition

    Raises:
        ValueError: If count < 1
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    def condition(node: TpnTree[Any]) -> bool:
        return node.data is not None and len(node.data) >= count

    return condition


def below_level(max_level: int) -> Condition:
    """
    Allow division only for leaves above ``max_level``.

    Children of a divided node sit one level deeper, so no leaf deeper than
    ``max_level`` is ever created.

    Raises:
        ValueError: If max_level < 0
    """
    if max_level < 0:
        raise ValueError(f"max_level must be >= 0, got {max_level}")

    def condition(node: TpnTree[Any]) -> bool:
        return node.level < max_level

    return condition


def all_of(*conditions: Condition) -> Condition:
    """Divide only when every condition agrees."""

    def condition(node: TpnTree[Any]) -> bool:
        return all(c(node) for c in conditions)

    return condition


def any_of(*conditions: Condition) -> Condition:
    """Divide when at least one condition asks for it."""

    def condition(node: TpnTree[Any]) -> bool:
        return any(c(node) for c in conditions)

    return condition


def never(node: TpnTree[Any]) -> bool:
    """Keep every item in the leaf it reaches."""
    return False


__all__ = ["Condition", "holds_at_least", "below_level", "all_of", "any_of", "never"]
