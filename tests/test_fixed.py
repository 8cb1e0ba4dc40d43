"""Tests for fixed-dimension tree classes."""

import pytest

from tpntree import (
    DimensionMismatchError,
    SpatialTree2D,
    SpatialTree3D,
    TpnTree,
    TpnTree1D,
    TpnTree2D,
    TpnTree3D,
    Tree3D,
)


class TestFixedDimensions:
    """Tests for classes pinning the number of axes."""

    @pytest.mark.parametrize(
        "cls, dimensions", [(TpnTree1D, 1), (TpnTree2D, 2), (TpnTree3D, 3)]
    )
    def test_root_without_dimensions(self, cls, dimensions):
        """Fixed classes know their own dimensionality."""
        root = cls.root(1.0)
        assert root.dimensions == dimensions
        assert root.coordinates == (0.0,) * dimensions

    def test_wrong_length_raises(self):
        """Constructing a region of another dimensionality fails."""
        with pytest.raises(DimensionMismatchError, match="TpnTree2D has 2 axes"):
            TpnTree2D([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])

    def test_root_with_conflicting_dimensions_raises(self):
        """root() refuses a dimension count other than the fixed one."""
        with pytest.raises(DimensionMismatchError):
            TpnTree3D.root(1.0, dimensions=2)

    def test_children_keep_class(self):
        """Division produces nodes of the same class."""
        root = TpnTree3D.root(1.0)
        root.divide()
        assert all(type(child) is TpnTree3D for child in root.iter_children())

    def test_adjacent_keep_class(self):
        """Adjacent trees have the class and span of their source."""
        root = SpatialTree2D.root(1.0)
        adjacent = root.adjacent_trees()
        assert len(adjacent) == 4
        assert all(type(tree) is SpatialTree2D for tree in adjacent)

    def test_same_geometry_as_runtime_variant(self):
        """Fixed and runtime variants enumerate identically."""
        fixed = TpnTree3D.root(2.0)
        runtime = TpnTree.root(2.0, dimensions=3)
        fixed.divide()
        runtime.divide()

        assert [c.coordinates for c in fixed.iter_children()] == [
            c.coordinates for c in runtime.iter_children()
        ]
        assert [c.span for c in fixed.iter_children()] == [
            c.span for c in runtime.iter_children()
        ]

    def test_tree3d_alias(self):
        """Tree3D is the spatial octree."""
        assert Tree3D is SpatialTree3D
        tree = Tree3D.root(1.0)
        tree.insert_by_coordinates([0.5, 0.5, 0.5], lambda node: False)
        assert tree.data == [[0.5, 0.5, 0.5]]

    def test_spatial_children_are_spatial(self):
        """Spatial trees divide into spatial trees."""
        tree = SpatialTree3D.root(1.0)
        tree.divide()
        assert tree.get_child(5).spans((-0.5, 0.5, -0.5))
