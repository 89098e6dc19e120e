"""Tests for hierarchy traversal and structural audit."""

from __future__ import annotations

import pytest

from structspine.core.exceptions import AliasingError, CycleError, StructureError
from structspine.hierarchy.node import Container, Leaf
from structspine.hierarchy.walk import check_tree, count_leaves, iter_leaves, iter_nodes


@pytest.fixture
def box() -> Container:
    """Two leaves and a nested box."""
    return Container(
        [
            Leaf("Item 1", 10),
            Leaf("Item 2", 20),
            Container([Leaf("Item 3", 30), Leaf("Item 4", 40)], name="inner"),
        ],
        name="outer",
    )


class TestIterNodes:
    """Tests for iter_nodes."""

    def test_preorder_with_depths(self, box: Container) -> None:
        """Nodes come out depth-first, parents before children."""
        walked = [(depth, node.name) for depth, node in iter_nodes(box)]

        assert walked == [
            (0, "outer"),
            (1, "Item 1"),
            (1, "Item 2"),
            (1, "inner"),
            (2, "Item 3"),
            (2, "Item 4"),
        ]

    def test_single_leaf(self) -> None:
        """A leaf root yields only itself."""
        leaf = Leaf("solo", 1)

        assert list(iter_nodes(leaf)) == [(0, leaf)]


class TestIterLeaves:
    """Tests for iter_leaves and count_leaves."""

    def test_leaves_in_order(self, box: Container) -> None:
        """Leaves are yielded in traversal order."""
        assert [leaf.name for leaf in iter_leaves(box)] == ["Item 1", "Item 2", "Item 3", "Item 4"]

    def test_leaf_costs_sum_to_total(self, box: Container) -> None:
        """Total cost equals the sum over reachable leaves."""
        assert sum(leaf.cost() for leaf in iter_leaves(box)) == box.cost()

    def test_count_leaves(self, box: Container) -> None:
        """count_leaves ignores containers."""
        assert count_leaves(box) == 4
        assert count_leaves(Container()) == 0


class TestCheckTree:
    """Tests for check_tree."""

    def test_well_formed_tree(self, box: Container) -> None:
        """A proper tree reports its node count."""
        assert check_tree(box) == 6

    def test_leaf_root(self) -> None:
        """A lone leaf is a tree of one node."""
        assert check_tree(Leaf("solo", 1)) == 1

    def test_equal_but_distinct_leaves_are_fine(self) -> None:
        """Identity, not equality, decides aliasing."""
        assert check_tree(Container([Leaf("pen", 3), Leaf("pen", 3)])) == 3

    def test_shared_leaf_is_aliasing(self) -> None:
        """The same leaf under two parents is rejected."""
        pen = Leaf("pen", 3)
        tree = Container([Container([pen]), Container([pen])])

        with pytest.raises(AliasingError, match="pen"):
            check_tree(tree)

    def test_shared_container_is_aliasing(self) -> None:
        """The same container reachable twice is rejected."""
        inner = Container([Leaf("a", 1)], name="inner")

        with pytest.raises(AliasingError, match="inner"):
            check_tree(Container([inner, inner]))

    def test_cycle_detected(self) -> None:
        """A container that contains itself is a cycle."""
        loop = Container([Leaf("a", 1)], name="loop")
        # Only reachable by bypassing the frozen dataclass.
        object.__setattr__(loop, "children", (Leaf("a", 1), Container([loop])))

        with pytest.raises(CycleError, match="loop"):
            check_tree(loop)

    def test_errors_share_base(self) -> None:
        """Both audit failures are StructureErrors."""
        assert issubclass(CycleError, StructureError)
        assert issubclass(AliasingError, StructureError)
