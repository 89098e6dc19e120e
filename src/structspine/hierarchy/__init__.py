"""Composite cost hierarchies.

Example:
    >>> from structspine.hierarchy import new_container, new_leaf
    >>> new_container([new_leaf("a", 1), new_container([new_leaf("b", 2)])]).cost()
    3
"""

from structspine.hierarchy.build import build_tree, load_tree, render_tree
from structspine.hierarchy.node import (
    Container,
    HierarchyNode,
    Leaf,
    new_container,
    new_leaf,
)
from structspine.hierarchy.walk import check_tree, count_leaves, iter_leaves, iter_nodes

__all__ = [
    "HierarchyNode",
    "Leaf",
    "Container",
    "new_leaf",
    "new_container",
    "iter_nodes",
    "iter_leaves",
    "count_leaves",
    "check_tree",
    "build_tree",
    "load_tree",
    "render_tree",
]
