"""Traversal and structural audit of cost hierarchies."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from structspine.core.exceptions import AliasingError, CycleError
from structspine.hierarchy.node import Container, HierarchyNode, Leaf

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


def _label(node: HierarchyNode) -> str:
    name = getattr(node, "name", "")
    return repr(name) if name else type(node).__name__


def iter_nodes(root: HierarchyNode) -> Iterator[tuple[int, HierarchyNode]]:
    """Walk the tree depth-first, pre-order.

    Yields:
        ``(depth, node)`` pairs, the root at depth 0.

    Example:
        >>> from structspine.hierarchy.node import Container, Leaf
        >>> tree = Container([Leaf("a", 1), Container([Leaf("b", 2)])], name="root")
        >>> [(d, getattr(n, "name")) for d, n in iter_nodes(tree)]
        [(0, 'root'), (1, 'a'), (1, ''), (2, 'b')]
    """
    yield 0, root
    if not isinstance(root, Container):
        return
    stack: list[Iterator[HierarchyNode]] = [iter(root.children)]
    while stack:
        child = next(stack[-1], _EXHAUSTED)
        if child is _EXHAUSTED:
            stack.pop()
            continue
        yield len(stack), child
        if isinstance(child, Container):
            stack.append(iter(child.children))


def iter_leaves(root: HierarchyNode) -> Iterator[HierarchyNode]:
    """Yield every non-container node in traversal order.

    Example:
        >>> from structspine.hierarchy.node import Container, Leaf
        >>> tree = Container([Leaf("a", 1), Container([Leaf("b", 2)])])
        >>> [leaf.name for leaf in iter_leaves(tree)]
        ['a', 'b']
    """
    for _, node in iter_nodes(root):
        if not isinstance(node, Container):
            yield node


def check_tree(root: HierarchyNode) -> int:
    """Verify ``root`` is a proper tree.

    Cost evaluation assumes every node has at most one parent and no node is
    its own ancestor. This audit is opt-in; nothing calls it implicitly.

    Args:
        root: Top of the hierarchy to audit.

    Returns:
        Number of nodes in the tree.

    Raises:
        CycleError: A container is reachable from itself.
        AliasingError: A node object appears under more than one parent.

    Example:
        >>> from structspine.hierarchy.node import Container, Leaf
        >>> pen = Leaf("pen", 3)
        >>> check_tree(Container([pen, Leaf("cap", 1)]))
        3
        >>> check_tree(Container([pen, pen]))  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        AliasingError: 'pen' appears more than once
    """
    seen = {id(root)}
    if not isinstance(root, Container):
        return 1

    path: list[Container] = [root]
    on_path = {id(root)}
    stack: list[Iterator[HierarchyNode]] = [iter(root.children)]
    while stack:
        child = next(stack[-1], _EXHAUSTED)
        if child is _EXHAUSTED:
            stack.pop()
            on_path.discard(id(path.pop()))
            continue
        if id(child) in on_path:
            raise CycleError(f"{_label(child)} contains itself")
        if id(child) in seen:
            raise AliasingError(f"{_label(child)} appears more than once")
        seen.add(id(child))
        if isinstance(child, Container):
            path.append(child)
            on_path.add(id(child))
            stack.append(iter(child.children))

    logger.debug("Tree %s is well formed (%d nodes)", _label(root), len(seen))
    return len(seen)


def count_leaves(root: HierarchyNode) -> int:
    """Number of ``Leaf`` nodes under ``root``."""
    return sum(1 for node in iter_leaves(root) if isinstance(node, Leaf))
