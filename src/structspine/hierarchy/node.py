"""Composite cost hierarchy.

Leaves carry an intrinsic cost; containers derive theirs by summing their
children. Client code treats both uniformly through ``HierarchyNode``.

Nodes are built bottom-up and are immutable afterwards: a container takes
already-built children and stores them as a tuple, so a node can never be
attached to one of its own ancestors through this API. Passing the same
node to two containers is not detected here; its cost is then counted once
per parent (see ``check_tree``).

Example:
    >>> from structspine.hierarchy.node import Container, Leaf
    >>> box = Container([
    ...     Leaf("Item 1", 10),
    ...     Leaf("Item 2", 20),
    ...     Container([Leaf("Item 3", 30), Leaf("Item 4", 40)]),
    ... ])
    >>> box.cost()
    100
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

_EXHAUSTED = object()


@runtime_checkable
class HierarchyNode(Protocol):
    """Anything with a cost."""

    def cost(self) -> int:
        """Total cost of this node and everything beneath it."""
        ...


@dataclass(frozen=True)
class Leaf:
    """A node with an intrinsic cost.

    Example:
        >>> from structspine.hierarchy.node import Leaf
        >>> Leaf("pen", 3).cost()
        3
    """

    name: str
    amount: int

    def cost(self) -> int:
        return self.amount


@dataclass(frozen=True, eq=False)
class Container:
    """A node whose cost is the sum of its children.

    Containers compare and hash by identity; ``repr`` shows only the direct
    child count, so neither walks the subtree.

    Example:
        >>> from structspine.hierarchy.node import Container, Leaf
        >>> Container().cost()
        0
        >>> len(Container([Leaf("a", 1), Leaf("b", 2)]))
        2
        >>> Container([Leaf("a", 1)], name="box")
        Container(name='box', children=1)
    """

    children: tuple[HierarchyNode, ...] = field(default_factory=tuple)
    name: str = ""

    def __post_init__(self) -> None:
        # Freeze whatever sequence the caller handed over.
        object.__setattr__(self, "children", tuple(self.children))

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return f"Container(name={self.name!r}, children={len(self.children)})"

    def __iter__(self) -> Iterator[HierarchyNode]:
        return iter(self.children)

    def cost(self) -> int:
        """Sum leaf costs depth-first in child order.

        Nested containers are expanded on an explicit stack rather than by
        recursion, so depth is bounded by memory, not the interpreter's
        recursion limit. Other node types answer through their own ``cost()``.
        """
        total = 0
        stack: list[Iterator[HierarchyNode]] = [iter(self.children)]
        while stack:
            child = next(stack[-1], _EXHAUSTED)
            if child is _EXHAUSTED:
                stack.pop()
            elif isinstance(child, Container):
                stack.append(iter(child.children))
            else:
                total += child.cost()
        return total


def new_leaf(name: str, cost: int) -> Leaf:
    """Create a leaf; stores both attributes verbatim."""
    return Leaf(name, cost)


def new_container(children: Sequence[HierarchyNode] = (), name: str = "") -> Container:
    """Create a container owning ``children``.

    The caller must not reuse any of ``children`` in another tree.
    """
    return Container(tuple(children), name)
