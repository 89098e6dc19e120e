"""Build, load and render cost hierarchies.

Example:
    >>> from structspine.hierarchy.build import build_tree
    >>> tree = build_tree({
    ...     "name": "box",
    ...     "children": [
    ...         {"name": "Item 1", "cost": 10},
    ...         {"children": [{"name": "Item 2", "cost": 20}]},
    ...     ],
    ... })
    >>> tree.cost()
    30
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any, cast

import pydantic
from rich.tree import Tree

from structspine.core.exceptions import ValidationError
from structspine.hierarchy.node import Container, HierarchyNode, Leaf
from structspine.models.node_spec import NodeSpec

logger = logging.getLogger(__name__)


def build_tree(spec: NodeSpec | Mapping[str, Any]) -> HierarchyNode:
    """Create live nodes from a declared hierarchy.

    Each node is validated on its own and children are built before their
    parent, so every container receives finished subtrees. Nesting is walked
    on an explicit stack; depth is not bounded by the recursion limit.

    Args:
        spec: A ``NodeSpec`` or a mapping in the same shape.

    Returns:
        The root node.

    Raises:
        ValidationError: ``spec`` is not a valid hierarchy. The message names
            the offending node's path, e.g. ``$.children[2]``.
    """
    root = _validate(spec, "$")
    if root.is_leaf:
        return _leaf(root)

    # Each frame: container spec, its path, children built so far, children left.
    stack: list[tuple[NodeSpec, str, list[HierarchyNode], Iterator[tuple[int, Any]]]] = [
        (root, "$", [], enumerate(root.children or ()))
    ]
    while True:
        node, path, built, pending = stack[-1]
        item = next(pending, None)
        if item is None:
            stack.pop()
            container = Container(tuple(built), node.name)
            if not stack:
                return container
            stack[-1][2].append(container)
            continue

        index, raw = item
        child_path = f"{path}.children[{index}]"
        child = _validate(raw, child_path)
        if child.is_leaf:
            built.append(_leaf(child))
        else:
            stack.append((child, child_path, [], enumerate(child.children or ())))


def _validate(raw: Any, path: str) -> NodeSpec:
    if isinstance(raw, NodeSpec):
        return raw
    try:
        return NodeSpec.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(f"invalid hierarchy at {path}: {e}") from e


def _leaf(spec: NodeSpec) -> Leaf:
    return Leaf(spec.name, cast(int, spec.cost))


def load_tree(path: str | Path) -> HierarchyNode:
    """Read a JSON hierarchy from ``path``.

    Raises:
        ValidationError: The file is not UTF-8 JSON or not a valid hierarchy.
        OSError: The file cannot be read.
    """
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ValidationError(f"{path}: not UTF-8 text ({e.reason} at byte {e.start})") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"{path}: not valid JSON ({e})") from e
    except RecursionError as e:
        raise ValidationError(f"{path}: JSON nested too deeply to parse") from e
    if not isinstance(document, Mapping):
        raise ValidationError(f"{path}: top level must be an object")

    tree = build_tree(document)
    logger.debug("Loaded hierarchy from %s", path)
    return tree


def render_tree(root: HierarchyNode) -> Tree:
    """Rich tree of names and subtree costs.

    Example:
        >>> from rich.console import Console
        >>> from structspine.hierarchy.node import Container, Leaf
        >>> console = Console(width=40, color_system=None)
        >>> with console.capture() as capture:
        ...     console.print(render_tree(Container([Leaf("pen", 3)], name="box")))
        >>> "pen" in capture.get()
        True
    """
    tree = Tree(_describe(root))
    pending = [(tree, root)]
    while pending:
        branch, node = pending.pop()
        if isinstance(node, Container):
            for child in node.children:
                pending.append((branch.add(_describe(child)), child))
    return tree


def _describe(node: HierarchyNode) -> str:
    name = getattr(node, "name", "") or ("box" if isinstance(node, Container) else "item")
    return f"{name} [dim]({node.cost()})[/dim]"
