#!/usr/bin/env python3
"""
StructSpine Cost Hierarchy Example

Boxes and real items share one interface, so the client asks any node for
its cost without caring which kind it holds.

Usage:
    python examples/01_cost_hierarchy.py
"""

from rich.console import Console

from structspine import Container, Leaf, check_tree, render_tree


def main() -> None:
    """Build a nested box and price it."""
    console = Console()

    box = Container(
        [
            Leaf("Item 1", 10),
            Leaf("Item 2", 20),
            Container([Leaf("Item 3", 30), Leaf("Item 4", 40)], name="inner box"),
        ],
        name="box",
    )

    check_tree(box)
    console.print(render_tree(box))
    console.print(f"Total cost: {box.cost()}")


if __name__ == "__main__":
    main()
