"""CLI entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from structspine.core.config import get_settings
from structspine.core.exceptions import ConfigurationError, StructSpineError
from structspine.core.logging import configure_logging
from structspine.hierarchy import Container, Leaf, count_leaves, load_tree, render_tree
from structspine.models.message import Message, Severity
from structspine.notifier import build_notification_chain

app = typer.Typer(
    name="structspine",
    help="Composite cost hierarchies and behavior chains",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override STRUCTSPINE_LOG_LEVEL"),
) -> None:
    """Configure logging before any command runs."""
    overrides = {"log_level": log_level} if log_level else {}
    try:
        settings = get_settings(**overrides)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    configure_logging(settings)


@app.command()
def version() -> None:
    """Show version."""
    from structspine import __version__

    console.print(f"structspine {__version__}")


@app.command()
def info() -> None:
    """Show system information."""
    import sys

    from structspine import __version__

    console.print(f"[bold]StructSpine[/bold] {__version__}")
    console.print(f"Python {sys.version}")


@app.command()
def cost(
    path: Path = typer.Argument(..., help="JSON hierarchy file"),
    tree: bool = typer.Option(False, "--tree", help="Render the hierarchy"),
) -> None:
    """Print the total cost of a hierarchy."""
    try:
        root = load_tree(path)
    except (StructSpineError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    if tree:
        console.print(render_tree(root))
        console.print(f"{count_leaves(root)} items")
    console.print(f"Total cost: {root.cost()}")


@app.command()
def notify(
    message: str = typer.Argument(..., help="Message text"),
    via: Optional[list[str]] = typer.Option(None, "--via", help="Channel, repeatable; fires in the order given"),
    severity: Severity = typer.Option(Severity.INFO, "--severity", help="Message severity"),
) -> None:
    """Send a message through a chain of channel notifiers."""
    settings = get_settings()
    try:
        chain = build_notification_chain(via or settings.notify_channels, min_severity=settings.min_severity)
    except StructSpineError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    chain.invoke(Message(text=message, severity=severity))


@app.command()
def demo() -> None:
    """Run the box and notification demonstrations."""
    box = Container(
        [
            Leaf("Item 1", 10),
            Leaf("Item 2", 20),
            Container([Leaf("Item 3", 30), Leaf("Item 4", 40)]),
        ]
    )
    console.print(f"Total cost: {box.cost()}")

    chain = build_notification_chain(["email", "sms", "slack"])
    chain.invoke(Message(text="Hello, User!"))


if __name__ == "__main__":
    app()
