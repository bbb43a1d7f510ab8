"""Display components for CLI using Rich."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from classdiagram.diagram import Relation, RelationKind
from classdiagram.project import DiagramResult

console = Console()


def show_success(title: str, message: str) -> None:
    """Display a success message."""
    console.print()
    console.print(
        Panel(
            f"[bold green]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="green",
        )
    )


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_warning(message: str) -> None:
    console.print(f"[yellow]⚠ {escape(message)}[/]")


def _relation_counts(relations: list[Relation]) -> dict[RelationKind, int]:
    counts: dict[RelationKind, int] = {}
    for relation in relations:
        counts[relation.kind] = counts.get(relation.kind, 0) + 1
    return counts


def show_generate_summary(result: DiagramResult, output_path: Path) -> None:
    """Display what was parsed and written by the generate command."""
    table = Table(title="Class Diagram", show_header=True, header_style="bold cyan")
    table.add_column("Item", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Source files", str(len(result.model.files)))
    table.add_row("Skipped files", str(len(result.model.skipped_files)))
    table.add_row("Classes", str(result.model.class_count))
    for kind, count in _relation_counts(result.relations).items():
        table.add_row(f"{kind.value.capitalize()} relations", str(count))

    console.print()
    console.print(table)

    for path, reason in result.model.skipped_files.items():
        show_warning(f"Skipped {path}: {reason}")

    show_success("Done", f"Class diagram written to: {output_path}")
