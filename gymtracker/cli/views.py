"""
Rich rendering of workout entries.
"""
from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gymtracker.models.schemas import WorkoutEntry

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    err_console.print(f"[yellow]{escape(message)}[/yellow]")


def print_info(message: str) -> None:
    console.print(escape(message))


def print_success(message: str) -> None:
    console.print(f"[green]{escape(message)}[/green]")


def format_body_weight(body_weight: float) -> str:
    return f"{body_weight:g} lbs"


def print_entry(entry: WorkoutEntry) -> None:
    """Print one workout as a labelled block."""
    console.print(
        f"Retrieved workout tracked for user [bold]{escape(entry.username)}[/bold]:"
    )
    console.print(f"    date: {escape(entry.date)}")
    console.print(f"    time: {escape(entry.time)}")
    console.print(f"    body weight: {format_body_weight(entry.body_weight)}")
    console.print(f"    muscle group trained: {escape(entry.muscle_group)}")
    console.print(f"    intensity of workout: {entry.intensity}")
    console.print()


def print_entries(entries: Sequence[WorkoutEntry]) -> None:
    for entry in entries:
        print_entry(entry)


def print_table(entries: Sequence[WorkoutEntry], title: str) -> None:
    """Print workouts as a single table."""
    table = Table(title=escape(title))
    table.add_column("User")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Body weight", justify="right")
    table.add_column("Muscle group")
    table.add_column("Intensity", justify="right")

    for entry in entries:
        table.add_row(
            escape(entry.username),
            escape(entry.date),
            escape(entry.time),
            format_body_weight(entry.body_weight),
            escape(entry.muscle_group),
            str(entry.intensity),
        )

    console.print(table)
