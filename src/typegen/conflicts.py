"""Presentation of conflicting definitions for manual resolution."""

from rich.console import Console
from rich.markup import escape

from typegen.typed_object import TypedObject


def conflict_choices(candidates: list[TypedObject]) -> list[str]:
    """Number each candidate and pair it with its descriptor.

    Args:
        candidates: The competing definitions, in the order they were found

    Returns:
        One ``"<n>: <descriptor>"`` line per candidate, numbered from 1
    """
    return [f"{i}: {candidate.describe()}" for i, candidate in enumerate(candidates, start=1)]


def print_conflict(
    namespace: str,
    name: str,
    candidates: list[TypedObject],
    console: Console | None = None,
) -> None:
    """Print a conflict and its numbered candidates to the console."""
    if console is None:
        console = Console()

    console.print(
        f"[bold yellow]Conflict![/bold yellow] Inside {escape(namespace)}, "
        f"these items share a name ({escape(name)}):"
    )
    for line in conflict_choices(candidates):
        console.print(f"  {escape(line)}")
