"""
CLI commands for inspecting digests and groups and for simulating cycling
over a list of document identities.
"""

import typer
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from namecycle.cycle.digest import digest
from namecycle.cycle.grouping import group, group_all
from namecycle.cycle.schemas import Direction
from namecycle.cycle.session import cycle
from namecycle.workspace.workspace import Workspace

cycle_app = typer.Typer(help="Commands to group and cycle documents by base name.")
console = Console()


def _collect_identities(identities: Optional[List[str]], file: Optional[Path]) -> List[str]:
    collected = list(identities or [])
    if file is not None:
        try:
            lines = file.read_text(encoding="utf-8").splitlines()
        except OSError as e:
            raise ValueError(f"Cannot read {file}: {e}") from e
        collected.extend(line.strip() for line in lines if line.strip())
    return collected


def _workspace_at(current: str, identities: List[str]) -> Workspace:
    workspace = Workspace(identities)
    doc = workspace.open(current)
    workspace.activate_document(doc)
    return workspace


@cycle_app.command("digest")
def digest_cmd(
    identities: List[str] = typer.Argument(..., help="Paths or buffer names")
):
    """
    Show the grouping key of each identity.
    """
    table = Table(title="Digests")
    table.add_column("Identity", style="cyan")
    table.add_column("Digest", style="green")
    for identity in identities:
        table.add_row(escape(identity), escape(digest(identity)))
    console.print(table)


@cycle_app.command("groups")
def groups_cmd(
    identities: Optional[List[str]] = typer.Argument(None, help="Paths or buffer names"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f",
        help="Read more identities from a file, one per line"
    )
):
    """
    List every same-name group among the given documents.
    """
    try:
        workspace = Workspace(_collect_identities(identities, file))
    except ValueError as e:
        typer.echo(f"Error: {str(e)}")
        raise typer.Exit(code=1)

    groups = group_all(workspace.list_open_documents())
    if not groups:
        typer.echo("No documents given.")
        return

    table = Table(title="Same-name groups")
    table.add_column("Digest", style="green")
    table.add_column("Size", style="magenta")
    table.add_column("Members", style="cyan")
    for doc_group in groups:
        table.add_row(
            escape(repr(doc_group.digest)),
            str(len(doc_group.members)),
            "\n".join(escape(identity) for identity in doc_group.identities)
        )
    console.print(table)


@cycle_app.command("next")
def next_cmd(
    current: str = typer.Argument(..., help="The active document"),
    identities: Optional[List[str]] = typer.Argument(None, help="Other open documents"),
    backward: bool = typer.Option(
        False, "--backward", "-b",
        help="Retreat instead of advance"
    ),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f",
        help="Read more identities from a file, one per line"
    )
):
    """
    Show which document an advance (or retreat) from CURRENT would activate.
    """
    try:
        workspace = _workspace_at(current, _collect_identities(identities, file))
    except ValueError as e:
        typer.echo(f"Error: {str(e)}")
        raise typer.Exit(code=1)

    direction = Direction.BACKWARD if backward else Direction.FORWARD
    target = cycle(workspace, direction)
    if target is None:
        typer.echo(f"{current} has no other document with the same name.")
        return
    typer.echo(target.identity)


@cycle_app.command("cycle")
def cycle_cmd(
    start: str = typer.Argument(..., help="The document to start from"),
    identities: Optional[List[str]] = typer.Argument(None, help="Other open documents"),
    steps: int = typer.Option(
        0, "--steps", "-n",
        help="Number of moves; defaults to one full turn of the group"
    ),
    backward: bool = typer.Option(
        False, "--backward", "-b",
        help="Retreat instead of advance"
    ),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f",
        help="Read more identities from a file, one per line"
    )
):
    """
    Repeatedly advance (or retreat) from START and print every document visited.
    """
    if steps < 0:
        typer.echo("Error: --steps must not be negative")
        raise typer.Exit(code=1)

    try:
        workspace = _workspace_at(start, _collect_identities(identities, file))
    except ValueError as e:
        typer.echo(f"Error: {str(e)}")
        raise typer.Exit(code=1)

    direction = Direction.BACKWARD if backward else Direction.FORWARD
    if steps == 0:
        steps = len(group(workspace.get_current_document(), workspace.list_open_documents()))

    table = Table(title=f"Cycling {direction.value} from {escape(start)}")
    table.add_column("Step", style="magenta")
    table.add_column("Document", style="cyan")
    table.add_row("0", escape(workspace.get_current_document().identity))
    for step in range(1, steps + 1):
        cycle(workspace, direction)
        table.add_row(str(step), escape(workspace.get_current_document().identity))
    console.print(table)
