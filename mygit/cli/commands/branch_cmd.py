"""``mygit branch [NAME]`` and ``mygit switch NAME``.

Branches are named pointers to a head commit. Creating a branch points it
at the active head; switching only changes which branch the next commit
advances, the working tree is never touched.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from mygit.cli._output import abort, console, short
from mygit.core.errors import MygitError
from mygit.core.repository import Repository


def branch_cmd(
    name: Optional[str] = typer.Argument(
        None,
        help="Name of a branch to create at the active head. Omit to list branches.",
    ),
) -> None:
    """List branches, or create a new one."""
    try:
        repo = Repository.discover()
        if name is not None:
            head = repo.create_branch(name)
            console.print(f"Created branch [bold]{escape(name)}[/bold] at {short(head)}")
            return
        active = repo.branches.active()
        branches = repo.branches.list_branches()
    except MygitError as exc:
        abort(exc)

    table = Table(title="Branches")
    table.add_column("", width=1)
    table.add_column("Branch", style="cyan")
    table.add_column("Head")
    for branch, head in branches.items():
        marker = "[green]*[/green]" if branch == active else ""
        table.add_row(marker, escape(branch), short(head) if head else "[dim]no commits[/dim]")
    console.print(table)


def switch_cmd(
    name: str = typer.Argument(..., help="Branch to make active."),
) -> None:
    """Set the active branch."""
    try:
        repo = Repository.discover()
        repo.switch_branch(name)
    except MygitError as exc:
        abort(exc)
    console.print(f"Switched to branch [bold]{escape(name)}[/bold]")
