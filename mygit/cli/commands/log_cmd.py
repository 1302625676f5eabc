"""``mygit log`` — show the commit chain of a branch, newest first."""

from __future__ import annotations

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from mygit.cli._output import abort, console, short
from mygit.core.errors import MygitError
from mygit.core.repository import Repository


def log_cmd(
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Branch to show. Defaults to the active branch.",
    ),
    full: bool = typer.Option(
        False,
        "--full",
        help="Show full 64-character hashes.",
    ),
) -> None:
    """Walk parent links from the branch head to the root commit."""
    try:
        repo = Repository.discover()
        name = branch or repo.branches.active()
        chain = repo.log(name)
    except MygitError as exc:
        abort(exc)

    if not chain:
        console.print(f"[dim]Branch {name} has no commits yet.[/dim]")
        return

    width = 64 if full else 12
    table = Table(title=f"History of {name}")
    table.add_column("Commit", style="cyan", no_wrap=True)
    table.add_column("Parent", style="dim", no_wrap=True)
    table.add_column("Date (UTC)", no_wrap=True)
    table.add_column("Author", style="green")
    table.add_column("Message")

    for digest, record in chain:
        table.add_row(
            short(digest, width),
            short(record.parent, width),
            record.date.strftime("%Y-%m-%d %H:%M"),
            escape(record.author),
            escape(record.message),
        )
    console.print(table)
