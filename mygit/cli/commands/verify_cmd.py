"""``mygit verify`` — check commit chain and object integrity."""

from __future__ import annotations

from typing import Optional

import typer

from mygit.cli._output import abort, console
from mygit.core.errors import MygitError
from mygit.core.repository import Repository


def verify_cmd(
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Branch to verify. Defaults to the active branch.",
    ),
) -> None:
    """Re-hash every commit, tree and blob reachable from the branch head."""
    try:
        repo = Repository.discover()
        name = branch or repo.branches.active()
        count = repo.verify(name)
    except MygitError as exc:
        abort(exc)

    console.print(
        f"[bold green]OK[/bold green] {count} commit(s) on {name} verified"
    )
