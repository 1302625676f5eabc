"""``mygit commit [MESSAGE]`` — snapshot the working tree.

Scans the working tree, stores changed and added files, writes the full
tree and a commit record, and advances the active branch.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.markup import escape

from mygit.cli._output import abort, console, short
from mygit.core.errors import MygitError
from mygit.core.repository import Repository


def commit_cmd(
    message: Optional[str] = typer.Argument(
        None,
        help="Commit message. Defaults to the configured default message.",
    ),
) -> None:
    """Commit the full working tree minus ignored paths."""
    try:
        repo = Repository.discover()
        result = repo.commit(message)
    except MygitError as exc:
        abort(exc)

    console.print(
        f"[bold]{escape(f'[{result.branch} {short(result.commit_hash)}]')}[/bold] "
        f"{len(result.changed)} file(s) changed or added, "
        f"{len(result.new_blobs)} new object(s)"
    )
    for path in result.changed:
        console.print(f"  [green]{escape(path)}[/green]")
    if result.parent is None:
        console.print("[dim](root commit)[/dim]")
