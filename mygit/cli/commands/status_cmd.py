"""``mygit status`` — compare the working tree with the active head."""

from __future__ import annotations

from rich.markup import escape

from mygit.cli._output import abort, console, short
from mygit.core.errors import MygitError
from mygit.core.repository import Repository


def status_cmd() -> None:
    """List changed, added and removed paths relative to the head tree."""
    try:
        repo = Repository.discover()
        status = repo.status()
    except MygitError as exc:
        abort(exc)

    console.print(f"On branch [bold]{escape(status.branch)}[/bold] at {short(status.head)}")
    if status.is_clean:
        console.print("[dim]Nothing to commit, working tree clean.[/dim]")
        return
    for label, style, paths in (
        ("modified", "yellow", status.changed),
        ("new file", "green", status.added),
        ("deleted", "red", status.removed),
    ):
        for path in paths:
            console.print(f"  [{style}]{label}:[/{style}] {escape(path)}")
