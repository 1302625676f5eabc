"""``mygit init [PATH]`` — create an empty repository."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from mygit.cli._output import abort, console
from mygit.core.errors import MygitError
from mygit.core.repository import Repository


def init_cmd(
    path: Optional[Path] = typer.Argument(
        None,
        help="Directory to initialize (created if missing). Defaults to the current directory.",
    ),
) -> None:
    """Create the repository metadata layout.

    Re-running init on an existing repository leaves its history intact.
    """
    try:
        repo = Repository.init(path)
    except MygitError as exc:
        abort(exc)

    console.print(
        f"[bold green]Initialized mygit repository[/bold green] in {repo.metadata_dir}"
    )
    console.print(f"[dim]Active branch:[/dim] {repo.branches.active()}")
