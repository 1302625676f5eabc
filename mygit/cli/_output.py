"""Shared console and error reporting for CLI commands."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console

from mygit.core.errors import MygitError

console = Console()
err_console = Console(stderr=True)


def short(digest: str | None, width: int = 12) -> str:
    """Abbreviate a hash for display."""
    return digest[:width] if digest else "(none)"


def abort(exc: MygitError) -> NoReturn:
    """Print a diagnostic for ``exc`` and exit with status 1."""
    err_console.print(f"[bold red]{type(exc).__name__}:[/bold red] {exc}")
    raise typer.Exit(code=1)
