"""Main Typer application — imports and registers all CLI commands.

Entry point: ``mygit`` (configured via pyproject.toml project.scripts).

Commands: init, commit, log, status, branch, switch, verify.
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from mygit.cli._output import err_console
from mygit.cli.commands.branch_cmd import branch_cmd, switch_cmd
from mygit.cli.commands.commit_cmd import commit_cmd
from mygit.cli.commands.init_cmd import init_cmd
from mygit.cli.commands.log_cmd import log_cmd
from mygit.cli.commands.status_cmd import status_cmd
from mygit.cli.commands.verify_cmd import verify_cmd
from mygit.config import settings

app = typer.Typer(
    name="mygit",
    help="mygit: minimal local version control with content-addressed snapshots.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log progress at DEBUG level."
    ),
) -> None:
    """Configure logging before any command runs."""
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# Register subcommands
app.command(name="init", help="Create an empty repository.")(init_cmd)
app.command(name="commit", help="Snapshot the working tree onto the active branch.")(commit_cmd)
app.command(name="log", help="Show the commit chain of a branch.")(log_cmd)
app.command(name="status", help="Show changed, added and removed files.")(status_cmd)
app.command(name="branch", help="List branches, or create one at the active head.")(branch_cmd)
app.command(name="switch", help="Make another branch the active branch.")(switch_cmd)
app.command(name="verify", help="Verify commit chain and object integrity.")(verify_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
