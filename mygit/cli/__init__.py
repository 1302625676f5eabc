"""mygit CLI — Typer-based command-line interface.

Provides the ``mygit`` command with subcommands for initializing a
repository, committing snapshots, inspecting history and status, managing
branches, and verifying chain integrity.

All output uses Rich for formatted terminal display.
"""
