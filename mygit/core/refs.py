"""Branch registry: branch name -> head commit, plus the active branch.

On disk each branch is a one-line file under ``branches/`` holding either
the head commit hash or ``no-commits``. The active branch name lives in
the one-line ``config`` file. ``no-commits`` never leaves this module;
callers see ``None``.

Writes use atomic replace. Callers that advance a head as part of a
commit hold the repository lock.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mygit.core.errors import BranchExists, BranchNotFound, InvalidBranchName
from mygit.core.locking import atomic_write_text

logger = logging.getLogger(__name__)

NO_COMMITS = "no-commits"
BRANCHES_DIR = "branches"
CONFIG_FILE = "config"


def validate_branch_name(name: str) -> str:
    name = name.strip()
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise InvalidBranchName(f"Invalid branch name: {name!r}")
    return name


class BranchRegistry:
    """File-backed branch heads and active-branch pointer.

    Parameters
    ----------
    metadata_dir:
        The repository metadata directory (``<root>/.mygit``).
    """

    def __init__(self, metadata_dir: Path) -> None:
        self._meta = Path(metadata_dir)
        self._branches = self._meta / BRANCHES_DIR
        self._config = self._meta / CONFIG_FILE

    def _branch_path(self, name: str) -> Path:
        return self._branches / validate_branch_name(name)

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def initialize(self, default_branch: str) -> None:
        """Create the registry layout without touching existing state."""
        self._branches.mkdir(parents=True, exist_ok=True)
        if not self._config.exists():
            atomic_write_text(self._config, validate_branch_name(default_branch))
        branch_path = self._branch_path(default_branch)
        if not branch_path.exists():
            atomic_write_text(branch_path, NO_COMMITS)

    # ------------------------------------------------------------------
    # Active branch
    # ------------------------------------------------------------------

    def active(self) -> str:
        """Return the name of the active branch."""
        return self._config.read_text(encoding="utf-8").strip()

    def switch(self, name: str) -> None:
        """Make ``name`` the active branch. The working tree is untouched."""
        name = validate_branch_name(name)
        if not self.exists(name):
            raise BranchNotFound(f"Branch not found: {name}")
        atomic_write_text(self._config, name)
        logger.info("Switched active branch to %s", name)

    # ------------------------------------------------------------------
    # Heads
    # ------------------------------------------------------------------

    def exists(self, name: str) -> bool:
        return self._branch_path(name).is_file()

    def head(self, name: str) -> str | None:
        """Return the head commit of ``name``, or None if it has no commits."""
        path = self._branch_path(name)
        if not path.is_file():
            raise BranchNotFound(f"Branch not found: {name}")
        value = path.read_text(encoding="utf-8").strip()
        if not value or value == NO_COMMITS:
            return None
        return value

    def set_head(self, name: str, commit_hash: str) -> None:
        """Advance ``name`` to ``commit_hash``."""
        atomic_write_text(self._branch_path(name), commit_hash)
        logger.debug("Branch %s -> %s", name, commit_hash)

    def create(self, name: str, head: str | None) -> None:
        """Register a new branch starting at ``head`` (None: no commits)."""
        path = self._branch_path(name)
        if path.exists():
            raise BranchExists(f"A branch named {name!r} already exists")
        atomic_write_text(path, head or NO_COMMITS)
        logger.info("Created branch %s at %s", name, head or NO_COMMITS)

    def list_branches(self) -> dict[str, str | None]:
        """Return every branch with its head, sorted by name."""
        if not self._branches.is_dir():
            return {}
        return {
            entry.name: self.head(entry.name)
            for entry in sorted(self._branches.iterdir())
            if entry.is_file() and not entry.name.startswith(".")
        }
