"""Exclusive repository lock and atomic file replacement.

Branch heads, the active-branch config and the History Index are the only
mutable files in a repository. Writers hold ``.mygit/lock`` (created with
``O_CREAT | O_EXCL``) while mutating them, and every write goes through a
temp file in the same directory followed by ``os.replace`` so readers
never observe a partially written file.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from types import TracebackType

from mygit.core.errors import RepositoryLocked

logger = logging.getLogger(__name__)

LOCK_FILE_NAME = "lock"


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path`` via a sibling temp file and atomic rename."""
    path = Path(path)
    fd, temp_path = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.replace(temp_path, path)
    except BaseException:
        try:
            os.unlink(temp_path)
        except FileNotFoundError:
            pass
        raise


def atomic_write_text(path: Path, text: str) -> None:
    atomic_write_bytes(path, text.encode("utf-8"))


class RepositoryLock:
    """Non-blocking exclusive lock over a repository's mutable state.

    Acquisition fails immediately with ``RepositoryLocked`` if another
    writer holds the lock. Stale locks left by a crashed process are not
    broken automatically; the diagnostic names the lock file to remove.

    Parameters
    ----------
    metadata_dir:
        The repository metadata directory (``<root>/.mygit``).
    """

    def __init__(self, metadata_dir: Path) -> None:
        self._path = Path(metadata_dir) / LOCK_FILE_NAME
        self._held = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def held(self) -> bool:
        return self._held

    def acquire(self) -> None:
        try:
            fd = os.open(self._path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
        except FileExistsError:
            raise RepositoryLocked(
                f"Repository is locked by another process ({self._path}). "
                "If no other mygit process is running, remove the lock file."
            ) from None
        with os.fdopen(fd, "w") as fh:
            fh.write(str(os.getpid()))
        self._held = True
        logger.debug("Acquired repository lock %s", self._path)

    def release(self) -> None:
        if not self._held:
            return
        try:
            self._path.unlink()
        except FileNotFoundError:
            logger.warning("Repository lock %s vanished while held", self._path)
        self._held = False
        logger.debug("Released repository lock %s", self._path)

    def __enter__(self) -> RepositoryLock:
        self.acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()
