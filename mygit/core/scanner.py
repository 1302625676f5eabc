"""Working-tree scanner: enumerate tracked-candidate files under a root."""

from __future__ import annotations

import os
from pathlib import Path

from mygit.core.errors import InvalidPath
from mygit.core.hasher import is_regular_file

DEFAULT_METADATA_DIR = ".mygit"


def scan(root: Path, metadata_dir: str = DEFAULT_METADATA_DIR) -> list[str]:
    """Return every file under ``root`` as a sorted POSIX relative path.

    Real directories are descended. The metadata directory is skipped only
    when it sits directly under ``root``; a nested directory of the same
    name is ordinary content. Symlinks and special files are listed as
    opaque entries and never followed.

    Raises ``InvalidPath`` when a directory cannot be listed.
    """
    root = Path(root)
    files: list[str] = []
    _walk(root, (), metadata_dir, files)
    return sorted(files)


def _walk(
    directory: Path, prefix: tuple[str, ...], metadata_dir: str, out: list[str]
) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise InvalidPath(f"Cannot list directory {directory}: {exc.strerror}") from exc
    for entry in entries:
        if not prefix and entry.name == metadata_dir:
            continue
        parts = (*prefix, entry.name)
        if entry.is_dir(follow_symlinks=False):
            _walk(Path(entry.path), parts, metadata_dir, out)
        else:
            out.append("/".join(parts))


def read_working_file(path: Path) -> bytes:
    """Bytes to snapshot for a scanned path; empty for non-regular files."""
    if not is_regular_file(path):
        return b""
    return Path(path).read_bytes()
