"""Ignore file loading and membership tests.

The ignore file holds one literal relative path per line. Blank lines and
``#`` comments are skipped. An entry excludes the exact path and, when it
names a directory, everything beneath it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_FILE = ".mygitignore"


def normalize_entry(line: str) -> str:
    """Normalize one ignore line into POSIX relative form ('' if empty)."""
    entry = line.strip()
    if not entry or entry.startswith("#"):
        return ""
    entry = entry.replace("\\", "/")
    while entry.startswith("./"):
        entry = entry[2:]
    return entry.strip("/")


def load_ignore_set(root: Path, ignore_file: str = DEFAULT_IGNORE_FILE) -> frozenset[str]:
    """Read ``<root>/<ignore_file>`` into a set of excluded paths.

    A missing ignore file yields an empty set.
    """
    path = Path(root) / ignore_file
    if not path.is_file():
        return frozenset()
    entries = {normalize_entry(line) for line in path.read_text(encoding="utf-8").splitlines()}
    entries.discard("")
    logger.debug("Loaded %d ignore entries from %s", len(entries), path)
    return frozenset(entries)


def is_ignored(path: str, ignore_set: Iterable[str]) -> bool:
    """True if ``path`` equals an entry or lies beneath an ignored directory."""
    ignore_set = ignore_set if isinstance(ignore_set, (set, frozenset)) else set(ignore_set)
    if path in ignore_set:
        return True
    parts = path.split("/")
    return any("/".join(parts[:i]) in ignore_set for i in range(1, len(parts)))


def filter_ignored(paths: Iterable[str], ignore_set: Iterable[str]) -> list[str]:
    """Drop ignored paths, preserving order."""
    ignore_set = frozenset(ignore_set)
    if not ignore_set:
        return list(paths)
    return [p for p in paths if not is_ignored(p, ignore_set)]
