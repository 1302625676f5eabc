"""History Index: append-only JSON log of every commit across branches.

Stored as ``root.json``, a list of ``{commit, parent, date}`` objects. The
index is denormalized display data; commit objects and branch heads stay
authoritative, and the index is always written after both.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from mygit.core.errors import CorruptObject
from mygit.core.locking import atomic_write_text
from mygit.models.history import HistoryEntry

logger = logging.getLogger(__name__)

HISTORY_FILE = "root.json"


class HistoryIndex:
    """Append-only History Index.

    Parameters
    ----------
    metadata_dir:
        The repository metadata directory (``<root>/.mygit``).
    """

    def __init__(self, metadata_dir: Path) -> None:
        self._path = Path(metadata_dir) / HISTORY_FILE

    @property
    def path(self) -> Path:
        return self._path

    def initialize(self) -> None:
        if not self._path.exists():
            atomic_write_text(self._path, "[]")

    def _load_raw(self) -> list[dict]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "[]")
        except json.JSONDecodeError as exc:
            raise CorruptObject(f"History index {self._path} is not valid JSON") from exc
        if not isinstance(data, list):
            raise CorruptObject(f"History index {self._path} is not a list")
        return data

    def entries(self) -> list[HistoryEntry]:
        """Return all entries in append order."""
        return [HistoryEntry.model_validate(item) for item in self._load_raw()]

    def append(self, entry: HistoryEntry) -> None:
        """Append one entry. This is the ONLY write method.

        The caller must hold the repository lock.
        """
        data = self._load_raw()
        data.append(entry.model_dump(mode="json"))
        atomic_write_text(self._path, json.dumps(data, indent=2))
        logger.debug("History index now holds %d entries", len(data))
