"""History Index entry model.

The History Index is a denormalized, append-only log of every commit made
across all branches. The commit objects and branch heads remain the source
of truth; the index exists for display and traversal only.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class HistoryEntry(BaseModel):
    """One commit as recorded in ``root.json``."""

    model_config = ConfigDict(frozen=True)

    commit: str
    parent: str | None = None
    date: datetime
