"""Result models returned by repository operations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CommitResult(BaseModel):
    """Outcome of a successful commit."""

    model_config = ConfigDict(frozen=True)

    commit_hash: str
    tree_hash: str
    branch: str
    parent: str | None = None
    changed: list[str] = []  # changed or added paths, in scan order
    new_blobs: list[str] = []  # blob hashes not present before this commit


class WorkingTreeStatus(BaseModel):
    """Working tree compared with the active branch head."""

    model_config = ConfigDict(frozen=True)

    branch: str
    head: str | None = None
    changed: list[str] = []
    added: list[str] = []
    removed: list[str] = []

    @property
    def is_clean(self) -> bool:
        return not (self.changed or self.added or self.removed)
