"""mygit data models — all Pydantic v2, all frozen (immutable)."""

from mygit.models.history import HistoryEntry
from mygit.models.objects import Commit, Tree, TreeEntry
from mygit.models.status import CommitResult, WorkingTreeStatus

__all__ = [
    # objects
    "TreeEntry",
    "Tree",
    "Commit",
    # history
    "HistoryEntry",
    # results
    "CommitResult",
    "WorkingTreeStatus",
]
