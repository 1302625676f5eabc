"""Error kinds raised by the repository engine.

Every error is fatal for the current invocation. Library code raises;
only the CLI converts these into diagnostics and exit codes.
"""

from __future__ import annotations


class MygitError(RuntimeError):
    """Base class for all repository errors."""


class InvalidPath(MygitError):
    """Raised when a path is not the kind of entry the operation needs.

    Covers an init target or metadata path that exists as a file, and a
    working-tree directory that cannot be listed.
    """


class NotARepository(MygitError):
    """Raised when no repository metadata directory can be found."""


class ObjectNotFound(MygitError):
    """Raised when a hash cannot be resolved in the object store."""

    def __init__(self, kind: str, digest: str) -> None:
        super().__init__(f"{kind} object not found: {digest}")
        self.kind = kind
        self.digest = digest


class CorruptObject(MygitError):
    """Raised when a stored record cannot be parsed back into a model."""


class ChainIntegrityError(MygitError):
    """Raised when a commit chain fails verification."""


class RepositoryLocked(MygitError):
    """Raised when another writer holds the repository lock."""


class BranchExists(MygitError):
    """Raised when creating a branch whose name is already registered."""


class BranchNotFound(MygitError):
    """Raised when a branch name is not in the registry."""


class InvalidBranchName(MygitError):
    """Raised for empty branch names or names containing separators."""
