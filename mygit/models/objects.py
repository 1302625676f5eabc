"""Immutable object records: tree entries, trees and commits.

Blobs have no model; they are raw bytes addressed by their SHA-256.
Trees and commits are serialized through ``hasher.record_bytes`` and
addressed by the digest of that canonical form.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TreeEntry(BaseModel):
    """One tracked file: POSIX-style path relative to the working root."""

    model_config = ConfigDict(frozen=True)

    file: str
    hash: str  # SHA-256 hex of the blob

    @field_validator("file")
    @classmethod
    def _relative_posix(cls, value: str) -> str:
        if not value or value.startswith("/"):
            raise ValueError(f"Tree paths must be relative POSIX paths, got {value!r}")
        return value


class Tree(BaseModel):
    """A total snapshot of every tracked file at one commit.

    Entries are kept sorted by path and paths are unique, so the canonical
    serialization of a tree depends only on its logical content.
    """

    model_config = ConfigDict(frozen=True)

    entries: list[TreeEntry] = []

    @field_validator("entries")
    @classmethod
    def _sorted_unique(cls, entries: list[TreeEntry]) -> list[TreeEntry]:
        ordered = sorted(entries, key=lambda e: e.file)
        for prev, cur in zip(ordered, ordered[1:]):
            if prev.file == cur.file:
                raise ValueError(f"Duplicate path in tree: {cur.file!r}")
        return ordered

    @classmethod
    def from_mapping(cls, mapping: dict[str, str]) -> Tree:
        return cls(entries=[TreeEntry(file=f, hash=h) for f, h in mapping.items()])

    def as_mapping(self) -> dict[str, str]:
        """Return the ``path -> blob hash`` view of this tree."""
        return {e.file: e.hash for e in self.entries}

    def to_payload(self) -> dict[str, Any]:
        return {"entries": [e.model_dump() for e in self.entries]}


class Commit(BaseModel):
    """A snapshot in the history of one branch.

    ``parent`` is ``None`` for the root commit of a history; otherwise it is
    the hash of a previously written commit. There are no merge commits.
    """

    model_config = ConfigDict(frozen=True)

    tree: str
    parent: str | None = None
    author: str
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    message: str

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
