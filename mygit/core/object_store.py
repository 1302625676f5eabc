"""Content-addressed, immutable object store for blobs, trees and commits.

Storage layout (partitioned by kind so unrelated content spaces never
share a key)::

    {objects}/files/{sha256}
    {objects}/trees/{sha256}.json
    {objects}/commits/{sha256}.json

No delete method — objects are immutable once stored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mygit.core.errors import CorruptObject, ObjectNotFound
from mygit.core.hasher import RECORD_VERSION, record_bytes, sha256_hex
from mygit.core.locking import atomic_write_bytes
from mygit.models.objects import Commit, Tree

logger = logging.getLogger(__name__)

BLOB = "blob"
TREE = "tree"
COMMIT = "commit"

_KIND_DIRS: dict[str, tuple[str, str]] = {
    BLOB: ("files", ""),
    TREE: ("trees", ".json"),
    COMMIT: ("commits", ".json"),
}


class ObjectStore:
    """SHA-256 keyed, immutable object store.

    Every object is stored under the digest of its stored bytes. Storing
    the same content twice is a no-op (idempotent) once the existing copy
    re-hashes to its address. There is no update or delete.

    Parameters
    ----------
    objects_dir:
        The ``objects`` directory of a repository. Kind subdirectories are
        created if missing.
    """

    def __init__(self, objects_dir: Path) -> None:
        self._base = Path(objects_dir)
        for subdir, _ in _KIND_DIRS.values():
            (self._base / subdir).mkdir(parents=True, exist_ok=True)

    @property
    def base_path(self) -> Path:
        return self._base

    def object_path(self, kind: str, digest: str) -> Path:
        """Compute the storage path of an object of ``kind``."""
        try:
            subdir, suffix = _KIND_DIRS[kind]
        except KeyError:
            raise ValueError(f"Unknown object kind: {kind!r}") from None
        return self._base / subdir / f"{digest}{suffix}"

    # ------------------------------------------------------------------
    # Store
    # ------------------------------------------------------------------

    def _put(self, kind: str, data: bytes) -> tuple[str, bool]:
        digest = sha256_hex(data)
        path = self.object_path(kind, digest)
        if path.exists():
            if not self.verify(kind, digest):
                raise CorruptObject(
                    f"Existing {kind} {digest} failed integrity check"
                )
            return digest, False
        atomic_write_bytes(path, data)
        logger.debug("Stored %s %s (%d bytes)", kind, digest, len(data))
        return digest, True

    def put_blob(self, data: bytes) -> str:
        """Store raw file bytes and return their digest."""
        digest, _ = self._put(BLOB, data)
        return digest

    def put_blob_if_new(self, data: bytes) -> tuple[str, bool]:
        """Store raw file bytes; also report whether a new object was written."""
        return self._put(BLOB, data)

    def put_record(self, kind: str, payload: dict[str, Any]) -> str:
        """Store a tree or commit payload in its canonical tagged form."""
        if kind not in (TREE, COMMIT):
            raise ValueError(f"Records must be {TREE!r} or {COMMIT!r}, got {kind!r}")
        digest, _ = self._put(kind, record_bytes(kind, payload))
        return digest

    def put_tree(self, tree: Tree) -> str:
        return self.put_record(TREE, tree.to_payload())

    def put_commit(self, commit: Commit) -> str:
        return self.put_record(COMMIT, commit.to_payload())

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    def read_raw(self, kind: str, digest: str) -> bytes:
        """Return the stored bytes of an object.

        Raises ``ObjectNotFound`` if the object is missing; a reference to
        a missing object means the repository is corrupt.
        """
        path = self.object_path(kind, digest)
        if not path.is_file():
            raise ObjectNotFound(kind, digest)
        return path.read_bytes()

    def get_blob(self, digest: str) -> bytes:
        return self.read_raw(BLOB, digest)

    def get_tree(self, digest: str) -> Tree:
        """Load a tree record as an ordered list of ``(file, hash)`` entries."""
        payload = self._load_record(TREE, digest)
        try:
            return Tree.model_validate(payload)
        except ValidationError as exc:
            raise CorruptObject(f"Tree {digest} is malformed: {exc}") from exc

    def get_commit(self, digest: str) -> Commit:
        payload = self._load_record(COMMIT, digest)
        try:
            return Commit.model_validate(payload)
        except ValidationError as exc:
            raise CorruptObject(f"Commit {digest} is malformed: {exc}") from exc

    def _load_record(self, kind: str, digest: str) -> dict[str, Any]:
        raw = self.read_raw(kind, digest)
        try:
            record = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CorruptObject(f"{kind} {digest} is not valid JSON") from exc
        if not isinstance(record, dict):
            raise CorruptObject(f"{kind} {digest} is not a record")
        if record.pop("kind", None) != kind:
            raise CorruptObject(f"{kind} {digest} carries the wrong kind tag")
        version = record.pop("version", None)
        if version != RECORD_VERSION:
            raise CorruptObject(
                f"{kind} {digest} has unsupported record version {version!r}"
            )
        return record

    # ------------------------------------------------------------------
    # Check and verify
    # ------------------------------------------------------------------

    def exists(self, kind: str, digest: str) -> bool:
        """Check if an object exists in the store."""
        return self.object_path(kind, digest).is_file()

    def verify(self, kind: str, digest: str) -> bool:
        """Re-hash stored bytes and compare against the address.

        Returns True if the stored bytes match the expected hash.
        """
        path = self.object_path(kind, digest)
        if not path.is_file():
            return False
        return sha256_hex(path.read_bytes()) == digest
