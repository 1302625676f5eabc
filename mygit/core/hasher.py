"""Canonical hashing helpers for blobs and structured records.

Blobs are addressed by the SHA-256 of their raw bytes. Trees and commits
are addressed by the SHA-256 of a versioned, tagged canonical JSON form,
so two logically identical records always share one digest.
"""

from __future__ import annotations

import hashlib
import json
import os
import stat
from pathlib import Path
from typing import Any

RECORD_VERSION = 1

RECORD_KINDS = ("tree", "commit")

_CHUNK_SIZE = 1024 * 1024


def canonical_json_bytes(obj: Any) -> bytes:
    """Produce canonical JSON bytes — deterministic, sorted, compact.

    - sorted keys
    - no whitespace separators (",", ":")
    - ensure_ascii=True
    - UTF-8 encoding
    """
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def record_bytes(kind: str, payload: dict[str, Any]) -> bytes:
    """Serialize a tree or commit payload into its tagged canonical form.

    The ``kind`` and ``version`` tags are folded into the hashed bytes so a
    tree and a commit can never share a digest, and a future format change
    cannot silently collide with version 1 records.
    """
    if kind not in RECORD_KINDS:
        raise ValueError(f"Unknown record kind: {kind!r}")
    if "kind" in payload or "version" in payload:
        raise ValueError("Record payload must not carry 'kind' or 'version' keys")
    return canonical_json_bytes({"kind": kind, "version": RECORD_VERSION, **payload})


def hash_record(kind: str, payload: dict[str, Any]) -> str:
    """SHA-256 of the tagged canonical form of a record."""
    return sha256_hex(record_bytes(kind, payload))


def hash_file(path: Path) -> str:
    """Digest of the bytes the object store would keep for a working file.

    Regular files are read in chunks. Anything else (symlinks, sockets,
    FIFOs) is opaque and contributes the empty byte string, matching
    ``scanner.read_working_file``.
    """
    path = Path(path)
    if not is_regular_file(path):
        return sha256_hex(b"")
    digest = hashlib.sha256()
    with path.open("rb") as fh:
        while chunk := fh.read(_CHUNK_SIZE):
            digest.update(chunk)
    return digest.hexdigest()


def is_regular_file(path: Path) -> bool:
    """True for regular files; never follows symlinks."""
    try:
        mode = os.lstat(path).st_mode
    except FileNotFoundError:
        return False
    return stat.S_ISREG(mode)
