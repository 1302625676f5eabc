"""Tests for ObjectStore — idempotence, partitioning, content addressing."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from mygit.core.errors import CorruptObject, ObjectNotFound
from mygit.core.hasher import hash_record, sha256_hex
from mygit.core.object_store import BLOB, COMMIT, TREE, ObjectStore
from mygit.models.objects import Commit, Tree


class TestObjectStore:
    def test_layout_created(self, store: ObjectStore):
        for subdir in ("files", "trees", "commits"):
            assert (store.base_path / subdir).is_dir()

    def test_put_and_get_blob(self, store: ObjectStore):
        digest = store.put_blob(b"hello mygit")
        assert digest == sha256_hex(b"hello mygit")
        assert store.get_blob(digest) == b"hello mygit"
        assert (store.base_path / "files" / digest).is_file()

    def test_put_blob_idempotent(self, store: ObjectStore):
        first = store.put_blob_if_new(b"twice")
        second = store.put_blob_if_new(b"twice")
        assert first == (sha256_hex(b"twice"), True)
        assert second == (sha256_hex(b"twice"), False)

    def test_existing_object_not_rewritten(self, store: ObjectStore):
        digest = store.put_blob(b"keep")
        path = store.object_path(BLOB, digest)
        mtime = path.stat().st_mtime_ns
        store.put_blob(b"keep")
        assert path.stat().st_mtime_ns == mtime

    def test_tree_round_trip(self, store: ObjectStore):
        tree = Tree.from_mapping({"b.txt": "2" * 64, "a.txt": "1" * 64})
        digest = store.put_tree(tree)
        assert digest == hash_record("tree", tree.to_payload())
        assert store.object_path(TREE, digest).name == f"{digest}.json"
        assert store.get_tree(digest) == tree

    def test_identical_trees_share_one_object(self, store: ObjectStore):
        a = store.put_tree(Tree.from_mapping({"x": "1", "y": "2"}))
        b = store.put_tree(Tree.from_mapping({"y": "2", "x": "1"}))
        assert a == b
        assert len(list((store.base_path / "trees").iterdir())) == 1

    def test_commit_round_trip(self, store: ObjectStore):
        commit = Commit(
            tree="t" * 64,
            parent=None,
            author="Test Author",
            date=datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc),
            message="init commit",
        )
        digest = store.put_commit(commit)
        assert store.get_commit(digest) == commit
        assert store.verify(COMMIT, digest) is True

    def test_kinds_are_partitioned(self, store: ObjectStore):
        digest = store.put_blob(b"only a blob")
        assert store.exists(BLOB, digest) is True
        assert store.exists(TREE, digest) is False
        assert store.exists(COMMIT, digest) is False

    def test_missing_blob_raises(self, store: ObjectStore):
        with pytest.raises(ObjectNotFound) as info:
            store.get_blob("0" * 64)
        assert info.value.kind == BLOB

    def test_missing_tree_raises(self, store: ObjectStore):
        with pytest.raises(ObjectNotFound):
            store.get_tree("0" * 64)

    def test_missing_commit_raises(self, store: ObjectStore):
        with pytest.raises(ObjectNotFound):
            store.get_commit("0" * 64)

    def test_tree_read_as_commit_rejected(self, store: ObjectStore):
        digest = store.put_tree(Tree())
        target = store.object_path(COMMIT, digest)
        target.write_bytes(store.object_path(TREE, digest).read_bytes())
        with pytest.raises(CorruptObject, match="wrong kind"):
            store.get_commit(digest)

    def test_unknown_kind(self, store: ObjectStore):
        with pytest.raises(ValueError):
            store.object_path("tag", "0" * 64)
        with pytest.raises(ValueError):
            store.put_record(BLOB, {})

    def test_verify_nonexistent(self, store: ObjectStore):
        assert store.verify(BLOB, "nonexistent") is False

    def test_put_over_tampered_object_raises(self, store: ObjectStore):
        digest = store.put_blob(b"original")
        store.object_path(BLOB, digest).write_bytes(b"truncat")
        with pytest.raises(CorruptObject, match="integrity"):
            store.put_blob(b"original")
        assert store.get_blob(digest) == b"truncat"
