"""Tests for the object and history models — validation, immutability."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from mygit.models.history import HistoryEntry
from mygit.models.objects import Commit, Tree, TreeEntry
from mygit.models.status import WorkingTreeStatus


class TestTree:
    def test_entries_sorted_by_path(self):
        tree = Tree.from_mapping({"b.txt": "2", "a.txt": "1", "dir/c.txt": "3"})
        assert [e.file for e in tree.entries] == ["a.txt", "b.txt", "dir/c.txt"]

    def test_duplicate_paths_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            Tree(entries=[TreeEntry(file="a", hash="1"), TreeEntry(file="a", hash="2")])

    def test_absolute_path_rejected(self):
        with pytest.raises(ValidationError):
            TreeEntry(file="/etc/passwd", hash="1")

    def test_payload_independent_of_insertion_order(self):
        a = Tree.from_mapping({"x": "1", "y": "2"})
        b = Tree.from_mapping({"y": "2", "x": "1"})
        assert a.to_payload() == b.to_payload()

    def test_as_mapping_round_trip(self):
        mapping = {"a.txt": "h1", "b.txt": "h2"}
        assert Tree.from_mapping(mapping).as_mapping() == mapping

    def test_frozen(self):
        tree = Tree()
        with pytest.raises(ValidationError):
            tree.entries = []


class TestCommit:
    def test_root_commit_has_no_parent(self):
        c = Commit(tree="t", author="a", message="m")
        assert c.parent is None

    def test_payload_serializes_date_as_string(self):
        when = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        payload = Commit(tree="t", author="a", date=when, message="m").to_payload()
        assert isinstance(payload["date"], str)
        assert payload["parent"] is None

    def test_frozen(self):
        c = Commit(tree="t", author="a", message="m")
        with pytest.raises(ValidationError):
            c.message = "changed"


class TestHistoryEntry:
    def test_parent_optional(self):
        entry = HistoryEntry(commit="c", date=datetime.now(timezone.utc))
        assert entry.parent is None


class TestWorkingTreeStatus:
    def test_clean(self):
        assert WorkingTreeStatus(branch="master").is_clean is True

    def test_dirty(self):
        assert WorkingTreeStatus(branch="master", removed=["a"]).is_clean is False
