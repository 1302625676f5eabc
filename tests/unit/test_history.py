"""Tests for the append-only History Index."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from mygit.core.errors import CorruptObject
from mygit.core.history import HistoryIndex
from mygit.models.history import HistoryEntry


@pytest.fixture
def index(tmp_dir: Path) -> HistoryIndex:
    idx = HistoryIndex(tmp_dir)
    idx.initialize()
    return idx


class TestHistoryIndex:
    def test_initialized_empty(self, index: HistoryIndex):
        assert json.loads(index.path.read_text()) == []
        assert index.entries() == []

    def test_append_preserves_order(self, index: HistoryIndex):
        when = datetime(2026, 10, 18, tzinfo=timezone.utc)
        index.append(HistoryEntry(commit="c1", parent=None, date=when))
        index.append(HistoryEntry(commit="c2", parent="c1", date=when))
        assert [e.commit for e in index.entries()] == ["c1", "c2"]
        assert index.entries()[1].parent == "c1"

    def test_on_disk_shape(self, index: HistoryIndex):
        when = datetime(2026, 10, 18, tzinfo=timezone.utc)
        index.append(HistoryEntry(commit="c1", parent=None, date=when))
        (raw,) = json.loads(index.path.read_text())
        assert set(raw) == {"commit", "parent", "date"}
        assert raw["parent"] is None

    def test_initialize_keeps_existing(self, index: HistoryIndex):
        index.append(HistoryEntry(commit="c1", date=datetime.now(timezone.utc)))
        index.initialize()
        assert len(index.entries()) == 1

    def test_corrupt_index(self, index: HistoryIndex):
        index.path.write_text("{not json")
        with pytest.raises(CorruptObject):
            index.entries()
