"""Tests for settings — env-driven author and layout defaults."""

from __future__ import annotations

import pytest

from mygit.config import DEFAULT_AUTHOR, MygitSettings


class TestMygitSettings:
    def test_layout_defaults(self):
        s = MygitSettings(_env_file=None)
        assert s.metadata_dir == ".mygit"
        assert s.ignore_file == ".mygitignore"
        assert s.default_branch == "master"
        assert s.default_message == "new commit"

    def test_author_from_user(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("MYGIT_AUTHOR", raising=False)
        monkeypatch.setenv("USER", "alice")
        assert MygitSettings(_env_file=None).author == "alice"

    def test_explicit_author_env_wins(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("USER", "alice")
        monkeypatch.setenv("MYGIT_AUTHOR", "Alice Example")
        assert MygitSettings(_env_file=None).author == "Alice Example"

    def test_author_fallback(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("MYGIT_AUTHOR", raising=False)
        monkeypatch.delenv("USER", raising=False)
        assert MygitSettings(_env_file=None).author == DEFAULT_AUTHOR

    def test_author_by_field_name(self):
        assert MygitSettings(author="bob", _env_file=None).author == "bob"

    def test_default_branch_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MYGIT_DEFAULT_BRANCH", "main")
        assert MygitSettings(_env_file=None).default_branch == "main"
