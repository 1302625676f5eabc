"""Shared test fixtures for mygit."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mygit.config import MygitSettings
from mygit.core.object_store import ObjectStore
from mygit.core.repository import Repository


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def settings() -> MygitSettings:
    """Deterministic settings, isolated from any .env file."""
    return MygitSettings(author="Test Author", _env_file=None)


@pytest.fixture
def store(tmp_dir: Path) -> ObjectStore:
    """Provide a fresh ObjectStore in a temp directory."""
    return ObjectStore(tmp_dir / "objects")


@pytest.fixture
def work_dir(tmp_dir: Path) -> Path:
    """An empty working root."""
    root = tmp_dir / "work"
    root.mkdir()
    return root


@pytest.fixture
def repo(work_dir: Path, settings: MygitSettings) -> Repository:
    """Provide a freshly initialized repository in ``work_dir``."""
    return Repository.init(work_dir, settings)


@pytest.fixture
def write_files() -> Callable[..., None]:
    """Factory fixture: write ``{relative_path: content}`` under a root."""

    def _write(root: Path, files: dict[str, str | bytes]) -> None:
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")

    return _write


@pytest.fixture
def object_count() -> Callable[[Repository, str], int]:
    """Factory fixture: count stored objects of one kind (files, trees, commits)."""

    def _count(repo: Repository, subdir: str) -> int:
        directory = repo.metadata_dir / "objects" / subdir
        return sum(1 for p in directory.iterdir() if p.is_file() and not p.name.startswith("."))

    return _count
