"""Repository: init, discovery, and the scan -> diff -> store -> commit cycle.

The working root is passed explicitly to the scanner and differ. Only
``init`` and ``discover`` fall back to the process working directory.

Metadata layout::

    <root>/.mygit/
        objects/files/<sha256>
        objects/trees/<sha256>.json
        objects/commits/<sha256>.json
        branches/<name>
        config
        root.json
        lock            (only while a writer holds the repository)
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from mygit.config import MygitSettings, settings as default_settings
from mygit.core.differ import build_tree, files_to_commit, removed_paths
from mygit.core.errors import ChainIntegrityError, InvalidPath, NotARepository
from mygit.core.history import HistoryIndex
from mygit.core.ignore import load_ignore_set
from mygit.core.locking import RepositoryLock
from mygit.core.object_store import BLOB, COMMIT, TREE, ObjectStore
from mygit.core.refs import BranchRegistry
from mygit.core.scanner import read_working_file, scan
from mygit.models.history import HistoryEntry
from mygit.models.objects import Commit, Tree
from mygit.models.status import CommitResult, WorkingTreeStatus

logger = logging.getLogger(__name__)

OBJECTS_DIR = "objects"


class Repository:
    """A working root plus its ``.mygit`` metadata directory.

    Parameters
    ----------
    root:
        The working root (the directory that contains ``.mygit``).
    settings:
        Runtime settings; defaults to the module-level singleton.
    """

    def __init__(self, root: Path, settings: MygitSettings | None = None) -> None:
        self._settings = settings or default_settings
        self.root = Path(root).resolve()
        self.metadata_dir = self.root / self._settings.metadata_dir
        if not self.metadata_dir.is_dir():
            raise NotARepository(f"Not a mygit repository: {self.root}")
        self.store = ObjectStore(self.metadata_dir / OBJECTS_DIR)
        self.branches = BranchRegistry(self.metadata_dir)
        self.history = HistoryIndex(self.metadata_dir)
        self.lock = RepositoryLock(self.metadata_dir)

    # ------------------------------------------------------------------
    # Bootstrap and discovery
    # ------------------------------------------------------------------

    @classmethod
    def init(
        cls, path: Path | None = None, settings: MygitSettings | None = None
    ) -> Repository:
        """Create the metadata layout at ``path`` (default: cwd).

        The target directory is created if missing. Existing directories and
        files are left untouched, so re-running init never resets history.
        """
        settings = settings or default_settings
        target = Path(path) if path is not None else Path.cwd()
        if target.exists() and not target.is_dir():
            raise InvalidPath(f"Invalid path {target}: it is a file, not a directory")
        target.mkdir(parents=True, exist_ok=True)

        metadata_dir = target / settings.metadata_dir
        if metadata_dir.exists() and not metadata_dir.is_dir():
            raise InvalidPath(
                f"Invalid path {metadata_dir}: it is a file, not a directory"
            )
        metadata_dir.mkdir(exist_ok=True)
        ObjectStore(metadata_dir / OBJECTS_DIR)
        BranchRegistry(metadata_dir).initialize(settings.default_branch)
        HistoryIndex(metadata_dir).initialize()
        logger.info("Initialized repository at %s", target.resolve())
        return cls(target, settings)

    @classmethod
    def discover(
        cls, start: Path | None = None, settings: MygitSettings | None = None
    ) -> Repository:
        """Open the repository whose root is ``start`` or its nearest ancestor."""
        settings = settings or default_settings
        current = (Path(start) if start is not None else Path.cwd()).resolve()
        for candidate in (current, *current.parents):
            if (candidate / settings.metadata_dir).is_dir():
                return cls(candidate, settings)
        raise NotARepository(
            f"The current working directory is not a mygit repository: {current}"
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _scan(self) -> list[str]:
        return scan(self.root, self._settings.metadata_dir)

    def ignore_set(self) -> frozenset[str]:
        return load_ignore_set(self.root, self._settings.ignore_file)

    def head_tree(self, head: str | None) -> Tree | None:
        """Tree of commit ``head``, or None when the branch has no commits."""
        if head is None:
            return None
        return self.store.get_tree(self.store.get_commit(head).tree)

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def commit(self, message: str | None = None) -> CommitResult:
        """Snapshot the working tree onto the active branch.

        A commit with no changes still produces a new commit record; its
        tree deduplicates onto the parent's tree object.
        """
        with self.lock:
            branch = self.branches.active()
            parent = self.branches.head(branch)
            parent_tree = self.head_tree(parent)
            ignore_set = self.ignore_set()

            scanned = self._scan()
            changed = files_to_commit(self.root, scanned, ignore_set, parent_tree)
            logger.info("%d file(s) changed or added on %s", len(changed), branch)

            fresh: dict[str, str] = {}
            new_blobs: list[str] = []
            for path in changed:
                digest, written = self.store.put_blob_if_new(
                    read_working_file(self.root / path)
                )
                fresh[path] = digest
                if written:
                    new_blobs.append(digest)

            tree = build_tree(scanned, ignore_set, parent_tree, fresh)
            tree_hash = self.store.put_tree(tree)

            record = Commit(
                tree=tree_hash,
                parent=parent,
                author=self._settings.author,
                date=datetime.now(timezone.utc),
                message=message or self._settings.default_message,
            )
            commit_hash = self.store.put_commit(record)

            self.branches.set_head(branch, commit_hash)
            self.history.append(
                HistoryEntry(commit=commit_hash, parent=parent, date=record.date)
            )

        logger.info("Committed %s on %s (tree %s)", commit_hash, branch, tree_hash)
        return CommitResult(
            commit_hash=commit_hash,
            tree_hash=tree_hash,
            branch=branch,
            parent=parent,
            changed=changed,
            new_blobs=new_blobs,
        )

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def create_branch(self, name: str) -> str | None:
        """Create ``name`` at the active branch's head and return that head."""
        with self.lock:
            head = self.branches.head(self.branches.active())
            self.branches.create(name, head)
        return head

    def switch_branch(self, name: str) -> None:
        with self.lock:
            self.branches.switch(name)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def _resolve_head(self, branch: str | None) -> tuple[str, str | None]:
        branch = branch or self.branches.active()
        return branch, self.branches.head(branch)

    def log(self, branch: str | None = None) -> list[tuple[str, Commit]]:
        """Walk the parent chain from a branch head, newest first."""
        _, head = self._resolve_head(branch)
        chain: list[tuple[str, Commit]] = []
        seen: set[str] = set()
        current = head
        while current is not None:
            if current in seen:
                raise ChainIntegrityError(f"Cycle detected at commit {current}")
            seen.add(current)
            record = self.store.get_commit(current)
            chain.append((current, record))
            current = record.parent
        return chain

    def verify(self, branch: str | None = None) -> int:
        """Verify the chain reachable from a branch head.

        Every commit must exist and re-hash to its address, its tree and
        every blob the tree lists must be present and intact, and the chain
        must reach a root commit without revisiting any commit. Returns the
        number of commits checked; raises ``ChainIntegrityError`` otherwise.
        """
        branch, head = self._resolve_head(branch)
        seen: set[str] = set()
        current = head
        while current is not None:
            if current in seen:
                raise ChainIntegrityError(f"Cycle detected at commit {current}")
            seen.add(current)
            if not self.store.verify(COMMIT, current):
                raise ChainIntegrityError(f"Commit {current} is missing or tampered")
            record = self.store.get_commit(current)
            if not self.store.verify(TREE, record.tree):
                raise ChainIntegrityError(
                    f"Tree {record.tree} of commit {current} is missing or tampered"
                )
            for entry in self.store.get_tree(record.tree).entries:
                if not self.store.verify(BLOB, entry.hash):
                    raise ChainIntegrityError(
                        f"Blob {entry.hash} ({entry.file}) of commit {current} "
                        "is missing or tampered"
                    )
            current = record.parent
        logger.info("Verified %d commit(s) on %s", len(seen), branch)
        return len(seen)

    def status(self) -> WorkingTreeStatus:
        """Compare the working tree with the active branch head."""
        branch, head = self._resolve_head(None)
        parent_tree = self.head_tree(head)
        ignore_set = self.ignore_set()
        scanned = self._scan()

        touched = files_to_commit(self.root, scanned, ignore_set, parent_tree)
        known = parent_tree.as_mapping() if parent_tree is not None else {}
        return WorkingTreeStatus(
            branch=branch,
            head=head,
            changed=[p for p in touched if p in known],
            added=[p for p in touched if p not in known],
            removed=removed_paths(scanned, ignore_set, parent_tree),
        )

