"""Tree differ: decide what a commit must store and build the next tree.

The parent tree is a full ``path -> blob hash`` snapshot. Only paths that
are new or whose content hash moved since the parent are re-hashed into
the store; everything else is carried over from the parent tree.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from mygit.core.hasher import hash_file
from mygit.core.ignore import filter_ignored
from mygit.models.objects import Tree

logger = logging.getLogger(__name__)


def _parent_mapping(parent_tree: Tree | Mapping[str, str] | None) -> dict[str, str] | None:
    if parent_tree is None:
        return None
    if isinstance(parent_tree, Tree):
        return parent_tree.as_mapping()
    return dict(parent_tree)


def files_to_commit(
    root: Path,
    scanned: Iterable[str],
    ignore_set: Iterable[str],
    parent_tree: Tree | Mapping[str, str] | None,
) -> list[str]:
    """Return the changed or added paths, in scan order.

    1. Ignored paths are dropped.
    2. Without a parent tree every remaining path is returned.
    3. Otherwise a path is returned when it is absent from the parent tree
       or its current content hash differs from the parent's.

    Paths present in the parent tree but missing from ``scanned`` are not
    reported; see ``removed_paths``.
    """
    root = Path(root)
    candidates = filter_ignored(scanned, ignore_set)
    previous = _parent_mapping(parent_tree)
    if previous is None:
        return candidates

    changed: list[str] = []
    for path in candidates:
        known = previous.get(path)
        if known is None or hash_file(root / path) != known:
            changed.append(path)
    logger.debug("%d of %d paths changed or added", len(changed), len(candidates))
    return changed


def build_tree(
    scanned: Iterable[str],
    ignore_set: Iterable[str],
    parent_tree: Tree | Mapping[str, str] | None,
    fresh: Mapping[str, str],
) -> Tree:
    """Build the full tree for the next commit.

    ``fresh`` maps each changed or added path to its newly computed blob
    hash. Unchanged paths keep their parent hash; parent paths no longer
    on disk or now ignored are dropped.
    """
    previous = _parent_mapping(parent_tree) or {}

    mapping: dict[str, str] = {}
    for path in filter_ignored(scanned, ignore_set):
        if path in fresh:
            mapping[path] = fresh[path]
        elif path in previous:
            mapping[path] = previous[path]
        else:
            raise ValueError(f"No blob hash for new path {path!r}")
    return Tree.from_mapping(mapping)


def removed_paths(
    scanned: Iterable[str],
    ignore_set: Iterable[str],
    parent_tree: Tree | Mapping[str, str] | None,
) -> list[str]:
    """Parent-tree paths that are gone from the filtered scan, sorted."""
    previous = _parent_mapping(parent_tree)
    if not previous:
        return []
    present = set(filter_ignored(scanned, ignore_set))
    return sorted(path for path in previous if path not in present)
