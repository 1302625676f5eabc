"""mygit: a minimal local version-control engine.

Snapshots a working directory into immutable, content-addressed objects
(blobs, trees, commits) and links snapshots into a per-branch commit chain:
  - SHA-256 content addressing with versioned canonical JSON records
  - Blob deduplication across files and commits
  - Full-snapshot trees built incrementally from the parent tree
  - Append-only, parent-linked history per branch
  - Lock-guarded branch heads and History Index
"""

__version__ = "0.1.0"
__description__ = "Minimal local version control with content-addressed snapshots"

from mygit.core.repository import Repository
from mygit.cli.app import app as cli

__all__ = ["Repository", "cli", "__version__"]
