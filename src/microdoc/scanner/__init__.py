"""Discovery and collection pipeline."""

from __future__ import annotations

from .discovery import discover_candidates, list_git_files, walk_files
from .orchestrator import collect_docs, select_paths

__all__ = ["collect_docs", "discover_candidates", "list_git_files", "select_paths", "walk_files"]
