"""End-to-end collection of documentation descriptions.

``collect_docs`` is the pipeline entry point: discover candidates, filter them
by the configured patterns, read each match and extract its description.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from pathlib import Path

from microdoc.globbing import PatternSet
from microdoc.io import read_text_file
from microdoc.model import DiscoveredFile, DocEntry
from microdoc.parsers import extract_description
from microdoc.scanner.discovery import discover_candidates

logger = logging.getLogger(__name__)


def collect_docs(*, root: Path, patterns: PatternSet) -> list[DocEntry]:
    """Return one entry per matching file, sorted by relative path."""
    if not patterns:
        return []

    started_at = time.perf_counter()
    candidates = discover_candidates(root, patterns.static_prefixes())
    matched = select_paths(candidates, patterns)

    entries: list[DocEntry] = []
    for rel_path in matched:
        try:
            is_file = (root / rel_path).is_file()
        except OSError as exc:
            logger.warning("Cannot stat %s: %s", rel_path, exc)
            entries.append(DocEntry(path=rel_path))
            continue
        if not is_file:
            logger.debug("Skipping missing or non-regular file: %s", rel_path)
            continue
        discovered = read_discovered_file(root, rel_path)
        if discovered is None:
            entries.append(DocEntry(path=rel_path))
            continue
        entries.append(DocEntry(path=rel_path, description=extract_description(discovered.text)))

    logger.debug(
        "Collected %d docs from %d candidates in %.1fms",
        len(entries),
        len(candidates),
        (time.perf_counter() - started_at) * 1000,
    )
    return entries


def select_paths(candidates: Iterable[str], patterns: PatternSet) -> list[str]:
    """Filter *candidates* by *patterns*, de-duplicated and sorted."""
    return sorted({path for path in candidates if patterns.matches(path)})


def read_discovered_file(root: Path, rel_path: str) -> DiscoveredFile | None:
    """Load a matched file, or None when its text is unavailable."""
    text = read_text_file(root / rel_path)
    if text is None:
        return None
    return DiscoveredFile(path=rel_path, text=text)
