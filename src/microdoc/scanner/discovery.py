"""Candidate file discovery via git, with a filesystem walk fallback."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable
from pathlib import Path

from microdoc.constants.discovery import GIT_LS_FILES_COMMAND, GIT_OUTPUT_SEPARATOR, SKIP_DIRS
from microdoc.constants.globbing import PATH_SEPARATOR
from microdoc.exceptions import DiscoveryError

logger = logging.getLogger(__name__)


def discover_candidates(root: Path, prefixes: Iterable[str]) -> list[str]:
    """Return candidate relative POSIX paths under *root*.

    Tracked plus untracked-but-not-ignored files are listed through git. When
    git is unavailable, every file under the ``root/prefix`` directories is
    collected instead. Callers must still filter the result by pattern.
    """
    try:
        return list_git_files(root)
    except DiscoveryError as exc:
        logger.debug("Falling back to filesystem walk: %s", exc)

    candidates: list[str] = []
    for prefix in prefixes:
        # An absolute prefix is still joined under the root.
        directory = root / prefix.lstrip(PATH_SEPARATOR)
        if not directory.is_dir():
            continue
        candidates.extend(_relative_key(path, root) for path in walk_files(directory))
    return candidates


def list_git_files(root: Path) -> list[str]:
    """List tracked and untracked-but-not-ignored files relative to *root*."""
    try:
        completed = subprocess.run(
            GIT_LS_FILES_COMMAND,
            cwd=root,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )
    except FileNotFoundError as exc:
        raise DiscoveryError(f"git executable not found: {exc}") from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        raise DiscoveryError(f"git ls-files failed in {root}: {detail}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DiscoveryError(f"git ls-files could not run in {root}: {exc}") from exc

    return [entry for entry in completed.stdout.split(GIT_OUTPUT_SEPARATOR) if entry]


def walk_files(directory: Path) -> list[Path]:
    """Recursively list regular files below *directory*, skipping build dirs."""
    results: list[Path] = []
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", directory, exc)
        return results

    for entry in entries:
        if entry.name in SKIP_DIRS:
            continue
        try:
            if entry.is_symlink():
                continue
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
        except OSError as exc:
            logger.debug("Skipping unreadable entry %s: %s", entry, exc)
            continue
        if is_dir:
            results.extend(walk_files(entry))
        elif is_file:
            results.append(entry)
    return results


def _relative_key(path: Path, root: Path) -> str:
    return path.relative_to(root, walk_up=True).as_posix()
