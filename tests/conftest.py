"""Shared pytest fixtures for documentation trees."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

type DocWriter = Callable[[str, str], Path]


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return an empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def write_doc(project_root: Path) -> DocWriter:
    """Return a helper that writes a file relative to the project root."""

    def _write(rel_path: str, content: str) -> Path:
        path = project_root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def git_root(project_root: Path) -> Path:
    """Return the project root initialised as a git work tree."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    for command in (
        ["git", "init", "-q"],
        ["git", "config", "user.email", "test@example.com"],
        ["git", "config", "user.name", "Test"],
    ):
        subprocess.run(command, cwd=project_root, check=True, capture_output=True)
    return project_root


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Clear Microdoc environment variables for the duration of a test."""
    for name in ("CLAUDE_PROJECT_DIR", "CLAUDE_MICRODOC_DISABLED", "CLAUDE_MICRODOC_GLOB"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def lock_dir() -> Iterator[Callable[[Path], Path]]:
    """Return a helper that makes a directory listable but not searchable."""
    if not hasattr(os, "geteuid") or os.geteuid() == 0:
        pytest.skip("directory permissions are not enforced for this user")
    locked: list[Path] = []

    def _lock(directory: Path) -> Path:
        directory.chmod(0o644)
        locked.append(directory)
        return directory

    yield _lock
    for directory in locked:
        directory.chmod(0o755)
