"""Constants for candidate file discovery."""

from __future__ import annotations

# Build and dependency directories never descended into by the filesystem walk.
SKIP_DIRS: frozenset[str] = frozenset(
    {".git", "node_modules", ".next", ".nuxt", "dist", "build", ".turbo", ".cache"}
)

GIT_LS_FILES_COMMAND: tuple[str, ...] = (
    "git",
    "ls-files",
    "--cached",
    "--others",
    "--exclude-standard",
    "-z",
)
GIT_OUTPUT_SEPARATOR: str = "\0"
