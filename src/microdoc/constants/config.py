"""Configuration defaults, filenames and environment variable names."""

from __future__ import annotations

CONFIG_FILENAME: str = "microdoc.yaml"
DEFAULT_GLOB: str = "docs/**/*.{md,mdc}"

ENV_PROJECT_DIR: str = "CLAUDE_PROJECT_DIR"
ENV_DISABLED: str = "CLAUDE_MICRODOC_DISABLED"
ENV_GLOB: str = "CLAUDE_MICRODOC_GLOB"
ENV_DISABLED_VALUE: str = "1"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"disabled", "glob"})
