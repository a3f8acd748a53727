"""Config data model for Microdoc runs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from microdoc.constants.config import DEFAULT_GLOB
from microdoc.globbing import PatternSet


@dataclass(frozen=True)
class MicrodocConfig:
    """Resolved run configuration."""

    project_dir: Path | None = None
    disabled: bool = False
    glob: str = DEFAULT_GLOB

    @property
    def enabled(self) -> bool:
        """Whether a run should produce output at all."""
        return self.project_dir is not None and not self.disabled

    @property
    def patterns(self) -> PatternSet:
        """Compiled patterns for the configured glob list."""
        return PatternSet.from_string(self.glob)
