"""Entities passed between discovery, extraction and rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiscoveredFile:
    """A matched documentation file and its full text."""

    path: str
    text: str


@dataclass(frozen=True)
class DocEntry:
    """One rendered documentation entry."""

    path: str
    description: str | None = None

    @property
    def has_description(self) -> bool:
        return bool(self.description)
