"""Core data models for Microdoc."""

from .entities import DiscoveredFile, DocEntry

__all__ = ["DiscoveredFile", "DocEntry"]
