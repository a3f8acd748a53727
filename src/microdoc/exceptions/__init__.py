"""Shared exception hierarchy for Microdoc."""

from __future__ import annotations

from .base import MicrodocError
from .config import ConfigError
from .discovery import DiscoveryError

__all__ = ["ConfigError", "DiscoveryError", "MicrodocError"]
