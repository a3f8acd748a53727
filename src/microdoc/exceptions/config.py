"""Configuration-related exceptions."""

from __future__ import annotations

from microdoc.exceptions.base import MicrodocError


class ConfigError(MicrodocError, ValueError):
    """Raised when Microdoc configuration is invalid."""
