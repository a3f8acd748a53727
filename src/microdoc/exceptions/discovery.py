"""Discovery-related exceptions."""

from __future__ import annotations

from microdoc.exceptions.base import MicrodocError


class DiscoveryError(MicrodocError, RuntimeError):
    """Raised when the version-control file listing is unavailable."""
