"""Root exception type."""

from __future__ import annotations


class MicrodocError(Exception):
    """Base class for all Microdoc errors."""
