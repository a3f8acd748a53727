"""Parsers for documentation file metadata."""

from __future__ import annotations

from .frontmatter import extract_description

__all__ = ["extract_description"]
