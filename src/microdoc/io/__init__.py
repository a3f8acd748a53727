"""Shared file I/O helpers."""

from .files import read_text_file

__all__ = ["read_text_file"]
