"""Reporting package for Microdoc output."""

from __future__ import annotations

from .renderer import render_docs, render_entry, xml_escape, xml_escape_attr

__all__ = ["render_docs", "render_entry", "xml_escape", "xml_escape_attr"]
