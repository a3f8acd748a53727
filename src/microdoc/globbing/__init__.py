"""Glob pattern compilation and pattern-set helpers."""

from __future__ import annotations

from .compiler import GlobPattern, compile_glob, parse_glob, render_nodes
from .patterns import PatternSet, split_patterns, static_prefix

__all__ = [
    "GlobPattern",
    "PatternSet",
    "compile_glob",
    "parse_glob",
    "render_nodes",
    "split_patterns",
    "static_prefix",
]
