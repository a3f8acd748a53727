"""Constants for frontmatter description extraction."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_OPEN: str = "---\n"
FRONTMATTER_CLOSE: str = "\n---"
DESCRIPTION_FIELD: str = "description"

QUOTE_CHARS: frozenset[str] = frozenset({'"', "'"})
LITERAL_INDICATOR: str = "|"
FOLDED_INDICATOR: str = ">"

BLOCK_SCALAR_PATTERN: Pattern[str] = re.compile(r"^[|>][+-]?\s*$")
LEADING_WHITESPACE_PATTERN: Pattern[str] = re.compile(r"^\s+")
