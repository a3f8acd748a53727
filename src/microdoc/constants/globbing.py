"""Constants for glob pattern compilation."""

from __future__ import annotations

PATH_SEPARATOR: str = "/"
PATTERN_SEPARATOR: str = ","
GROUP_OPEN: str = "{"
GROUP_CLOSE: str = "}"

# Characters that end the wildcard-free prefix of a pattern.
WILDCARD_CHARS: frozenset[str] = frozenset("*?{[")

# Rendered regex fragments for each wildcard node.
DEPTH_SPAN_REGEX: str = "(?:.*/)?"
ANY_SPAN_REGEX: str = ".*"
SEGMENT_SPAN_REGEX: str = "[^/]*"
ANY_CHAR_REGEX: str = "[^/]"
