"""Translate shell-style glob patterns into anchored path matchers.

A pattern is parsed left to right into a flat tuple of nodes, which is then
rendered to a Python regular expression. Matching is always against the whole
relative path, never a substring of it.

Supported syntax:

* ``**/`` matches zero or more leading path segments.
* ``**`` elsewhere matches any run of characters, separators included.
* ``*`` matches any run of characters inside one path segment.
* ``?`` matches exactly one character inside one path segment.
* ``{a,b}`` matches one of the literal alternatives. A ``{`` with no closing
  ``}`` is an ordinary character.

Every other character matches itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from re import Pattern

from microdoc.constants.globbing import (
    ANY_CHAR_REGEX,
    ANY_SPAN_REGEX,
    DEPTH_SPAN_REGEX,
    GROUP_CLOSE,
    GROUP_OPEN,
    PATH_SEPARATOR,
    PATTERN_SEPARATOR,
    SEGMENT_SPAN_REGEX,
)


@dataclass(frozen=True)
class LiteralText:
    """A run of characters that match themselves."""

    text: str


@dataclass(frozen=True)
class AnyChar:
    """``?``: one character within a path segment."""


@dataclass(frozen=True)
class SegmentSpan:
    """``*``: any run of characters within a path segment."""


@dataclass(frozen=True)
class AnySpan:
    """``**`` not followed by a separator: any run of characters."""


@dataclass(frozen=True)
class DepthSpan:
    """``**/``: zero or more whole path segments."""


@dataclass(frozen=True)
class Alternation:
    """``{a,b}``: exactly one of the literal options."""

    options: tuple[str, ...]


type GlobNode = LiteralText | AnyChar | SegmentSpan | AnySpan | DepthSpan | Alternation

_WILDCARD_REGEX: dict[type, str] = {
    AnyChar: ANY_CHAR_REGEX,
    SegmentSpan: SEGMENT_SPAN_REGEX,
    AnySpan: ANY_SPAN_REGEX,
    DepthSpan: DEPTH_SPAN_REGEX,
}


@dataclass(frozen=True)
class GlobPattern:
    """A compiled glob pattern."""

    source: str
    regex: Pattern[str] = field(repr=False, compare=False)

    def matches(self, path: str) -> bool:
        """Return True when *path* matches the whole pattern."""
        return self.regex.fullmatch(path) is not None


def compile_glob(pattern: str) -> GlobPattern:
    """Compile *pattern* into a matcher. Never raises for any input string."""
    expression = render_nodes(parse_glob(pattern))
    return GlobPattern(source=pattern, regex=re.compile(expression, re.DOTALL))


def parse_glob(pattern: str) -> tuple[GlobNode, ...]:
    """Parse *pattern* into glob nodes.

    Adjacent literal characters are merged, and runs of adjacent spans collapse
    to the single widest span so the rendered regex never stacks them.
    """
    nodes: list[GlobNode] = []
    index = 0
    length = len(pattern)

    while index < length:
        char = pattern[index]

        if pattern.startswith("**", index):
            if pattern.startswith(PATH_SEPARATOR, index + 2):
                _append_span(nodes, DepthSpan())
                index += 3
            else:
                _append_span(nodes, AnySpan())
                index += 2
            continue

        if char == "*":
            _append_span(nodes, SegmentSpan())
        elif char == "?":
            nodes.append(AnyChar())
        elif char == GROUP_OPEN and (close := pattern.find(GROUP_CLOSE, index + 1)) != -1:
            nodes.append(Alternation(tuple(split_top_level(pattern[index + 1 : close]))))
            index = close
        else:
            _append_literal(nodes, char)
        index += 1

    return tuple(nodes)


def render_nodes(nodes: tuple[GlobNode, ...]) -> str:
    """Render parsed nodes as a Python regular expression body."""
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, LiteralText):
            parts.append(re.escape(node.text))
        elif isinstance(node, Alternation):
            parts.append("(?:" + "|".join(re.escape(option) for option in node.options) + ")")
        else:
            parts.append(_WILDCARD_REGEX[type(node)])
    return "".join(parts)


def split_top_level(text: str) -> list[str]:
    """Split *text* on commas outside ``{...}`` groups, keeping empty pieces."""
    pieces: list[str] = []
    current: list[str] = []
    depth = 0

    for char in text:
        if char == GROUP_OPEN:
            depth += 1
        elif char == GROUP_CLOSE:
            depth -= 1

        if char == PATTERN_SEPARATOR and depth == 0:
            pieces.append("".join(current))
            current = []
        else:
            current.append(char)

    pieces.append("".join(current))
    return pieces


def _append_literal(nodes: list[GlobNode], char: str) -> None:
    if nodes and isinstance(nodes[-1], LiteralText):
        nodes[-1] = LiteralText(nodes[-1].text + char)
    else:
        nodes.append(LiteralText(char))


def _append_span(nodes: list[GlobNode], span: SegmentSpan | AnySpan | DepthSpan) -> None:
    previous = nodes[-1] if nodes else None
    if isinstance(span, AnySpan):
        while nodes and isinstance(nodes[-1], (SegmentSpan, AnySpan, DepthSpan)):
            nodes.pop()
        nodes.append(span)
    elif isinstance(previous, AnySpan) or type(previous) is type(span):
        return
    else:
        nodes.append(span)
