"""Comma-separated pattern lists and static directory prefixes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from microdoc.constants.globbing import PATH_SEPARATOR, WILDCARD_CHARS
from microdoc.globbing.compiler import GlobPattern, compile_glob, split_top_level


def split_patterns(raw: str) -> list[str]:
    """Split a comma-separated pattern list, leaving commas inside braces alone.

    Pieces are stripped of surrounding whitespace and empty pieces are dropped.
    """
    return [piece for piece in (part.strip() for part in split_top_level(raw)) if piece]


def static_prefix(pattern: str) -> str:
    """Return the leading directory path of *pattern* that holds no wildcard.

    The result only bounds a directory walk; it is not a substitute for
    matching the compiled pattern.
    """
    end = len(pattern)
    for index, char in enumerate(pattern):
        if char in WILDCARD_CHARS:
            end = index
            break

    head = pattern[:end]
    last_separator = head.rfind(PATH_SEPARATOR)
    if last_separator == -1:
        return ""
    return head[:last_separator]


@dataclass(frozen=True)
class PatternSet:
    """Ordered collection of compiled glob patterns."""

    patterns: tuple[GlobPattern, ...] = ()

    @classmethod
    def from_string(cls, raw: str) -> PatternSet:
        """Build a pattern set from a comma-separated configuration string."""
        return cls(tuple(compile_glob(pattern) for pattern in split_patterns(raw)))

    @property
    def sources(self) -> tuple[str, ...]:
        """Original pattern strings, in order."""
        return tuple(pattern.source for pattern in self.patterns)

    def matches(self, path: str) -> bool:
        """Return True when any pattern matches *path*."""
        return any(pattern.matches(path) for pattern in self.patterns)

    def static_prefixes(self) -> tuple[str, ...]:
        """Distinct static prefixes of all patterns, in first-seen order."""
        return tuple(dict.fromkeys(static_prefix(source) for source in self.sources))

    def __iter__(self) -> Iterator[GlobPattern]:
        return iter(self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)
