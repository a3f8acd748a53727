"""Partial frontmatter reader for the ``description`` field.

This is deliberately not a YAML decoder. Extraction walks four stages:

1. header seek: the text must open with ``---`` and a newline at offset 0 and
   contain a later newline followed by ``---``;
2. field seek: the first ``description:`` line in the header wins;
3. value dispatch: the raw value is classified as empty, quoted, literal block
   (``|``), folded block (``>``) or inline;
4. block collect: block forms gather the indented lines that follow.

Any other structure (mappings, sequences, anchors, comments) yields no value.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import Literal

from microdoc.constants.parsing import (
    BLOCK_SCALAR_PATTERN,
    DESCRIPTION_FIELD,
    FOLDED_INDICATOR,
    FRONTMATTER_CLOSE,
    FRONTMATTER_OPEN,
    LEADING_WHITESPACE_PATTERN,
    QUOTE_CHARS,
)

type ValueForm = Literal["empty", "quoted", "literal", "folded", "inline"]
type ValueDecoder = Callable[[str, Sequence[str]], str | None]


def extract_description(text: str) -> str | None:
    """Return the decoded ``description`` value, or None when absent or empty."""
    header = split_header(text)
    if header is None:
        return None

    lines = header.split("\n")
    found = find_field(lines, DESCRIPTION_FIELD)
    if found is None:
        return None

    index, raw_value = found
    decoder = _DECODERS[classify_value(raw_value)]
    return decoder(raw_value, lines[index + 1 :]) or None


def split_header(text: str) -> str | None:
    """Return the header body between the opening and closing markers."""
    if not text.startswith(FRONTMATTER_OPEN):
        return None
    start = len(FRONTMATTER_OPEN)
    end = text.find(FRONTMATTER_CLOSE, start)
    if end == -1:
        return None
    return text[start:end]


def find_field(lines: Sequence[str], name: str) -> tuple[int, str] | None:
    """Locate the first ``name:`` line and return its index and raw value."""
    pattern = re.compile(rf"^{re.escape(name)}:\s*([^\r]*)")
    for index, line in enumerate(lines):
        match = pattern.match(line)
        if match:
            return index, match.group(1)
    return None


def classify_value(raw_value: str) -> ValueForm:
    """Classify the text after the field colon into one of the value forms."""
    if not raw_value.strip():
        return "empty"
    if raw_value[0] in QUOTE_CHARS:
        return "quoted"
    if BLOCK_SCALAR_PATTERN.match(raw_value):
        return "folded" if raw_value.startswith(FOLDED_INDICATOR) else "literal"
    return "inline"


def collect_block(lines: Sequence[str]) -> list[str]:
    """Gather block scalar member lines with indentation removed.

    Indented and empty lines belong to the block; the first unindented line
    with content ends it. Trailing empty members are dropped.
    """
    members: list[str] = []
    for line in lines:
        if LEADING_WHITESPACE_PATTERN.match(line):
            members.append(LEADING_WHITESPACE_PATTERN.sub("", line, count=1))
        elif not line:
            members.append("")
        else:
            break

    while members and not members[-1]:
        members.pop()
    return members


def _decode_empty(raw_value: str, following: Sequence[str]) -> str | None:
    return None


def _decode_quoted(raw_value: str, following: Sequence[str]) -> str | None:
    return raw_value[1:-1]


def _decode_literal(raw_value: str, following: Sequence[str]) -> str | None:
    return "\n".join(collect_block(following))


def _decode_folded(raw_value: str, following: Sequence[str]) -> str | None:
    return " ".join(collect_block(following))


def _decode_inline(raw_value: str, following: Sequence[str]) -> str | None:
    return raw_value


_DECODERS: dict[ValueForm, ValueDecoder] = {
    "empty": _decode_empty,
    "quoted": _decode_quoted,
    "literal": _decode_literal,
    "folded": _decode_folded,
    "inline": _decode_inline,
}
