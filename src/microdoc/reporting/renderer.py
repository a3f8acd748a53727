"""Render collected documentation entries as an XML-style context block."""

from __future__ import annotations

from collections.abc import Sequence

from microdoc.constants.branding import ATTRIBUTION
from microdoc.constants.reporting import (
    DOC_TAG,
    DOCS_TAG,
    INSTRUCTION_LINES,
    INSTRUCTIONS_TAG,
    ROOT_TAG,
    XML_ATTR_ESCAPES,
    XML_TEXT_ESCAPES,
)
from microdoc.model import DocEntry


def xml_escape(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for element content."""
    return _replace_all(text, XML_TEXT_ESCAPES)


def xml_escape_attr(text: str) -> str:
    """Escape text for a double-quoted attribute value."""
    return _replace_all(text, XML_ATTR_ESCAPES)


def render_docs(entries: Sequence[DocEntry]) -> str | None:
    """Render *entries* in order, or return None when there are none."""
    if not entries:
        return None

    lines: list[str] = [
        f'<{ROOT_TAG} source="{xml_escape_attr(ATTRIBUTION)}">',
        f"<{INSTRUCTIONS_TAG}>",
        *INSTRUCTION_LINES,
        f"</{INSTRUCTIONS_TAG}>",
        "",
        f"<{DOCS_TAG}>",
    ]
    lines.extend(render_entry(entry) for entry in entries)
    lines.append(f"</{DOCS_TAG}>")
    lines.append(f"</{ROOT_TAG}>")
    return "\n".join(lines) + "\n"


def render_entry(entry: DocEntry) -> str:
    """Render one entry; entries without a description use the empty-element form."""
    path_attr = f'path="{xml_escape_attr(entry.path)}"'
    if not entry.has_description:
        return f"<{DOC_TAG} {path_attr}/>"
    return f"<{DOC_TAG} {path_attr}>{xml_escape(entry.description or '')}</{DOC_TAG}>"


def _replace_all(text: str, replacements: tuple[tuple[str, str], ...]) -> str:
    for needle, replacement in replacements:
        text = text.replace(needle, replacement)
    return text
