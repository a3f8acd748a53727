"""Constants for the rendered documentation context block."""

from __future__ import annotations

ROOT_TAG: str = "microdoc"
DOCS_TAG: str = "docs"
DOC_TAG: str = "doc"
INSTRUCTIONS_TAG: str = "instructions"

INSTRUCTION_LINES: tuple[str, ...] = (
    "Project documentation is available as markdown files with YAML frontmatter descriptions.",
    "Consult relevant docs before making architectural suggestions or implementation decisions.",
    "When a doc's description overlaps with the current task, use Read to load its full content before proceeding.",
)

# Ampersand must come first so later replacements are not re-escaped.
XML_TEXT_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)
XML_ATTR_ESCAPES: tuple[tuple[str, str], ...] = (*XML_TEXT_ESCAPES, ('"', "&quot;"))
