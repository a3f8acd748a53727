"""Branding constants for the CLI and rendered output."""

from __future__ import annotations

BRAND_NAME: str = "microdoc"
CLI_DESCRIPTION: str = (
    "Collect the frontmatter descriptions of project documentation files "
    "and print them as a context block."
)
ATTRIBUTION: str = "microdoc plugin by Rafael Kallis"
