"""Command line interface for Microdoc."""
