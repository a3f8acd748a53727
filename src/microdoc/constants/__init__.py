"""Typed constants shared across Microdoc modules."""
