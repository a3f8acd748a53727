"""Configuration loading for Microdoc runs."""

from __future__ import annotations

from microdoc.config.loader import load_config
from microdoc.config.model import MicrodocConfig

__all__ = ["MicrodocConfig", "load_config"]
