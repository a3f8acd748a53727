"""Config loading for Microdoc runs.

Settings are layered from lowest to highest precedence: built-in defaults,
``microdoc.yaml`` in the project directory, environment variables, and
explicit CLI arguments.
"""

from __future__ import annotations

import difflib
import os
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from microdoc.config.model import MicrodocConfig
from microdoc.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    ENV_DISABLED,
    ENV_DISABLED_VALUE,
    ENV_GLOB,
    ENV_PROJECT_DIR,
)
from microdoc.constants.globbing import PATTERN_SEPARATOR
from microdoc.exceptions import ConfigError


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    root: Path | None = None,
    glob: str | None = None,
    config_path: Path | None = None,
) -> MicrodocConfig:
    """Resolve run configuration from the config file, environment and overrides."""
    env = os.environ if environ is None else environ

    project_dir = root if root is not None else _env_path(env.get(ENV_PROJECT_DIR))
    config = MicrodocConfig(project_dir=project_dir.resolve() if project_dir else None)

    if env.get(ENV_DISABLED) == ENV_DISABLED_VALUE:
        return replace(config, disabled=True)

    if config_path is not None:
        config = replace(config, **_load_config_file(config_path.resolve(), explicit=True))
    elif config.project_dir is not None:
        config = replace(config, **_load_config_file(config.project_dir / CONFIG_FILENAME, explicit=False))

    env_glob = env.get(ENV_GLOB)
    if env_glob:
        config = replace(config, glob=env_glob)
    if glob:
        config = replace(config, glob=glob)
    return config


def _env_path(value: str | None) -> Path | None:
    if not value:
        return None
    return Path(value)


def _load_config_file(path: Path, *, explicit: bool) -> dict[str, Any]:
    """Read overrides from a ``microdoc.yaml`` file."""
    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return {}

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in raw:
        if str(key) not in ALLOWED_CONFIG_KEYS:
            raise ConfigError(f"Unknown config key {str(key)!r} in {path}{_suggest_key(str(key))}")

    overrides: dict[str, Any] = {}
    if "disabled" in raw:
        disabled = raw["disabled"]
        if not isinstance(disabled, bool):
            raise ConfigError("disabled must be a boolean")
        overrides["disabled"] = disabled
    if "glob" in raw:
        overrides["glob"] = _coerce_glob(raw["glob"])
    return overrides


def _coerce_glob(value: Any) -> str:
    """Accept a comma-separated string or a list of pattern strings."""
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return PATTERN_SEPARATOR.join(value)
    raise ConfigError("glob must be a string or a list of strings")


def _suggest_key(key: str) -> str:
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1)
    if not matches:
        return ""
    return f" (did you mean {matches[0]!r}?)"
