"""CLI entrypoint for Microdoc.

Intended to run as a session-start hook: it prints the context block on
stdout, or nothing at all, and keeps diagnostics on stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from microdoc import __version__
from microdoc.config import load_config
from microdoc.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from microdoc.constants.config import DEFAULT_GLOB, ENV_GLOB, ENV_PROJECT_DIR
from microdoc.exceptions import ConfigError, MicrodocError
from microdoc.reporting import render_docs
from microdoc.scanner import collect_docs

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog=BRAND_NAME, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help=f"Project root (default: ${ENV_PROJECT_DIR})",
    )
    parser.add_argument(
        "-g",
        "--glob",
        default=None,
        help=f"Comma-separated glob patterns (default: ${ENV_GLOB} or {DEFAULT_GLOB})",
    )
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(root=args.root, glob=args.glob, config_path=args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if not config.enabled or config.project_dir is None:
        logger.debug("Nothing to do: project dir unset or microdoc disabled")
        return 0

    try:
        entries = collect_docs(root=config.project_dir, patterns=config.patterns)
    except MicrodocError as exc:
        print(f"Microdoc error: {exc}", file=sys.stderr)
        return 1

    output = render_docs(entries)
    if output is not None:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
