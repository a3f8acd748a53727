"""Allow ``python -m microdoc``."""

from __future__ import annotations

from microdoc.cli.main import main

raise SystemExit(main())
