"""Allow running the command line tool with ``python -m base62codec``."""

from __future__ import annotations

import sys

from base62codec.cli import main


sys.exit(main())
