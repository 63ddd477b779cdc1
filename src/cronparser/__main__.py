"""Allow running the parser with ``python -m cronparser``."""

from cronparser.cli import main

raise SystemExit(main())
