"""Allow ``python -m ghevents``."""

from __future__ import annotations

from ghevents.cli import main

raise SystemExit(main())
