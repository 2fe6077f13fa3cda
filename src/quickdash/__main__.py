"""Allow ``python -m quickdash``."""

from quickdash.cli.main import main

raise SystemExit(main())
