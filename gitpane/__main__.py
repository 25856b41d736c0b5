"""Allow running gitpane as ``python -m gitpane``."""

import sys

from gitpane.entrypoints.cli import main

sys.exit(main())
