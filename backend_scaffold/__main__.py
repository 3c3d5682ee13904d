"""Allow ``python -m backend_scaffold``."""

import sys

from backend_scaffold.cli import main

sys.exit(main())
