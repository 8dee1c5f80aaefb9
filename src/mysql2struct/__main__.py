"""Allow ``python -m mysql2struct``."""

import sys

from mysql2struct.cli import main

sys.exit(main())
