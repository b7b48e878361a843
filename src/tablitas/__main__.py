"""Allow ``python -m tablitas``."""

import sys

from tablitas.cli import main

sys.exit(main())
