"""Allow ``python -m pgnlex``."""

import sys

from pgnlex.cli import main

sys.exit(main())
